# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines type aliases for common types used throughout the library.
"""
from collections.abc import Callable, Mapping
from typing import Any, TypeVar


T = TypeVar("T")

ValueGenerator = Callable[[], T]
"""A zero argument callable returning a freshly generated value of a fixed type on every call."""

GeneratorMappings = Mapping[type, Callable[[], Any]]
"""Mapping from a type to a generator capable of producing instances of that type."""
