# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module implements configuration classes for value generation.
"""
from dataclasses import dataclass

from .utils import InvalidArgumentError
from .valuegen_constants import DEFAULT_COLLECTION_MAX_SIZE, DEFAULT_COLLECTION_MIN_SIZE


@dataclass(frozen=True, slots=True)
class CollectionSizes:
    """
    This class bounds the number of elements placed in generated lists, sets, maps and tuples.

    Both bounds are inclusive. Each generated container draws its size uniformly from the range.

    :param minSize: Minimum number of elements (default is ``3``).
    :param maxSize: Maximum number of elements (default is ``25``).
    """
    minSize: int = DEFAULT_COLLECTION_MIN_SIZE
    maxSize: int = DEFAULT_COLLECTION_MAX_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.minSize, int) or not isinstance(self.maxSize, int):
            raise InvalidArgumentError("Attributes 'minSize' and 'maxSize' must be integers")

        if self.minSize < 0:
            raise InvalidArgumentError(f"Attribute 'minSize' must be >= 0, got {self.minSize}")

        if self.maxSize < self.minSize:
            raise InvalidArgumentError(f"Attribute 'maxSize' ({self.maxSize}) must be >= 'minSize' ({self.minSize})")
