# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the enum generators
"""

import enum

from .number_generators import integers
from .utils import NoEnumValuesError, check_that


def enum_values_of(enumClass):
    """Generates members of `enumClass`, picked uniformly

    :param enumClass: subclass of `enum.Enum`
    :returns: generator of `enumClass` members
    :raises InvalidArgumentError: if `enumClass` is not an enum type
    :raises NoEnumValuesError: if `enumClass` has no members
    """
    check_that(isinstance(enumClass, type) and issubclass(enumClass, enum.Enum),
               f"Class is not an Enum type: [{enumClass!r}]")

    members = list(enumClass)
    check_that(len(members) > 0, f"Enum class {enumClass.__name__} has no values", NoEnumValuesError)

    indices = integers(0, len(members))
    return lambda: members[indices()]
