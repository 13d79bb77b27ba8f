# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the binary generators
"""

from .random_singleton import RandomSingleton
from .utils import check_that


def binary(length):
    """Generates `bytes` values of exactly `length` random bytes

    :param length: number of bytes, must be >= 0
    :returns: generator of `bytes`
    """
    check_that(isinstance(length, int) and length >= 0, "length must be >= 0")
    return lambda: RandomSingleton.nextBytes(length)


def byte_buffers(size):
    """Generates mutable `bytearray` buffers of exactly `size` random bytes

    :param size: number of bytes, must be >= 0
    :returns: generator of `bytearray`
    """
    check_that(isinstance(size, int) and size >= 0, "size must be at least 0")
    delegate = binary(size)
    return lambda: bytearray(delegate())


def single_bytes():
    """Generates single random bytes, as `bytes` values of length one"""
    return binary(1)
