# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This file defines the string generators

Where a length is not supplied, a new length is drawn for every generated value.
"""

import string
import uuid

from .binary_generators import binary
from .number_generators import integers
from .random_singleton import RandomSingleton
from .utils import check_not_empty, check_not_none, check_that


#: list of all letters uppercase and lowercase
_LETTERS_ALL = list(string.ascii_letters)

#: list of alphanumeric chars in both cases
_ALNUM_ALL = list(string.ascii_letters + string.digits)

#: list of digits
_DIGITS_ZERO = list(string.digits)

# any code point from the space character up to the start of the surrogate block
_FIRST_CODE_POINT = 0x20
_LAST_CODE_POINT = 0xD7FF


def _randomText(alphabet, length):
    indices = RandomSingleton.nextIndices(len(alphabet), length)
    return "".join(alphabet[ix] for ix in indices)


def _checkLength(length):
    check_that(isinstance(length, int) and length > 0, f"length must be > 0, got {length!r}")


def _lengthGenerator(length, defaultMinLength, defaultMaxLength):
    if length is None:
        return integers(defaultMinLength, defaultMaxLength)

    _checkLength(length)
    return lambda: length


def strings(length=None):
    """Generates strings of arbitrary characters from the Basic Multilingual Plane

    :param length: length of each string. If `None`, lengths are drawn from `5 .. 999`
    :returns: generator of `str`
    """
    lengths = _lengthGenerator(length, 5, 1000)

    def generate():
        size = lengths()
        with RandomSingleton.lock():
            codePoints = RandomSingleton.getInstance().integers(_FIRST_CODE_POINT, _LAST_CODE_POINT + 1, size=size)
        return "".join(chr(cp) for cp in codePoints)

    return generate


def hexadecimal_strings(length):
    """Generates upper case hexadecimal strings of exactly `length` characters

    :param length: length of each string, must be > 0
    :returns: generator of `str`
    """
    _checkLength(length)
    binaryGenerator = binary(length)
    return lambda: binaryGenerator().hex().upper()[:length]


def alphabetic_strings(length=None):
    """Generates strings of ASCII letters in both cases

    :param length: length of each string. If `None`, lengths are drawn from `10 .. 99`
    :returns: generator of `str`
    """
    lengths = _lengthGenerator(length, 10, 100)
    return lambda: _randomText(_LETTERS_ALL, lengths())


def alphanumeric_strings(length=None):
    """Generates strings of ASCII letters and digits

    :param length: length of each string. If `None`, lengths are drawn from `10 .. 99`
    :returns: generator of `str`
    """
    lengths = _lengthGenerator(length, 10, 100)
    return lambda: _randomText(_ALNUM_ALL, lengths())


def numeric_strings(length=None):
    """Generates strings of decimal digits. Leading zeros are allowed.

    :param length: length of each string. If `None`, lengths are drawn from `4 .. 24`
    :returns: generator of `str`
    """
    lengths = _lengthGenerator(length, 4, 25)
    return lambda: _randomText(_DIGITS_ZERO, lengths())


def uuids():
    """Generates version 4 UUIDs in their canonical string form

    The UUIDs are built from the shared random source so that they repeat when a random seed is set.
    """
    return lambda: str(uuid.UUID(bytes=RandomSingleton.nextBytes(16), version=4))


def strings_from_fixed_list(values):
    """Generates strings by picking uniformly from `values`

    :param values: non empty list of candidate strings. The list is copied.
    :returns: generator of `str`
    """
    check_not_none(values, "values missing")
    check_not_empty(values, "No values specified")

    candidates = list(values)
    indices = integers(0, len(candidates))
    return lambda: candidates[indices()]


def as_string(generator):
    """Wraps `generator` so that it produces the string form of its values. `None` becomes the empty string.

    :param generator: generator of any type
    :returns: generator of `str`
    """
    check_that(generator is not None and callable(generator), "generator missing")

    def generate():
        value = generator()
        return "" if value is None else str(value)

    return generate
