# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This file defines the `ValueGenError` classes and argument checking functions

These are meant for internal use only
"""


class ValueGenError(Exception):
    """Exception class to represent value generation errors

        :param msg: message related to error
        :param baseException: underlying exception, if any that caused the issue
    """

    def __init__(self, msg, baseException=None):
        """ constructor
        """
        super().__init__(msg)
        self._underlyingException = baseException
        self._msg = msg

    @property
    def message(self):
        """ message passed when the error was raised """
        return self._msg

    @property
    def baseException(self):
        """ underlying exception, if any """
        return self._underlyingException

    def __repr__(self):
        return f"{self.__class__.__name__}(msg='{self._msg}', baseException={self._underlyingException})"

    def __str__(self):
        return f"{self.__class__.__name__}(msg='{self._msg}', baseException={self._underlyingException})"


class InvalidArgumentError(ValueGenError, ValueError):
    """Raised when a generator factory is called with malformed arguments

    Examples are negative lengths, missing required arguments and empty candidate lists
    """


class InvalidBoundsError(InvalidArgumentError):
    """Raised when the bounds passed to a range generator are inverted, empty or out of range"""


class NoEnumValuesError(InvalidArgumentError):
    """Raised when an enumerated type declares no members"""


class NotInstantiableError(ValueGenError, TypeError):
    """Raised when no usable constructor path exists for a composite type"""


def check_that(cond, msg="condition does not hold true", errorClass=InvalidArgumentError):
    """check_that(cond, msg) => raises `errorClass(msg)` if `cond` is not true

    :param cond: condition to test
    :param msg: Message to add to exception if exception is raised
    :param errorClass: class of exception to raise, defaults to `InvalidArgumentError`
    :raises: `errorClass` exception if condition does not hold true
    """
    if not cond:
        raise errorClass(msg)


def check_not_none(ref, msg="missing required argument"):
    """Raise `InvalidArgumentError` if `ref` is `None`

    :param ref: reference to test
    :param msg: Message to add to exception if exception is raised
    """
    check_that(ref is not None, msg)


def check_not_empty(value, msg="argument must not be empty"):
    """Raise `InvalidArgumentError` if `value` is `None` or empty

    :param value: string or sized collection to test
    :param msg: Message to add to exception if exception is raised
    """
    check_that(value is not None and len(value) > 0, msg)


def coalesce_values(*args):
    """For a supplied list of arguments, returns the first argument that does not have the value `None`

    :param args: variable list of arguments which are evaluated
    :returns: First argument in list that evaluates to a non-`None` value
    """
    for x in args:
        if x is not None:
            return x
    return None


def one(generator):
    """Draw a single value from a generator

    :param generator: zero argument callable
    :returns: value produced by the generator
    """
    check_that(generator is not None and callable(generator), "generator must be a zero argument callable")
    return generator()
