# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines generators of calendar dates (`datetime.date` values)

Most of the generators delegate to the equivalent time generator and truncate the result to a date.
"""

from datetime import date, datetime, timezone

from . import time_generators
from .number_generators import integers
from .utils import check_that


def _checkDate(value, argName):
    check_that(value is not None, f"{argName} cannot be None")
    check_that(isinstance(value, date) and not isinstance(value, datetime),
               f"{argName} must be a date, got {type(value).__name__}")


def _startOfDay(value):
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def to_date(generator):
    """Converts a generator of `datetime` values into a generator of `date` values

    :param generator: generator of `datetime`. It is called once to check it produces values.
    :returns: generator of `date`
    """
    check_that(generator is not None and callable(generator), "generator cannot be None")
    check_that(generator() is not None, "generator produced None")

    return lambda: generator().date()


def present_dates():
    """Generates the current UTC date at the moment of each call"""
    return to_date(time_generators.present_instants())


def past_dates():
    """Generates dates before today"""
    return lambda: before(datetime.now(timezone.utc).date())()


def future_dates():
    """Generates dates after today"""
    return lambda: after(datetime.now(timezone.utc).date())()


def before(referenceDate):
    """Generates dates strictly before `referenceDate`

    :param referenceDate: reference `date`
    :returns: generator of `date`
    """
    _checkDate(referenceDate, "referenceDate")
    return to_date(time_generators.before(_startOfDay(referenceDate)))


def after(referenceDate):
    """Generates dates strictly after `referenceDate`

    :param referenceDate: reference `date`
    :returns: generator of `date`
    """
    _checkDate(referenceDate, "referenceDate")
    return to_date(time_generators.after(_startOfDay(referenceDate)))


def any_dates():
    """Generates past, future or present dates with equal probability"""
    return to_date(time_generators.anytime())


def dates_between(startDate, endDate):
    """Generates dates in `startDate .. endDate`, excluding `endDate`

    :param startDate: first date of the range
    :param endDate: end of the range, must be after `startDate`
    :returns: generator of `date`
    """
    _checkDate(startDate, "startDate")
    _checkDate(endDate, "endDate")
    check_that(startDate < endDate, "endDate must be after startDate")

    offsets = integers(0, (endDate - startDate).days)
    return lambda: date.fromordinal(startDate.toordinal() + offsets())
