# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines generators of points in time

Generated values are timezone aware `datetime` objects in UTC, unless derived from a reference time in which case
they carry the reference time's timezone (or lack of one).
"""

from datetime import datetime, timedelta, timezone

from .number_generators import integers, longs
from .utils import InvalidArgumentError, check_that

_MAX_BEFORE_OFFSET = timedelta(days=999, hours=99, minutes=59, seconds=59, milliseconds=999)
_MAX_AFTER_OFFSET = timedelta(days=10999, hours=99, minutes=59, seconds=59, milliseconds=999)


def _checkDateTime(value, argName):
    check_that(value is not None, f"{argName} cannot be None")
    check_that(isinstance(value, datetime), f"{argName} must be a datetime, got {type(value).__name__}")


def _checkOffsetFits(instant, maxOffset, forward):
    # wall clock arithmetic, so compare without the timezone
    wallClock = instant.replace(tzinfo=None)
    if forward:
        check_that(wallClock <= datetime.max - maxOffset,
                   f"instant {instant} is too close to the latest representable time")
    else:
        check_that(wallClock >= datetime.min + maxOffset,
                   f"instant {instant} is too close to the earliest representable time")


def present_instants():
    """Generates the current time at the moment of each call"""
    return lambda: datetime.now(timezone.utc)


def past_instants():
    """Generates times before the moment of each call, by up to roughly 1000 days"""
    return lambda: before(datetime.now(timezone.utc))()


def future_instants():
    """Generates times after the moment of each call, by up to roughly 30 years"""
    return lambda: after(datetime.now(timezone.utc))()


def before(instant):
    """Generates times strictly before `instant`

    :param instant: reference `datetime`
    :returns: generator of `datetime`
    :raises InvalidArgumentError: if times up to 1000 days before `instant` cannot be represented
    """
    _checkDateTime(instant, "instant")
    _checkOffsetFits(instant, _MAX_BEFORE_OFFSET, forward=False)

    days = integers(1, 1000)
    hours = integers(0, 100)
    minutes = integers(0, 60)
    seconds = integers(0, 60)
    milliseconds = integers(0, 1000)

    def generate():
        return instant - timedelta(days=days(), hours=hours(), minutes=minutes(), seconds=seconds(),
                                   milliseconds=milliseconds())

    return generate


def after(instant):
    """Generates times strictly after `instant`

    :param instant: reference `datetime`
    :returns: generator of `datetime`
    :raises InvalidArgumentError: if times up to 11000 days after `instant` cannot be represented
    """
    _checkDateTime(instant, "instant")
    _checkOffsetFits(instant, _MAX_AFTER_OFFSET, forward=True)

    days = integers(1, 11000)
    hours = integers(0, 100)
    minutes = integers(0, 60)
    seconds = integers(0, 60)
    milliseconds = integers(0, 1000)

    def generate():
        return instant + timedelta(days=days(), hours=hours(), minutes=minutes(), seconds=seconds(),
                                   milliseconds=milliseconds())

    return generate


def anytime():
    """Generates past, future or present times with equal probability"""
    choices = integers(0, 3)
    pastTimes = past_instants()
    futureTimes = future_instants()
    presentTimes = present_instants()

    def generate():
        choice = choices()
        if choice == 0:
            return pastTimes()
        if choice == 1:
            return futureTimes()
        return presentTimes()

    return generate


def times_between(startTime, endTime):
    """Generates times in `startTime .. endTime`, excluding `endTime`, with microsecond resolution

    :param startTime: beginning of the range
    :param endTime: end of the range, must be after `startTime`
    :returns: generator of `datetime`
    """
    _checkDateTime(startTime, "startTime")
    _checkDateTime(endTime, "endTime")

    try:
        span = endTime - startTime
    except TypeError as ex:
        raise InvalidArgumentError("startTime and endTime must both be timezone aware or both be naive", ex) from ex

    check_that(span > timedelta(0), "startTime must be before endTime")

    offsets = longs(0, span // timedelta(microseconds=1))
    return lambda: startTime + timedelta(microseconds=offsets())
