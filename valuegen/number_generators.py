# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the numeric generators, including the bounded range generators.

The range generators never draw a signed value directly. Ranges are split by sign and a non negative magnitude
is drawn and then signed. This keeps draws inside the emulated fixed width types even when a bound is the type's
minimum value, whose magnitude is not representable in the type.

Integer and long generators use an exclusive upper bound. Double and float generators use an inclusive upper bound.
"""

import math

import numpy as np

from .boolean_generators import booleans
from .random_singleton import RandomSingleton
from .utils import InvalidBoundsError, check_not_empty, check_not_none, check_that
from .valuegen_constants import (
    DOUBLE_MAX_VALUE,
    FLOAT_MAX_VALUE,
    INT_MAX_VALUE,
    INT_MIN_VALUE,
    LONG_MAX_VALUE,
    LONG_MIN_VALUE,
)


def safe_increment(value, maxValue=LONG_MAX_VALUE):
    """Increment `value` by one, saturating at `maxValue` rather than overflowing

    :param value: value to increment
    :param maxValue: maximum value of the emulated type
    :returns: `value + 1`, or `value` if it is already `maxValue`
    """
    return value if value >= maxValue else value + 1


def safe_decrement(value, minValue=LONG_MIN_VALUE):
    """Decrement `value` by one, saturating at `minValue` rather than overflowing

    :param value: value to decrement
    :param minValue: minimum value of the emulated type
    :returns: `value - 1`, or `value` if it is already `minValue`
    """
    return value if value <= minValue else value - 1


def _checkIntegralBounds(inclusiveLowerBound, exclusiveUpperBound, minValue, maxValue):
    for bound in (inclusiveLowerBound, exclusiveUpperBound):
        check_that(isinstance(bound, int | np.integer) and not isinstance(bound, bool),
                   f"bounds must be integers, got {bound!r}", InvalidBoundsError)
        check_that(minValue <= bound <= maxValue,
                   f"bound {bound} is outside of the range {minValue} .. {maxValue}", InvalidBoundsError)

    check_that(inclusiveLowerBound < exclusiveUpperBound, "Lower Bound must be < Upper Bound", InvalidBoundsError)


def _boundedIntegral(inclusiveLowerBound, exclusiveUpperBound, minValue, maxValue):
    lower = int(inclusiveLowerBound)
    upper = int(exclusiveUpperBound)
    isNegativeLowerBound = lower < 0
    isNegativeUpperBound = upper <= 0
    coinFlips = booleans()

    def generate():
        if isNegativeLowerBound and isNegativeUpperBound:
            if upper == minValue + 1:
                return lower

            # reflect into positive space: [lower, upper) becomes (-upper, -lower]
            reflectedMin = -upper
            reflectedMax = maxValue if lower == minValue else -lower

            # adjust by one, for inclusivity
            value = RandomSingleton.nextInt(safe_increment(reflectedMin, maxValue),
                                            safe_increment(reflectedMax, maxValue))
            return -value

        if isNegativeLowerBound:
            if coinFlips():
                magnitudeMax = maxValue if lower == minValue else -lower
                return -RandomSingleton.nextInt(0, safe_increment(magnitudeMax, maxValue))

            return RandomSingleton.nextInt(0, upper)

        return RandomSingleton.nextInt(lower, upper)

    return generate


def integers(inclusiveLowerBound, exclusiveUpperBound):
    """Generates 32 bit integers in the range `inclusiveLowerBound .. exclusiveUpperBound - 1`

    :param inclusiveLowerBound: lowest value that may be produced
    :param exclusiveUpperBound: upper limit, never produced. Must be greater than `inclusiveLowerBound`
    :returns: generator of `int`
    :raises InvalidBoundsError: if the bounds are inverted, equal or outside of the 32 bit range
    """
    _checkIntegralBounds(inclusiveLowerBound, exclusiveUpperBound, INT_MIN_VALUE, INT_MAX_VALUE)
    return _boundedIntegral(inclusiveLowerBound, exclusiveUpperBound, INT_MIN_VALUE, INT_MAX_VALUE)


def any_integers():
    """Generates integers from anywhere in the 32 bit range"""
    return integers(INT_MIN_VALUE, INT_MAX_VALUE)


def positive_integers():
    """Generates integers from `1` up to the 32 bit maximum"""
    return integers(1, INT_MAX_VALUE)


def small_positive_integers():
    """Generates integers from `1 .. 999`"""
    return integers(1, 1000)


def negative_integers():
    """Generates integers strictly below zero"""
    delegate = positive_integers()

    def generate():
        value = delegate()
        return value if value < 0 else -value

    return generate


def longs(inclusiveLowerBound, exclusiveUpperBound):
    """Generates 64 bit integers in the range `inclusiveLowerBound .. exclusiveUpperBound - 1`

    :param inclusiveLowerBound: lowest value that may be produced
    :param exclusiveUpperBound: upper limit, never produced. Must be greater than `inclusiveLowerBound`
    :returns: generator of `int`
    :raises InvalidBoundsError: if the bounds are inverted, equal or outside of the 64 bit range
    """
    _checkIntegralBounds(inclusiveLowerBound, exclusiveUpperBound, LONG_MIN_VALUE, LONG_MAX_VALUE)
    return _boundedIntegral(inclusiveLowerBound, exclusiveUpperBound, LONG_MIN_VALUE, LONG_MAX_VALUE)


def any_longs():
    """Generates integers from anywhere in the 64 bit range"""
    return longs(LONG_MIN_VALUE, LONG_MAX_VALUE)


def positive_longs():
    """Generates integers from `1` up to the 64 bit maximum"""
    return longs(1, LONG_MAX_VALUE)


def small_positive_longs():
    """Generates integers from `1 .. 9999`"""
    return longs(1, 10_000)


def _checkFloatingBounds(inclusiveLowerBound, inclusiveUpperBound, maxValue):
    for bound in (inclusiveLowerBound, inclusiveUpperBound):
        check_that(isinstance(bound, int | float | np.integer | np.floating) and not isinstance(bound, bool),
                   f"bounds must be numbers, got {bound!r}", InvalidBoundsError)
        check_that(math.isfinite(bound) and -maxValue <= bound <= maxValue,
                   f"bound {bound} is outside of the range {-maxValue} .. {maxValue}", InvalidBoundsError)

    check_that(inclusiveLowerBound <= inclusiveUpperBound, "Upper Bound must be greater than Lower Bound",
               InvalidBoundsError)


def _boundedFloating(inclusiveLowerBound, inclusiveUpperBound):
    lower = float(inclusiveLowerBound)
    upper = float(inclusiveUpperBound)
    isNegativeLowerBound = lower < 0
    isNegativeUpperBound = upper < 0
    coinFlips = booleans()

    def generate():
        if isNegativeLowerBound and isNegativeUpperBound:
            return -RandomSingleton.nextDouble(-upper, -lower)

        if isNegativeLowerBound:
            if coinFlips():
                return -RandomSingleton.nextDouble(0.0, -lower)

            return RandomSingleton.nextDouble(0.0, upper)

        return RandomSingleton.nextDouble(lower, upper)

    return generate


def doubles(inclusiveLowerBound, inclusiveUpperBound):
    """Generates doubles in the range `inclusiveLowerBound .. inclusiveUpperBound`

    :param inclusiveLowerBound: lowest value that may be produced
    :param inclusiveUpperBound: highest value that may be produced
    :returns: generator of `float`
    :raises InvalidBoundsError: if the bounds are inverted or not finite
    """
    _checkFloatingBounds(inclusiveLowerBound, inclusiveUpperBound, DOUBLE_MAX_VALUE)
    return _boundedFloating(inclusiveLowerBound, inclusiveUpperBound)


def floats(inclusiveLowerBound, inclusiveUpperBound):
    """Generates single precision values in the range `inclusiveLowerBound .. inclusiveUpperBound`

    Values are returned as Python floats holding a value representable as a 32 bit float, except where rounding
    would carry the value outside of the bounds.

    :param inclusiveLowerBound: lowest value that may be produced
    :param inclusiveUpperBound: highest value that may be produced
    :returns: generator of `float`
    :raises InvalidBoundsError: if the bounds are inverted or outside of the single precision range
    """
    _checkFloatingBounds(inclusiveLowerBound, inclusiveUpperBound, FLOAT_MAX_VALUE)
    delegate = _boundedFloating(inclusiveLowerBound, inclusiveUpperBound)

    def generate():
        value = delegate()
        rounded = float(np.float32(value))
        if inclusiveLowerBound <= rounded <= inclusiveUpperBound:
            return rounded
        return value

    return generate


def any_doubles():
    """Generates doubles from anywhere in the finite double range"""
    return doubles(-DOUBLE_MAX_VALUE, DOUBLE_MAX_VALUE)


def positive_doubles():
    """Generates doubles from `0.1` up to the double maximum"""
    return doubles(0.1, DOUBLE_MAX_VALUE)


def small_positive_doubles():
    """Generates doubles from `0.1 .. 1000.0`"""
    return doubles(0.1, 1000.0)


def integers_from_fixed_list(values):
    """Generates integers by picking uniformly from `values`

    :param values: non empty list of candidate integers. The list is copied.
    :returns: generator of `int`
    """
    check_not_none(values, "values missing")
    check_not_empty(values, "No values specified")

    candidates = list(values)
    indices = integers(0, len(candidates))
    return lambda: candidates[indices()]


def doubles_from_fixed_list(values):
    """Generates doubles by picking uniformly from `values`

    :param values: non empty list of candidate doubles. The list is copied.
    :returns: generator of `float`
    """
    check_not_none(values, "values missing")
    check_not_empty(values, "No values specified")

    candidates = list(values)
    indices = integers(0, len(candidates))
    return lambda: candidates[indices()]
