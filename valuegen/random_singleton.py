# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This file defines the `RandomSingleton` class

All generators in the library draw their entropy from the one NumPy random number generator held here.
NumPy generators are not thread safe, so every draw is made while holding the class lock.
"""

import logging
import threading

import numpy as np
import numpy.random

from .valuegen_constants import RANDOM_SEED_RANDOM, RANDOM_SEED_RANDOM_FLOAT


class RandomSingleton:
    """A singleton class which holds the process wide random number generator"""

    _lock = threading.RLock()
    _rngInstance: numpy.random.Generator | None = None
    _randomSeed: int | None = None

    @classmethod
    def getInstance(cls: type["RandomSingleton"]) -> numpy.random.Generator:
        """Gets the shared NumPy random number generator, creating it on first use.

        Callers that use the instance directly must hold `RandomSingleton.lock()` while doing so.

        :returns: A `numpy.random.Generator` instance
        """
        with cls._lock:
            if cls._rngInstance is None:
                cls._rngInstance = cls._newGenerator(cls._randomSeed)
            return cls._rngInstance

    @classmethod
    def lock(cls: type["RandomSingleton"]) -> threading.RLock:
        """Gets the lock guarding the shared generator"""
        return cls._lock

    @classmethod
    def withRandomSeed(cls: type["RandomSingleton"], seed: int | None) -> type["RandomSingleton"]:
        """Reseeds the shared generator.

        :param seed: Random seed value. ``None`` or ``-1`` mean use fresh OS entropy
        :returns: The `RandomSingleton` class, to allow chaining
        """
        assert seed is None or isinstance(seed, int | np.integer), "expecting an integer seed"

        with cls._lock:
            cls._randomSeed = seed
            cls._rngInstance = cls._newGenerator(seed)

        logger = logging.getLogger(__name__)
        logger.debug("Random seed set to %s", seed)
        return cls

    @classmethod
    def randomSeed(cls: type["RandomSingleton"]) -> int | None:
        """Gets the random seed last applied to the shared generator"""
        return cls._randomSeed

    @staticmethod
    def _newGenerator(seed: int | None) -> numpy.random.Generator:
        if seed is not None and seed not in (RANDOM_SEED_RANDOM, RANDOM_SEED_RANDOM_FLOAT):
            return numpy.random.default_rng(seed=seed)
        return numpy.random.default_rng()

    @classmethod
    def nextInt(cls: type["RandomSingleton"], inclusiveLowerBound: int, exclusiveUpperBound: int) -> int:
        """Draws an integer uniformly from `inclusiveLowerBound .. exclusiveUpperBound - 1`.

        Both bounds must lie within the signed 64 bit range. Equal bounds return the lower bound.

        :param inclusiveLowerBound: lowest value that may be returned
        :param exclusiveUpperBound: upper limit of the range, not itself returned
        :returns: Python `int`
        """
        assert inclusiveLowerBound <= exclusiveUpperBound, "lower bound must not exceed upper bound"

        if inclusiveLowerBound == exclusiveUpperBound:
            return inclusiveLowerBound

        with cls._lock:
            value = cls.getInstance().integers(inclusiveLowerBound, exclusiveUpperBound, dtype=np.int64)
        return int(value)

    @classmethod
    def nextDouble(cls: type["RandomSingleton"], inclusiveLowerBound: float, inclusiveUpperBound: float) -> float:
        """Draws a float uniformly from `inclusiveLowerBound .. inclusiveUpperBound`.

        :param inclusiveLowerBound: lowest value that may be returned
        :param inclusiveUpperBound: highest value that may be returned
        :returns: Python `float`
        """
        assert inclusiveLowerBound <= inclusiveUpperBound, "lower bound must not exceed upper bound"

        if inclusiveLowerBound == inclusiveUpperBound:
            return float(inclusiveLowerBound)

        with cls._lock:
            fraction = cls.getInstance().random()

        value = inclusiveLowerBound + (inclusiveUpperBound - inclusiveLowerBound) * fraction
        return float(min(max(value, inclusiveLowerBound), inclusiveUpperBound))

    @classmethod
    def nextBytes(cls: type["RandomSingleton"], count: int) -> bytes:
        """Draws `count` random bytes"""
        assert count >= 0, "count must be >= 0"

        with cls._lock:
            return cls.getInstance().bytes(count)

    @classmethod
    def nextIndices(cls: type["RandomSingleton"], size: int, count: int) -> list[int]:
        """Draws `count` indices, each uniformly from `0 .. size - 1`, as a list of Python ints"""
        assert size > 0, "size must be > 0"
        assert count >= 0, "count must be >= 0"

        with cls._lock:
            indices = cls.getInstance().integers(0, size, size=count)
        return [int(ix) for ix in indices]
