# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the collection generators

`list_of` and `map_of` return a filled container straight away. `lists`, `sets`, `maps` and `tuples` return
generators which build a new container, of a newly drawn size, on every call.
"""

from .config import CollectionSizes
from .number_generators import integers
from .utils import check_not_empty, check_not_none, check_that, coalesce_values
from .valuegen_constants import UNIQUE_ELEMENT_ATTEMPTS


def _checkGenerator(generator, argName="generator"):
    check_that(generator is not None and callable(generator), f"{argName} must be a zero argument callable")


def _sizeGenerator(collectionSizes):
    sizes = coalesce_values(collectionSizes, CollectionSizes())
    check_that(isinstance(sizes, CollectionSizes), "collectionSizes must be a CollectionSizes instance")
    return integers(sizes.minSize, sizes.maxSize + 1)


def _checkSize(size):
    check_that(isinstance(size, int) and size >= 0, f"size must be >= 0, got {size!r}")


def _fillUnique(container, size, addFn):
    """Call `addFn` until `container` holds `size` elements, giving up after a bounded number of attempts"""
    attempts = size * UNIQUE_ELEMENT_ATTEMPTS
    while len(container) < size and attempts > 0:
        addFn()
        attempts -= 1
    return container


def list_of(generator, size=None):
    """Builds a list of values drawn from `generator`

    :param generator: element generator
    :param size: number of elements. If `None`, a size is drawn from the default `CollectionSizes`
    :returns: `list`
    """
    _checkGenerator(generator)
    if size is None:
        size = _sizeGenerator(None)()
    _checkSize(size)

    return [generator() for _ in range(size)]


def map_of(keyGenerator, valueGenerator, size=None):
    """Builds a dict from keys and values drawn from the generators

    :param keyGenerator: key generator
    :param valueGenerator: value generator
    :param size: number of entries. If `None`, a size is drawn from the default `CollectionSizes`.
                 Fewer entries are returned if the key generator keeps repeating keys.
    :returns: `dict`
    """
    _checkGenerator(keyGenerator, "keyGenerator")
    _checkGenerator(valueGenerator, "valueGenerator")
    if size is None:
        size = _sizeGenerator(None)()
    _checkSize(size)

    result = {}

    def addEntry():
        result[keyGenerator()] = valueGenerator()

    return _fillUnique(result, size, addEntry)


def from_list(values):
    """Generates values picked uniformly from `values`

    :param values: non empty list of candidates of any type. The list is copied.
    :returns: generator
    """
    check_not_none(values, "values missing")
    check_not_empty(values, "No values specified")

    candidates = list(values)
    indices = integers(0, len(candidates))
    return lambda: candidates[indices()]


def lists(generator, collectionSizes=None):
    """Generates lists of values drawn from `generator`

    :param generator: element generator
    :param collectionSizes: bounds on the list sizes, defaults to `CollectionSizes()`
    :returns: generator of `list`
    """
    _checkGenerator(generator)
    sizes = _sizeGenerator(collectionSizes)
    return lambda: [generator() for _ in range(sizes())]


def sets(generator, collectionSizes=None, frozen=False):
    """Generates sets of distinct values drawn from `generator`

    :param generator: element generator. Its values must be hashable.
    :param collectionSizes: bounds on the set sizes, defaults to `CollectionSizes()`
    :param frozen: if `True`, produce `frozenset` values
    :returns: generator of `set` or `frozenset`
    """
    _checkGenerator(generator)
    sizes = _sizeGenerator(collectionSizes)

    def generate():
        result = set()
        _fillUnique(result, sizes(), lambda: result.add(generator()))
        return frozenset(result) if frozen else result

    return generate


def maps(keyGenerator, valueGenerator, collectionSizes=None):
    """Generates dicts with keys and values drawn from the generators

    :param keyGenerator: key generator. Its values must be hashable.
    :param valueGenerator: value generator
    :param collectionSizes: bounds on the number of entries, defaults to `CollectionSizes()`
    :returns: generator of `dict`
    """
    _checkGenerator(keyGenerator, "keyGenerator")
    _checkGenerator(valueGenerator, "valueGenerator")
    sizes = _sizeGenerator(collectionSizes)
    return lambda: map_of(keyGenerator, valueGenerator, sizes())


def tuples(*generators):
    """Generates fixed length tuples, one element drawn from each generator in order

    :param generators: one generator per tuple position
    :returns: generator of `tuple`
    """
    check_that(len(generators) > 0, "at least one generator is required")
    for generator in generators:
        _checkGenerator(generator)

    return lambda: tuple(generator() for generator in generators)
