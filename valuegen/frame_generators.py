# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines generators of Pandas data frames

Each column of the data frame is filled from its own value generator, so any of the generators in this library
(including `pojos`) can be used to build tabular test data.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pandas as pd

from .config import CollectionSizes
from .number_generators import integers
from .utils import check_not_empty, check_that, coalesce_values
from .valuegen_types import ValueGenerator

logger = logging.getLogger(__name__)


def _rowCountGenerator(rows: int | None, collectionSizes: CollectionSizes | None) -> ValueGenerator[int]:
    if rows is not None:
        check_that(isinstance(rows, int) and rows >= 0, f"rows must be >= 0, got {rows!r}")
        return lambda: rows

    sizes = coalesce_values(collectionSizes, CollectionSizes())
    check_that(isinstance(sizes, CollectionSizes), "collectionSizes must be a CollectionSizes instance")
    return integers(sizes.minSize, sizes.maxSize + 1)


def data_frames(columnGenerators: Mapping[str, ValueGenerator[Any]], rows: int | None = None,
                collectionSizes: CollectionSizes | None = None) -> ValueGenerator[pd.DataFrame]:
    """Generates Pandas data frames with one column per generator

    :param columnGenerators: mapping from column name to the generator used for that column's values.
                             Columns appear in the order of the mapping.
    :param rows: number of rows in every frame. If `None`, the row count is drawn for each frame
                 from `collectionSizes`
    :param collectionSizes: bounds on the row count when `rows` is not given, defaults to `CollectionSizes()`
    :returns: generator of `pandas.DataFrame`
    """
    check_that(isinstance(columnGenerators, Mapping), "columnGenerators must be a mapping")
    check_not_empty(columnGenerators, "at least one column generator is required")
    for columnName, generator in columnGenerators.items():
        check_that(callable(generator), f"generator for column '{columnName}' must be a zero argument callable")

    columns = dict(columnGenerators)
    rowCounts = _rowCountGenerator(rows, collectionSizes)

    def generate() -> pd.DataFrame:
        rowCount = rowCounts()
        logger.debug("Generating data frame with %d rows and columns %s", rowCount, list(columns))
        data = {name: pd.Series([generator() for _ in range(rowCount)], dtype=object if rowCount == 0 else None)
                for name, generator in columns.items()}
        return pd.DataFrame(data, columns=list(columns))

    return generate


def records(generator: ValueGenerator[Any], rows: int) -> pd.DataFrame:
    """Builds a data frame from `rows` objects drawn from `generator`

    Mappings and named tuples become one column per key or field. Other objects become one column per
    public attribute.

    :param generator: generator of objects, for example `pojos(SomeClass)`
    :param rows: number of rows
    :returns: `pandas.DataFrame`
    """
    check_that(callable(generator), "generator must be a zero argument callable")
    check_that(isinstance(rows, int) and rows >= 0, f"rows must be >= 0, got {rows!r}")

    values = [generator() for _ in range(rows)]
    return pd.DataFrame.from_records([_asRecord(value) for value in values])


def _asRecord(value):
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return value._asdict()
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    if hasattr(value, "__slots__"):
        return {name: getattr(value, name) for name in value.__slots__ if hasattr(value, name)}
    return {"value": value}
