# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines library constants

"""
import sys

# random seed handling
DEFAULT_RANDOM_SEED: int = 42
RANDOM_SEED_RANDOM: int = -1
RANDOM_SEED_RANDOM_FLOAT: float = -1.0

# limits of the fixed width numeric types emulated by the range generators
INT_MIN_VALUE: int = -(2**31)
INT_MAX_VALUE: int = 2**31 - 1
LONG_MIN_VALUE: int = -(2**63)
LONG_MAX_VALUE: int = 2**63 - 1
SHORT_MAX_VALUE: int = 2**15 - 1
DOUBLE_MAX_VALUE: float = sys.float_info.max
FLOAT_MAX_VALUE: float = 3.4028234663852886e38

# sizes used when no explicit size is requested
DEFAULT_COLLECTION_MIN_SIZE: int = 3
DEFAULT_COLLECTION_MAX_SIZE: int = 25
DEFAULT_BINARY_SIZE: int = 333

# attempts allowed per requested element when filling sets and maps with unique keys
UNIQUE_ELEMENT_ATTEMPTS: int = 10

# minimum versions for version checks
MIN_PYTHON_VERSION: tuple[int, int] = (3, 10)
