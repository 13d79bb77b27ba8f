# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the boolean generators
"""

import itertools
import threading

from .random_singleton import RandomSingleton


def booleans():
    """Generates `True` and `False` with equal probability"""
    return lambda: RandomSingleton.nextInt(0, 2) == 1


def alternating_booleans():
    """Generates booleans that alternate on every call, starting with `False`

    Each call to this factory returns a generator with its own counter. The counter may be shared across threads.
    """
    counter = itertools.count(1)
    lock = threading.Lock()

    def generate():
        with lock:
            count = next(counter)
        return count % 2 == 0

    return generate
