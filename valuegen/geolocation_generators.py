# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the GPS coordinate generators, in decimal degrees
"""

from .number_generators import doubles


def latitudes():
    """Generates latitudes from `-90.0 .. 90.0`"""
    return doubles(-90.0, 90.0)


def longitudes():
    """Generates longitudes from `-180.0 .. 180.0`"""
    return doubles(-180.0, 180.0)
