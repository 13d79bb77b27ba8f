# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This file defines access to the word lists bundled with the library

Word lists are newline delimited UTF-8 text files under the package's `resources` directory.
"""

import logging
from importlib import resources

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "valuegen"
RESOURCE_DIRECTORY = "resources"


def read_lines_from_resource(path, package=RESOURCE_PACKAGE):
    """Reads the non blank lines of a bundled word list

    :param path: path of the word list relative to the resources directory, e.g. ``"places/cities.txt"``
    :param package: package holding the resources directory
    :returns: list of stripped lines in file order, or an empty list if the resource cannot be read
    """
    assert path is not None and len(path) > 0, "resource path cannot be empty"

    resource = resources.files(package).joinpath(RESOURCE_DIRECTORY)
    for part in path.split("/"):
        resource = resource.joinpath(part)

    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        logger.warning("Could not load resource at [%s]: %s", path, ex)
        return []

    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    logger.debug("Successfully read [%d] lines from resource [%s]", len(lines), path)
    return lines
