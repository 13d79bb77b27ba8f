# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module holds the library version

`__version__` is rewritten by `bumpversion` when a release is cut. `__version_info__` is parsed from it so that
callers can compare versions numerically.
"""

import re
from typing import NamedTuple

_VERSION_PATTERN = re.compile(r"^(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?(?P<release>[A-Za-z]*)(?P<build>\d*)$")


class VersionInfo(NamedTuple):
    """Numeric parts of a version label, plus its release tag and build number"""
    major: int
    minor: int
    patch: int
    release: str
    build: str


def get_version(version: str) -> VersionInfo:
    """Parses a version label such as ``0.1.0``, ``1.2`` or ``1.2.3rc1``

    :param version: version label in the layout used by `bumpversion`
    :returns: `VersionInfo`; a missing patch number is reported as ``0``
    :raises ValueError: if `version` is not a valid version label
    """
    match = _VERSION_PATTERN.match(version)
    if not match:
        raise ValueError(f"Provided version '{version}' is invalid")

    return VersionInfo(major=int(match["major"]),
                       minor=int(match["minor"]),
                       patch=int(match["patch"] or 0),
                       release=match["release"],
                       build=match["build"])


__version__ = "0.1.0"  # DO NOT EDIT THIS DIRECTLY!  It is managed by bumpversion
__version_info__ = get_version(__version__)
