# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the network generators: URLs, ports and IPv4 addresses

URLs are produced as strings.
"""

import re

from .number_generators import integers
from .people_generators import popular_email_domains
from .string_generators import alphanumeric_strings
from .utils import check_not_empty, check_that
from .valuegen_constants import SHORT_MAX_VALUE

# URI scheme syntax from RFC 3986
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def http_urls():
    """Generates `http://` URLs"""
    return urls_with_protocol("http")


def https_urls():
    """Generates `https://` URLs"""
    return urls_with_protocol("https")


def urls_with_protocol(protocol):
    """Generates URLs of the form `<protocol>://<alphanumeric host>.<popular domain>`

    :param protocol: URL scheme, with or without the trailing `://`
    :returns: generator of `str`
    :raises InvalidArgumentError: if the protocol is empty or is not a valid URL scheme
    """
    check_not_empty(protocol, "missing protocol")

    cleanProtocol = protocol.replace("://", "")
    check_that(_SCHEME_PATTERN.match(cleanProtocol) is not None, f"Unknown protocol: {protocol}")

    hosts = alphanumeric_strings()
    domains = popular_email_domains()
    return lambda: f"{cleanProtocol}://{hosts()}.{domains()}"


def ports():
    """Generates port numbers from `22 .. 32766`"""
    return integers(22, SHORT_MAX_VALUE)


def ip4_addresses():
    """Generates dotted quad IPv4 addresses, each octet drawn from `1 .. 255`"""
    octets = integers(1, 256)
    return lambda: f"{octets()}.{octets()}.{octets()}.{octets()}"
