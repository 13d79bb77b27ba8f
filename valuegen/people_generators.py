# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the generators of people related values: names, ages, phone numbers and emails
"""

import logging

from .number_generators import integers
from .resource_loader import read_lines_from_resource
from .string_generators import alphabetic_strings, alphanumeric_strings, strings_from_fixed_list
from .utils import check_not_empty, check_that

logger = logging.getLogger(__name__)

_NAMES = read_lines_from_resource("people/names.txt")

POPULAR_EMAIL_DOMAINS = (
    "yahoo.com",
    "google.com",
    "gmail.com",
    "outlook.com",
    "apple.com",
    "icloud.com",
    "microsoft.com",
)


def _generatedNames():
    firstLetters = alphabetic_strings(1)
    lengths = integers(2, 15)

    def generate():
        restOfTheName = alphabetic_strings(lengths() - 1)()
        return firstLetters().upper() + restOfTheName.lower()

    return generate


def names():
    """Generates capitalized first names

    Names come from the bundled name list. If the list could not be loaded, capitalized random words are generated.
    """
    if _NAMES:
        return strings_from_fixed_list(_NAMES)

    logger.warning("No bundled names available, generating random names")
    return _generatedNames()


def ages():
    """Generates ages from `1 .. 99`"""
    return integers(1, 100)


def adult_ages():
    """Generates adult ages from `18 .. 99`"""
    return integers(18, 100)


def child_ages():
    """Generates child ages from `1 .. 17`"""
    return integers(1, 18)


def phone_numbers():
    """Generates ten digit phone numbers as integers"""
    delegate = phone_number_strings()
    return lambda: int(delegate().replace("-", ""))


def phone_number_strings():
    """Generates phone numbers formatted as ``NNN-NNN-NNNN``"""
    firstParts = integers(100, 1000)
    secondParts = integers(100, 1000)
    thirdParts = integers(1000, 10000)
    return lambda: f"{firstParts()}-{secondParts()}-{thirdParts()}"


def popular_email_domains():
    """Generates domains from `POPULAR_EMAIL_DOMAINS`"""
    return strings_from_fixed_list(POPULAR_EMAIL_DOMAINS)


def emails(domainGenerator=None):
    """Generates email addresses of the form `<alphanumeric user>@<domain>`

    :param domainGenerator: generator of domains, defaults to `popular_email_domains()`.
                            It is called once to check that it produces a non empty domain.
    :returns: generator of `str`
    """
    if domainGenerator is None:
        domainGenerator = popular_email_domains()

    check_that(callable(domainGenerator), "domainGenerator missing")
    check_not_empty(domainGenerator(), "Email Domain Generator returned empty String")

    usernames = alphanumeric_strings()
    return lambda: f"{usernames()}@{domainGenerator()}"
