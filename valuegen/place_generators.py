# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the generators of places: cities, states, countries and street addresses

The place names are read once, when the module is imported, from the word lists bundled with the library.
"""

import logging

from .boolean_generators import booleans
from .number_generators import integers
from .people_generators import names
from .resource_loader import read_lines_from_resource
from .string_generators import alphabetic_strings, strings_from_fixed_list

logger = logging.getLogger(__name__)

_CITIES = read_lines_from_resource("places/cities.txt")
_STATES = read_lines_from_resource("places/states.txt")
_COUNTRIES = read_lines_from_resource("places/countries.txt")

_COMPASS_DIRECTIONS = ["N", "S", "E", "W"]
_STREET_ENDINGS = ["Blvd", "St", "Ave", "Pl", "Rd"]


def _fromListOrElse(values, resourceName):
    if values:
        return strings_from_fixed_list(values)

    logger.warning("No bundled %s available, generating random place names", resourceName)
    words = alphabetic_strings()
    return lambda: words().capitalize()


def cities():
    """Generates city names"""
    return _fromListOrElse(_CITIES, "cities")


def states():
    """Generates US state names"""
    return _fromListOrElse(_STATES, "states")


def countries():
    """Generates country names"""
    return _fromListOrElse(_COUNTRIES, "countries")


def street_addresses():
    """Generates street addresses such as ``1234 N Maple Ave`` or ``250 12 St``"""
    coinFlips = booleans()
    streetNames = names()
    streetNumbers = integers(100, 10_000)
    blockNumbers = integers(1, 300)
    directions = strings_from_fixed_list(_COMPASS_DIRECTIONS)
    endings = strings_from_fixed_list(_STREET_ENDINGS)

    def generate():
        streetNumber = streetNumbers()
        useCityBlockNumber = coinFlips()
        useDirection = coinFlips()

        if useCityBlockNumber and useDirection:
            return f"{streetNumber} {directions()} {blockNumbers()} St"
        if useCityBlockNumber:
            return f"{streetNumber} {blockNumbers()} St"
        if useDirection:
            return f"{streetNumber} {directions()} {streetNames()} {endings()}"
        return f"{streetNumber} {streetNames()} {endings()}"

    return generate


def full_addresses(isUSAddress=True):
    """Generates full postal addresses

    :param isUSAddress: if `True`, addresses end with a state and ``United States``, otherwise with a country
    :returns: generator of `str`
    """
    streetAddresses = street_addresses()
    cityNames = cities()
    stateNames = states()
    countryNames = countries()

    def generate():
        if isUSAddress:
            return f"{streetAddresses()} {cityNames()}, {stateNames()} United States"
        return f"{streetAddresses()} {cityNames()}, {countryNames()}"

    return generate
