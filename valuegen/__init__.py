#
# Copyright (C) 2024 The valuegen authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This module defines the package contents for the value generator library

Every generator in the library is a zero argument callable that returns a new value each time it is called.
The main entry points are the bounded range generators such as `integers` and `doubles`, and `pojos`, which
populates instances of plain data classes from their type annotations.

Date and time generators share the names `before` and `after`, so they are accessed through their modules,
`date_generators` and `time_generators`.
"""

from .valuegen_constants import DEFAULT_RANDOM_SEED, RANDOM_SEED_RANDOM, MIN_PYTHON_VERSION, \
                                INT_MIN_VALUE, INT_MAX_VALUE, LONG_MIN_VALUE, LONG_MAX_VALUE
from .utils import ValueGenError, InvalidArgumentError, InvalidBoundsError, NoEnumValuesError, \
    NotInstantiableError, check_that, check_not_none, check_not_empty, coalesce_values, one
from ._version import __version__
from .config import CollectionSizes
from .random_singleton import RandomSingleton
from .number_generators import integers, any_integers, positive_integers, small_positive_integers, \
    negative_integers, longs, any_longs, positive_longs, small_positive_longs, doubles, floats, any_doubles, \
    positive_doubles, small_positive_doubles, integers_from_fixed_list, doubles_from_fixed_list, \
    safe_increment, safe_decrement
from .boolean_generators import booleans, alternating_booleans
from .binary_generators import binary, byte_buffers, single_bytes
from .string_generators import strings, hexadecimal_strings, alphabetic_strings, alphanumeric_strings, \
    numeric_strings, uuids, strings_from_fixed_list, as_string
from . import time_generators, date_generators
from .network_generators import http_urls, https_urls, urls_with_protocol, ports, ip4_addresses
from .geolocation_generators import latitudes, longitudes
from .people_generators import names, ages, adult_ages, child_ages, phone_numbers, phone_number_strings, \
    popular_email_domains, emails, POPULAR_EMAIL_DOMAINS
from .place_generators import cities, states, countries, street_addresses, full_addresses
from .enum_generators import enum_values_of
from .collection_generators import list_of, map_of, from_list, lists, sets, maps, tuples
from .object_generators import pojos, PojoGenerator, DEFAULT_GENERATOR_MAPPINGS
from .frame_generators import data_frames, records

__all__ = ["valuegen_constants", "utils", "config", "random_singleton", "number_generators",
           "boolean_generators", "binary_generators", "string_generators", "time_generators",
           "date_generators", "network_generators", "geolocation_generators", "people_generators",
           "place_generators", "enum_generators", "collection_generators", "object_generators",
           "frame_generators", "resource_loader"
           ]


def python_version_check(python_version_expected):
    """Check against Python version

       Allows minimum version to be passed in to facilitate unit testing

       :param python_version_expected: = minimum version of python to support as tuple e.g (3,10)
       :return: True if passed

        """
    import sys
    return sys.version_info >= python_version_expected


# lets check for a correct python version or raise an exception
if not python_version_check(MIN_PYTHON_VERSION):
    raise RuntimeError(f"Minimum version of Python supported is {MIN_PYTHON_VERSION[0]}.{MIN_PYTHON_VERSION[1]}")
