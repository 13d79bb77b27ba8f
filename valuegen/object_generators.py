# See the License for the specific language governing permissions and
# limitations under the License.
#

"""
This file defines the `PojoGenerator` class and the `pojos` factory, which populate plain data objects

A plain data object is any class whose attributes are declared with type annotations, such as a dataclass or an
ordinary class with annotated attributes. The generator reads the annotations, works out a generator for each
attribute and then builds new instances on every call.

All of the type inspection happens when the generator is created, so that argument errors and uninstantiable types
are reported straight away. Attributes that cannot be resolved are logged and left at their default values.
"""

import collections.abc
import dataclasses
import datetime
import enum
import inspect
import ipaddress
import logging
import types
import typing
import uuid
from collections import ChainMap

from . import date_generators, time_generators
from .binary_generators import binary, byte_buffers
from .boolean_generators import booleans
from .collection_generators import from_list, lists, maps, sets, tuples
from .config import CollectionSizes
from .enum_generators import enum_values_of
from .geolocation_generators import latitudes, longitudes
from .network_generators import ip4_addresses
from .number_generators import positive_doubles, small_positive_integers
from .people_generators import adult_ages, emails, names
from .place_generators import cities, countries
from .string_generators import alphabetic_strings, uuids
from .utils import NotInstantiableError, ValueGenError, check_not_none, check_that, coalesce_values
from .valuegen_constants import DEFAULT_BINARY_SIZE
from .valuegen_types import GeneratorMappings, T, ValueGenerator

logger = logging.getLogger(__name__)


def _converted(generator, convertFn):
    return lambda: convertFn(generator())


DEFAULT_GENERATOR_MAPPINGS = types.MappingProxyType({
    str: alphabetic_strings(),
    int: small_positive_integers(),
    float: positive_doubles(),
    bool: booleans(),
    bytes: binary(DEFAULT_BINARY_SIZE),
    bytearray: byte_buffers(DEFAULT_BINARY_SIZE),
    datetime.datetime: time_generators.anytime(),
    datetime.date: date_generators.any_dates(),
    uuid.UUID: _converted(uuids(), uuid.UUID),
    ipaddress.IPv4Address: _converted(ip4_addresses(), ipaddress.IPv4Address),
})
"""Read only mapping from a type to the generator used for attributes of that type"""

# used instead of the default mapping for attributes with well known names
_FIELD_NAME_GENERATORS = {
    (str, "name"): names,
    (str, "firstName"): names,
    (str, "first_name"): names,
    (str, "lastName"): names,
    (str, "last_name"): names,
    (str, "email"): emails,
    (str, "city"): cities,
    (str, "country"): countries,
    (float, "latitude"): latitudes,
    (float, "longitude"): longitudes,
    (int, "age"): adult_ages,
}

_LIST_ORIGINS = frozenset([list, collections.abc.Sequence, collections.abc.MutableSequence,
                           collections.abc.Collection, collections.abc.Iterable])
_SET_ORIGINS = frozenset([set, collections.abc.Set, collections.abc.MutableSet])
_MAP_ORIGINS = frozenset([dict, collections.abc.Mapping, collections.abc.MutableMapping])
_CONTAINER_TYPES = _LIST_ORIGINS | _SET_ORIGINS | _MAP_ORIGINS | frozenset([frozenset, tuple])

_UNION_ORIGINS = (typing.Union, types.UnionType)

_SUPPLIED_PARAMETER_KINDS = (inspect.Parameter.POSITIONAL_ONLY,
                             inspect.Parameter.POSITIONAL_OR_KEYWORD,
                             inspect.Parameter.KEYWORD_ONLY)


class _UnresolvableTypeError(ValueGenError):
    """Raised internally when no generator can be determined for a type hint"""


def _layeredMappings(customMappings):
    if customMappings is None:
        return DEFAULT_GENERATOR_MAPPINGS

    check_that(isinstance(customMappings, collections.abc.Mapping), "customMappings must be a mapping")
    for key, generator in customMappings.items():
        check_that(callable(generator), f"generator for {key!r} must be a zero argument callable")

    return ChainMap(dict(customMappings), DEFAULT_GENERATOR_MAPPINGS)


def _isImmutableType(cls):
    """Frozen dataclasses and named tuples can only be populated through their constructor"""
    if dataclasses.is_dataclass(cls) and cls.__dataclass_params__.frozen:
        return True
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


def _typeHints(cls):
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError) as ex:
        logger.warning("Could not resolve the type annotations of %s: %s", cls.__qualname__, ex)
        return {}


def _isClassLevelOnly(hint):
    return hint in (typing.ClassVar, typing.Final) or typing.get_origin(hint) in (typing.ClassVar, typing.Final)


def _unwrapOptional(hint):
    if typing.get_origin(hint) not in _UNION_ORIGINS:
        return hint

    members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
    if len(members) != 1:
        raise _UnresolvableTypeError(f"cannot choose a generator for union type {hint!r}")
    return members[0]


def _constructorSignature(cls):
    """Signature of the constructor of `cls`, with string annotations evaluated where possible"""
    try:
        return inspect.signature(cls, eval_str=True)
    except (NameError, SyntaxError, AttributeError, TypeError, ValueError) as ex:
        # unresolvable string annotations fall back to the class annotations
        logger.debug("Could not evaluate the constructor annotations of %s: %s", cls.__qualname__, ex)

    try:
        return inspect.signature(cls)
    except (TypeError, ValueError) as ex:
        raise NotInstantiableError(f"cannot inspect the constructor of {cls.__qualname__}", ex) from ex


def _mappedGenerator(mappings, hint):
    try:
        return mappings.get(hint)
    except TypeError:
        # unhashable hint
        return None


class PojoGenerator:
    """Generates new, populated instances of a plain data class

    :param classOfPojo: class to instantiate and populate
    :param customMappings: optional mapping from types to generators, consulted before `DEFAULT_GENERATOR_MAPPINGS`
    :param collectionSizes: bounds on the size of generated lists, sets, maps and variable length tuples
    :raises NotInstantiableError: if no way of calling the class constructor could be found

    Instances are built by calling the class with no arguments when all constructor parameters have defaults.
    Otherwise the required parameters are generated from their annotations. Frozen dataclasses and named tuples
    receive every annotated parameter, since they cannot be modified afterwards.

    After construction each annotated attribute (excluding `ClassVar` and `Final` attributes) is assigned a new
    value. Attributes are resolved to generators in this order:

    - an entry in the mappings for the exact type, refined by attribute name for well known names such as
      ``email`` or ``latitude`` when the entry is one of the defaults
    - a uniform choice of members for `enum.Enum` subclasses
    - a container of generated elements for lists, sets, frozensets, dicts and tuples that carry type arguments
    - a nested `PojoGenerator` for any other class

    A class that refers back to itself, directly or through other classes, is not recursed into again; the
    attribute that closes the cycle is skipped.

    .. note::
       Attributes that cannot be resolved or assigned are logged as warnings and keep whatever value the
       constructor gave them. Only failure to construct the instance itself is raised as an error.
    """

    def __init__(self, classOfPojo, customMappings=None, collectionSizes=None, _typesInProgress=frozenset()):
        check_not_none(classOfPojo, "missing class of POJO")
        check_that(isinstance(classOfPojo, type), f"expecting a class, got {classOfPojo!r}")

        self._classOfPojo = classOfPojo
        self._customMappings = dict(customMappings) if customMappings is not None else {}
        self._mappings = _layeredMappings(customMappings)
        self._collectionSizes = coalesce_values(collectionSizes, CollectionSizes())
        self._typesInProgress = _typesInProgress | {classOfPojo}

        check_that(isinstance(self._collectionSizes, CollectionSizes),
                   "collectionSizes must be a CollectionSizes instance")

        self._classHints = _typeHints(classOfPojo)
        self._constructorPlan = self._planConstructor()
        self._fieldPlan = self._planFields()

        # make sure the class can actually be built before handing out the generator
        try:
            self._instantiate()
        except Exception as ex:
            logger.warning("Cannot instantiate type %s", classOfPojo.__qualname__)
            raise NotInstantiableError(f"cannot instantiate class: {classOfPojo.__qualname__}", ex) from ex

    def __repr__(self):
        return f"PojoGenerator({self._classOfPojo.__qualname__}, fields={[name for name, _ in self._fieldPlan]})"

    def __call__(self):
        try:
            instance = self._instantiate()
        except Exception as ex:
            raise NotInstantiableError(f"Failed to instantiate {self._classOfPojo.__qualname__}", ex) from ex

        for fieldName, generator in self._fieldPlan:
            self._tryInjectField(instance, fieldName, generator)

        return instance

    @property
    def classOfPojo(self):
        """ class of the generated instances """
        return self._classOfPojo

    @property
    def fieldNames(self):
        """ names of the attributes assigned after construction """
        return [name for name, _ in self._fieldPlan]

    def _planConstructor(self):
        cls = self._classOfPojo

        if inspect.isabstract(cls):
            raise NotInstantiableError(f"cannot instantiate abstract class: {cls.__qualname__}")

        signature = _constructorSignature(cls)

        supplyAll = _isImmutableType(cls)
        parameters = [p for p in signature.parameters.values() if p.kind in _SUPPLIED_PARAMETER_KINDS]

        plan = []
        for parameter in parameters:
            isRequired = parameter.default is inspect.Parameter.empty
            if not isRequired and not supplyAll:
                continue

            try:
                generator = self._resolve(self._parameterHint(parameter), parameter.name)
            except ValueGenError as ex:
                if isRequired:
                    raise NotInstantiableError(
                        f"cannot generate argument '{parameter.name}' for the constructor of {cls.__qualname__}",
                        ex) from ex

                logger.warning("Using the default for argument '%s' of %s: %s", parameter.name, cls.__qualname__, ex)
                continue

            plan.append((parameter, generator))

        return plan

    def _parameterHint(self, parameter):
        annotation = parameter.annotation
        if annotation is not inspect.Parameter.empty and not isinstance(annotation, str):
            return annotation

        if parameter.name in self._classHints:
            return self._classHints[parameter.name]

        raise _UnresolvableTypeError(f"argument '{parameter.name}' has no type annotation")

    def _planFields(self):
        cls = self._classOfPojo
        if _isImmutableType(cls):
            return []

        plan = []
        for fieldName, hint in self._classHints.items():
            if fieldName.startswith("__") or _isClassLevelOnly(hint):
                continue

            try:
                generator = self._resolve(hint, fieldName)
            except ValueGenError as ex:
                logger.warning("Could not find a suitable generator for field %s of %s with type %s: %s",
                               fieldName, cls.__qualname__, hint, ex)
                continue

            plan.append((fieldName, generator))

        return plan

    def _resolve(self, hint, fieldName=None):
        hint = _unwrapOptional(hint)

        generator = _mappedGenerator(self._mappings, hint)
        if generator is not None:
            if _mappedGenerator(self._customMappings, hint) is None:
                refinement = _FIELD_NAME_GENERATORS.get((hint, fieldName))
                if refinement is not None:
                    return refinement()
            return generator

        origin = typing.get_origin(hint)
        if origin is typing.Literal:
            return from_list(typing.get_args(hint))

        if origin is not None:
            return self._resolveGeneric(hint, origin)

        if not isinstance(hint, type):
            raise _UnresolvableTypeError(f"unsupported type annotation {hint!r}")

        if issubclass(hint, enum.Enum):
            return enum_values_of(hint)

        if hint in _CONTAINER_TYPES:
            raise _UnresolvableTypeError(f"collection type {hint.__name__} lacks generic type arguments")

        if hint in self._typesInProgress:
            raise _UnresolvableTypeError(f"recursive reference to {hint.__qualname__}")

        return PojoGenerator(hint, self._customMappings, self._collectionSizes, self._typesInProgress)

    def _resolveGeneric(self, hint, origin):
        args = typing.get_args(hint)
        if not args or any(isinstance(arg, typing.TypeVar) for arg in args):
            raise _UnresolvableTypeError(f"collection type {hint!r} lacks generic type arguments")

        if origin in _LIST_ORIGINS:
            return lists(self._resolve(args[0]), self._collectionSizes)

        if origin in _SET_ORIGINS:
            return sets(self._resolve(args[0]), self._collectionSizes)

        if origin is frozenset:
            return sets(self._resolve(args[0]), self._collectionSizes, frozen=True)

        if origin in _MAP_ORIGINS:
            return maps(self._resolve(args[0]), self._resolve(args[1]), self._collectionSizes)

        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                elements = lists(self._resolve(args[0]), self._collectionSizes)
                return lambda: tuple(elements())
            return tuples(*[self._resolve(arg) for arg in args])

        raise _UnresolvableTypeError(f"unsupported generic type {hint!r}")

    def _instantiate(self):
        args = []
        kwargs = {}
        for parameter, generator in self._constructorPlan:
            if parameter.kind is inspect.Parameter.POSITIONAL_ONLY:
                args.append(generator())
            else:
                kwargs[parameter.name] = generator()

        return self._classOfPojo(*args, **kwargs)

    def _tryInjectField(self, instance, fieldName, generator):
        try:
            setattr(instance, fieldName, generator())
        except Exception as ex:
            logger.warning("Could not inject field %s of %s: %s", fieldName, self._classOfPojo.__qualname__, ex)


def pojos(classOfPojo: type[T], customMappings: GeneratorMappings | None = None,
          collectionSizes: CollectionSizes | None = None) -> ValueGenerator[T]:
    """Generates populated instances of `classOfPojo`

    If the mappings have an entry for `classOfPojo` itself, that generator is returned unchanged. Otherwise a
    `PojoGenerator` is created; see its documentation for how attributes are populated.

    :param classOfPojo: class to generate instances of
    :param customMappings: optional mapping from types to generators, consulted before `DEFAULT_GENERATOR_MAPPINGS`
    :param collectionSizes: bounds on the size of generated containers, defaults to `CollectionSizes()`
    :returns: generator of `classOfPojo` instances
    :raises InvalidArgumentError: if `classOfPojo` is not a class, or is an enum or collection type
    :raises NotInstantiableError: if the class cannot be constructed
    """
    check_not_none(classOfPojo, "missing class of POJO")
    check_that(isinstance(classOfPojo, type), f"expecting a class, got {classOfPojo!r}")

    generator = _mappedGenerator(_layeredMappings(customMappings), classOfPojo)
    if generator is not None:
        return generator

    check_that(not issubclass(classOfPojo, enum.Enum),
               "Cannot use pojos with an Enum type. Use enum_values_of instead.")
    check_that(classOfPojo not in _CONTAINER_TYPES,
               "Cannot use pojos with a collection type. Use the collection generators instead.")

    return PojoGenerator(classOfPojo, customMappings, collectionSizes)
