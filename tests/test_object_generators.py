import abc
import dataclasses
import enum
import ipaddress
import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import ClassVar, Literal, NamedTuple, Optional

import pytest

import valuegen as vg
from valuegen import CollectionSizes, DEFAULT_GENERATOR_MAPPINGS, InvalidArgumentError, NotInstantiableError, \
    PojoGenerator, pojos


class Color(enum.Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


@dataclass
class Address:
    street: str = ""
    city: str = ""
    zipCode: int = 0


@dataclass
class Person:
    name: str = ""
    email: str = ""
    age: int = 0
    latitude: float = 0.0
    address: Address | None = None
    nicknames: list[str] = field(default_factory=list)
    favouriteColor: Optional[Color] = None


class Composite:
    label: str
    count: int
    ratio: float
    flag: bool
    payload: bytes
    buffer: bytearray
    created: datetime
    day: date
    identifier: uuid.UUID
    host: ipaddress.IPv4Address
    tags: list[str]
    lookup: dict[str, Address]
    uniqueCodes: set[int]
    frozenCodes: frozenset[str]
    pair: tuple[int, str]
    history: tuple[float, ...]
    mode: Literal["fast", "slow"]
    erased: list = None
    ambiguous: int | str = 7
    instances: ClassVar[int] = 0


class Point:
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y


class Ruler:
    def __init__(self, length: "int", unit: "Optional[str]"):
        self.length = length
        self.unit = unit


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float
    label: str = "origin"


class Pair(NamedTuple):
    left: int
    right: str


class TreeNode:
    label: str
    parent: "TreeNode | None" = None


class Department:
    title: str
    manager: "Employee"


class Employee:
    name: str
    department: Department


class NeedsCallback:
    def __init__(self, callback: Callable[[], None]):
        self.callback = callback


class Exploding:
    def __init__(self):
        raise RuntimeError("boom")


class AbstractShape(abc.ABC):
    @abc.abstractmethod
    def area(self):
        pass


class Slotted:
    __slots__ = ("label",)
    label: str
    extra: int


class HasExplodingField:
    label: str
    broken: Exploding = None


def _assertNoNoneAttributes(instance, fieldNames):
    for fieldName in fieldNames:
        assert getattr(instance, fieldName) is not None, f"attribute {fieldName} was not populated"


class TestPojos:

    def test_composite_population(self):
        composite = pojos(Composite)()

        _assertNoNoneAttributes(composite, ["label", "count", "ratio", "flag", "payload", "buffer", "created",
                                            "day", "identifier", "host", "tags", "lookup", "uniqueCodes",
                                            "frozenCodes", "pair", "history", "mode"])

        assert isinstance(composite.label, str) and composite.label.isalpha()
        assert 1 <= composite.count < 1000
        assert composite.ratio >= 0.1
        assert isinstance(composite.flag, bool)
        assert type(composite.payload) is bytes and len(composite.payload) == 333
        assert type(composite.buffer) is bytearray and len(composite.buffer) == 333
        assert isinstance(composite.created, datetime)
        assert type(composite.day) is date
        assert isinstance(composite.identifier, uuid.UUID)
        assert isinstance(composite.host, ipaddress.IPv4Address)
        assert composite.mode in ("fast", "slow")

    def test_generic_collections(self):
        composite = pojos(Composite)()

        assert 3 <= len(composite.tags) <= 25
        assert all(isinstance(tag, str) for tag in composite.tags)

        assert 3 <= len(composite.lookup) <= 25
        for key, address in composite.lookup.items():
            assert isinstance(key, str)
            assert isinstance(address, Address)
            _assertNoNoneAttributes(address, ["street", "city", "zipCode"])

        assert type(composite.uniqueCodes) is set
        assert all(1 <= code < 1000 for code in composite.uniqueCodes)
        assert type(composite.frozenCodes) is frozenset

        assert isinstance(composite.pair[0], int) and isinstance(composite.pair[1], str)
        assert len(composite.pair) == 2
        assert 3 <= len(composite.history) <= 25

    def test_unresolvable_fields_keep_defaults(self):
        composite = pojos(Composite)()

        assert composite.erased is None
        assert composite.ambiguous == 7
        assert Composite.instances == 0

    def test_unresolvable_fields_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            generator = pojos(Composite)

        assert "erased" in caplog.text
        assert "erased" not in generator.fieldNames
        assert "instances" not in generator.fieldNames

    def test_nested_population(self):
        person = pojos(Person)()

        _assertNoNoneAttributes(person, ["name", "email", "address", "nicknames", "favouriteColor"])
        _assertNoNoneAttributes(person.address, ["street", "city", "zipCode"])
        assert person.address.street != ""
        assert person.address.zipCode > 0
        assert isinstance(person.favouriteColor, Color)
        assert all(isinstance(nickname, str) for nickname in person.nicknames)

    def test_field_name_refinement(self):
        generator = pojos(Person)
        for _ in range(50):
            person = generator()
            assert person.email.count("@") == 1
            assert person.email.split("@")[1] in vg.POPULAR_EMAIL_DOMAINS
            assert person.name[0].isupper()
            assert 18 <= person.age <= 99
            assert -90.0 <= person.latitude <= 90.0

    def test_enum_field_covers_members(self):
        generator = pojos(Person)
        assert {generator().favouriteColor for _ in range(200)} == set(Color)

    def test_fresh_instances(self):
        generator = pojos(Person)
        first = generator()
        second = generator()

        assert first is not second
        assert first.address is not second.address
        assert first.nicknames is not second.nicknames

    def test_constructor_arguments(self):
        point = pojos(Point)()

        assert 1 <= point.x < 1000
        assert 1 <= point.y < 1000

    def test_string_annotated_arguments(self):
        ruler = pojos(Ruler)()

        assert 1 <= ruler.length < 1000
        assert isinstance(ruler.unit, str)

    def test_frozen_dataclass(self):
        coordinates = pojos(Coordinates)()

        assert -90.0 <= coordinates.latitude <= 90.0
        assert -180.0 <= coordinates.longitude <= 180.0
        assert coordinates.label != "origin"

        with pytest.raises(dataclasses.FrozenInstanceError):
            coordinates.label = "changed"

    def test_named_tuple(self):
        pair = pojos(Pair)()

        assert isinstance(pair, Pair)
        assert isinstance(pair.left, int)
        assert isinstance(pair.right, str)

    def test_self_reference(self):
        node = pojos(TreeNode)()

        assert isinstance(node.label, str)
        assert node.parent is None

    def test_mutual_reference(self):
        employee = pojos(Employee)()

        assert isinstance(employee.department, Department)
        assert isinstance(employee.department.title, str)
        assert not hasattr(employee.department, "manager")

    def test_custom_mappings(self):
        generator = pojos(Address, {str: lambda: "fixed"})
        address = generator()

        assert address.street == "fixed"
        assert address.city == "fixed"
        assert 1 <= address.zipCode < 1000

    def test_custom_mappings_propagate_to_nested_types(self):
        person = pojos(Person, {int: lambda: 5})()

        assert person.age == 5
        assert person.address.zipCode == 5

    def test_custom_mapping_for_root_type(self):
        sentinel = Address("a", "b", 1)
        generator = lambda: sentinel  # noqa: E731

        assert pojos(Address, {Address: generator}) is generator

    def test_default_mapping_for_root_type(self):
        value = pojos(str)()
        assert isinstance(value, str)

    def test_collection_sizes(self):
        composite = pojos(Composite, collectionSizes=CollectionSizes(2, 2))()

        assert len(composite.tags) == 2
        assert len(composite.lookup) == 2
        assert len(composite.history) == 2

    def test_read_only_fields_are_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            instance = pojos(Slotted)()

        assert isinstance(instance.label, str)
        assert not hasattr(instance, "extra")
        assert "extra" in caplog.text

    def test_uninstantiable_field_is_skipped(self):
        instance = pojos(HasExplodingField)()

        assert isinstance(instance.label, str)
        assert instance.broken is None

    @pytest.mark.parametrize("classOfPojo", [NeedsCallback, Exploding, AbstractShape])
    def test_not_instantiable(self, classOfPojo):
        with pytest.raises(NotInstantiableError):
            pojos(classOfPojo)

    @pytest.mark.parametrize("classOfPojo", [None, 42, Color, list, dict])
    def test_invalid_class(self, classOfPojo):
        with pytest.raises(InvalidArgumentError):
            pojos(classOfPojo)

    @pytest.mark.parametrize("customMappings", [[(str, lambda: "x")], {str: "not callable"}])
    def test_invalid_custom_mappings(self, customMappings):
        with pytest.raises(InvalidArgumentError):
            pojos(Address, customMappings)

    def test_generator_repr(self):
        generator = pojos(Address)

        assert isinstance(generator, PojoGenerator)
        assert generator.classOfPojo is Address
        assert "Address" in repr(generator)
        assert generator.fieldNames == ["street", "city", "zipCode"]


class TestDefaultMappings:

    def test_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_GENERATOR_MAPPINGS[str] = lambda: "x"

    @pytest.mark.parametrize("valueType", [str, int, float, bool, bytes, bytearray, datetime, date, uuid.UUID,
                                           ipaddress.IPv4Address])
    def test_mapped_types(self, valueType):
        value = DEFAULT_GENERATOR_MAPPINGS[valueType]()
        assert isinstance(value, valueType)
