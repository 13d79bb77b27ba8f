import enum

import pytest

import valuegen as vg
from valuegen import CollectionSizes, InvalidArgumentError, NoEnumValuesError


class Suit(enum.Enum):
    HEARTS = "hearts"
    SPADES = "spades"
    CLUBS = "clubs"
    DIAMONDS = "diamonds"


class Empty(enum.Enum):
    pass


class TestEnumGenerators:

    def test_enum_values(self):
        generator = vg.enum_values_of(Suit)
        assert {generator() for _ in range(500)} == set(Suit)

    def test_empty_enum(self):
        with pytest.raises(NoEnumValuesError):
            vg.enum_values_of(Empty)

    @pytest.mark.parametrize("enumClass", [None, int, "Suit"])
    def test_not_an_enum(self, enumClass):
        with pytest.raises(InvalidArgumentError):
            vg.enum_values_of(enumClass)


class TestCollectionGenerators:

    def test_list_of(self):
        values = vg.list_of(vg.small_positive_integers(), 15)
        assert len(values) == 15
        assert all(1 <= value < 1000 for value in values)

    def test_list_of_default_size(self):
        assert 3 <= len(vg.list_of(vg.booleans())) <= 25

    def test_map_of(self):
        values = vg.map_of(vg.alphabetic_strings(), vg.booleans(), 10)
        assert len(values) == 10
        assert all(isinstance(value, bool) for value in values.values())

    def test_map_of_with_repeating_keys(self):
        values = vg.map_of(lambda: "key", vg.booleans(), 10)
        assert list(values) == ["key"]

    def test_from_list(self):
        generator = vg.from_list([None, 1, "two"])
        assert {generator() for _ in range(300)} == {None, 1, "two"}

    def test_lists_regenerate(self):
        generator = vg.lists(vg.alphabetic_strings())
        first = generator()
        second = generator()

        assert first is not second
        assert 3 <= len(first) <= 25
        assert 3 <= len(second) <= 25

    @pytest.mark.parametrize("minSize, maxSize", [(0, 0), (1, 1), (2, 6), (5, 30)])
    def test_collection_sizes(self, minSize, maxSize):
        sizes = CollectionSizes(minSize, maxSize)
        generator = vg.lists(vg.booleans(), sizes)
        for _ in range(100):
            assert minSize <= len(generator()) <= maxSize

    def test_sets(self):
        generator = vg.sets(vg.alphabetic_strings(), CollectionSizes(5, 5))
        value = generator()
        assert type(value) is set
        assert len(value) == 5

    def test_frozen_sets(self):
        value = vg.sets(vg.small_positive_integers(), frozen=True)()
        assert type(value) is frozenset
        assert 3 <= len(value) <= 25

    def test_maps(self):
        generator = vg.maps(vg.uuids(), vg.small_positive_integers())
        value = generator()
        assert 3 <= len(value) <= 25
        assert generator() is not value

    def test_tuples(self):
        value = vg.tuples(vg.booleans(), vg.alphabetic_strings(3), vg.integers(0, 5))()
        assert len(value) == 3
        assert isinstance(value[0], bool)
        assert len(value[1]) == 3
        assert 0 <= value[2] < 5

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgumentError):
            vg.lists(None)

        with pytest.raises(InvalidArgumentError):
            vg.list_of(vg.booleans(), -1)

        with pytest.raises(InvalidArgumentError):
            vg.maps(vg.booleans(), "not callable")

        with pytest.raises(InvalidArgumentError):
            vg.tuples()

        with pytest.raises(InvalidArgumentError):
            vg.from_list([])

        with pytest.raises(InvalidArgumentError):
            vg.sets(vg.booleans(), collectionSizes=(1, 2))
