import re
import string
import uuid

import pytest

import valuegen as vg
from valuegen import InvalidArgumentError


class TestBooleanGenerators:

    def test_booleans(self):
        generator = vg.booleans()
        values = {generator() for _ in range(500)}
        assert values == {True, False}

    def test_alternating_booleans(self):
        generator = vg.alternating_booleans()
        assert [generator() for _ in range(6)] == [False, True, False, True, False, True]

    def test_alternating_booleans_are_independent(self):
        first = vg.alternating_booleans()
        second = vg.alternating_booleans()

        assert first() is False
        assert first() is True
        assert second() is False


class TestBinaryGenerators:

    @pytest.mark.parametrize("length", [0, 1, 16, 333])
    def test_binary(self, length):
        value = vg.binary(length)()
        assert type(value) is bytes
        assert len(value) == length

    def test_byte_buffers(self):
        value = vg.byte_buffers(10)()
        assert type(value) is bytearray
        assert len(value) == 10

    def test_single_bytes(self):
        assert len(vg.single_bytes()()) == 1

    @pytest.mark.parametrize("length", [-1, None, 2.5])
    def test_invalid_length(self, length):
        with pytest.raises(InvalidArgumentError):
            vg.binary(length)

        with pytest.raises(InvalidArgumentError):
            vg.byte_buffers(length)


class TestStringGenerators:

    def test_strings_default_length(self):
        generator = vg.strings()
        for _ in range(50):
            value = generator()
            assert 5 <= len(value) < 1000
            assert all(0x20 <= ord(ch) <= 0xD7FF for ch in value)

    def test_strings_fixed_length(self):
        assert len(vg.strings(12)()) == 12

    @pytest.mark.parametrize("length", [1, 7, 32, 33])
    def test_hexadecimal_strings(self, length):
        value = vg.hexadecimal_strings(length)()
        assert len(value) == length
        assert re.fullmatch(r"[0-9A-F]+", value)

    def test_alphabetic_strings(self):
        generator = vg.alphabetic_strings()
        for _ in range(200):
            value = generator()
            assert 10 <= len(value) < 100
            assert all(ch in string.ascii_letters for ch in value)

    def test_alphanumeric_strings(self):
        generator = vg.alphanumeric_strings(50)
        values = [generator() for _ in range(200)]

        assert all(len(value) == 50 for value in values)
        assert all(value.isascii() and value.isalnum() for value in values)
        assert any(any(ch.isdigit() for ch in value) for value in values)
        assert any(any(ch.isalpha() for ch in value) for value in values)

    def test_numeric_strings(self):
        generator = vg.numeric_strings()
        for _ in range(200):
            value = generator()
            assert 4 <= len(value) < 25
            assert value.isdigit()

    def test_uuids(self):
        generator = vg.uuids()
        values = {generator() for _ in range(100)}

        assert len(values) == 100
        for value in values:
            assert uuid.UUID(value).version == 4
            assert str(uuid.UUID(value)) == value

    def test_strings_from_fixed_list(self):
        generator = vg.strings_from_fixed_list(["a", "b", "c"])
        assert {generator() for _ in range(500)} == {"a", "b", "c"}

    def test_as_string(self):
        assert vg.as_string(lambda: 42)() == "42"
        assert vg.as_string(lambda: None)() == ""

    @pytest.mark.parametrize("factory", [vg.strings, vg.hexadecimal_strings, vg.alphabetic_strings,
                                         vg.alphanumeric_strings, vg.numeric_strings])
    @pytest.mark.parametrize("length", [0, -5])
    def test_invalid_lengths(self, factory, length):
        with pytest.raises(InvalidArgumentError):
            factory(length)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgumentError):
            vg.strings_from_fixed_list([])

        with pytest.raises(InvalidArgumentError):
            vg.as_string(None)


class TestGeolocationGenerators:

    def test_latitudes(self):
        generator = vg.latitudes()
        assert all(-90.0 <= generator() <= 90.0 for _ in range(1000))

    def test_longitudes(self):
        generator = vg.longitudes()
        assert all(-180.0 <= generator() <= 180.0 for _ in range(1000))
