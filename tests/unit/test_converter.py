from decimal import Decimal

import pytest

from icxkit import IconAmount
from icxkit.converter import from_utf8, to_big_number, to_hex, to_hex_number, to_number, to_utf8
from icxkit.exception import InvalidArgument, InvalidNumericValue


class TestToHexNumber:
    def test_int_and_decimal_string_agree(self):
        assert to_hex_number("255") == to_hex_number(255) == "0xff"

    def test_zero(self):
        assert to_hex_number(0) == "0x0"
        assert to_hex_number("0") == "0x0"

    @pytest.mark.parametrize("value, expected", [
        ("0xFF", "0xff"),
        ("0x00ff", "0xff"),
        (Decimal("10"), "0xa"),
        (IconAmount.of("1", 18), "0xde0b6b3a7640000"),
        (10 ** 30, hex(10 ** 30)),
    ])
    def test_canonical_form(self, value, expected):
        assert to_hex_number(value) == expected

    @pytest.mark.parametrize("text, number", [
        ("1.0", Decimal("1.0")),
        ("100.000", Decimal("100.000")),
        ("1000000000000000000000000000000.0", Decimal("1000000000000000000000000000000.0")),
    ])
    def test_decimal_string_and_decimal_agree(self, text, number):
        assert to_hex_number(text) == to_hex_number(number) == to_hex_number(int(number))

    @pytest.mark.parametrize("value", [-1, "-1", "-0x1"])
    def test_negative(self, value):
        with pytest.raises(InvalidNumericValue):
            to_hex_number(value)

    @pytest.mark.parametrize("value", [1.0, True, "1.5", "1.", ".5", "1e3", Decimal("1.5"), "abc", "0x", "", None, b"\x01"])
    def test_invalid(self, value):
        with pytest.raises(InvalidNumericValue):
            to_hex_number(value)


class TestToBigNumber:
    @pytest.mark.parametrize("value, expected", [
        ("0x10", 16),
        ("-0x10", -16),
        ("-5", -5),
        (7, 7),
        (Decimal("3"), 3),
    ])
    def test_to_big_number(self, value, expected):
        assert to_big_number(value) == expected
        assert to_number(value) == expected


class TestToHex:
    def test_bytes(self):
        assert to_hex(b"\x01\xab") == "0x01ab"

    def test_hex_string_passes_through_lowercased(self):
        assert to_hex("0xABcd") == "0xabcd"

    def test_number(self):
        assert to_hex(10) == "0xa"


class TestUtf8:
    def test_round_trip(self):
        assert from_utf8("hello") == "0x68656c6c6f"
        assert to_utf8("0x68656c6c6f") == "hello"
        assert to_utf8(from_utf8("한글")) == "한글"

    @pytest.mark.parametrize("value", ["hello", "0xff", "0xf", 10])
    def test_invalid_hex(self, value):
        with pytest.raises(InvalidArgument):
            to_utf8(value)

    def test_from_utf8_requires_str(self):
        with pytest.raises(InvalidArgument):
            from_utf8(b"hello")
