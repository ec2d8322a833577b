# Copyright 2018 ICON Foundation
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
"""Unit conversion of ICX amounts.

Amounts are kept as :class:`decimal.Decimal` and scaled by moving the decimal
exponent, so no value ever passes through a binary float or a precision
limited decimal context.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import IntEnum
from typing import Union

from icxkit.exception import InvalidAmount

AmountValue = Union[str, int, Decimal]


class Unit(IntEnum):
    LOOP = 0
    GLOOP = 9
    ICX = 18


def _to_decimal(value: AmountValue) -> Decimal:
    if isinstance(value, (bool, float)):
        raise InvalidAmount(value, f"Amount must be given as str, int or Decimal: {value!r}")

    if isinstance(value, Decimal):
        decimal_value = value
    elif isinstance(value, int):
        decimal_value = Decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            if text.startswith("0x") or text.startswith("-0x"):
                decimal_value = Decimal(int(text, 16))
            else:
                decimal_value = Decimal(text)
        except (InvalidOperation, ValueError) as e:
            raise InvalidAmount(value) from e
    else:
        raise InvalidAmount(value)

    if not decimal_value.is_finite():
        raise InvalidAmount(value)
    return decimal_value


def _to_digit(digit) -> int:
    if isinstance(digit, bool):
        raise InvalidAmount(digit, f"Invalid digit: {digit!r}")

    if isinstance(digit, int):
        result = int(digit)
    elif isinstance(digit, Decimal) and digit.is_finite() and digit == digit.to_integral_value():
        result = int(digit)
    elif isinstance(digit, str) and digit.strip().isdigit():
        result = int(digit)
    else:
        raise InvalidAmount(digit, f"Invalid digit: {digit!r}")

    if result < 0:
        raise InvalidAmount(digit, f"Digit must not be negative: {digit!r}")
    return result


def _shift(value: Decimal, places: int) -> Decimal:
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))


def _to_plain_string(value: Decimal) -> str:
    text = format(value, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


class IconAmount:
    """An amount of ICX expressed in a unit of ``10 ** digit`` loop."""

    Unit = Unit

    __slots__ = ("_value", "_digit")

    def __init__(self, value: AmountValue, digit: Union[int, Unit]):
        self._value = _to_decimal(value)
        self._digit = _to_digit(digit)

    @classmethod
    def of(cls, value: AmountValue, digit: Union[int, Unit]) -> 'IconAmount':
        return cls(value, digit)

    @property
    def value(self) -> Decimal:
        return self._value

    @property
    def digit(self) -> int:
        return self._digit

    def get_digit(self) -> int:
        return self._digit

    def to_loop(self) -> int:
        """Return the amount in loop, the atomic unit.

        A fraction of a loop is rounded half up.
        """
        loop = _shift(self._value, self._digit)
        return int(loop.to_integral_value(rounding=ROUND_HALF_UP))

    def convert_unit(self, digit: Union[int, Unit]) -> 'IconAmount':
        digit = _to_digit(digit)
        return IconAmount(_shift(self._value, self._digit - digit), digit)

    def to_string(self) -> str:
        return _to_plain_string(self._value)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"{self.__class__.__qualname__}(value={self.to_string()!r}, digit={self._digit})"

    def __eq__(self, other):
        if not isinstance(other, IconAmount):
            return NotImplemented
        return _shift(self._value, self._digit) == _shift(other._value, other._digit)

    def __hash__(self):
        return hash(_shift(self._value, self._digit))
