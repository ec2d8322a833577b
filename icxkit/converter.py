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
"""Conversions between numbers, hex strings and utf-8 text.

Every numeric field of a transaction is put on the wire as a ``0x`` prefixed,
lowercase and minimal hex string. The functions here are the only place such
strings are produced, so the same quantity always gets the same text.
"""

import re
from decimal import Decimal
from typing import TYPE_CHECKING, Union

from icxkit.amount import IconAmount
from icxkit.exception import InvalidArgument, InvalidNumericValue

if TYPE_CHECKING:
    from icxkit.transactions import Transaction

NumericValue = Union[int, str, Decimal, IconAmount]

_HEX_NUMBER = re.compile(r"-?0x[0-9a-fA-F]+")
_DEC_NUMBER = re.compile(r"-?[0-9]+(\.[0-9]+)?")
_HEX_STRING = re.compile(r"0x[0-9a-fA-F]*")


def is_hex_string(value) -> bool:
    return isinstance(value, str) and _HEX_STRING.fullmatch(value) is not None


def _integral(value: Decimal, origin) -> int:
    if value.is_finite() and value == value.to_integral_value():
        return int(value)
    raise InvalidNumericValue(origin)


def to_big_number(value: NumericValue) -> int:
    """Convert ``value`` to an integer.

    Accepts an int, an integral :class:`~decimal.Decimal`, an
    :class:`~icxkit.amount.IconAmount` (converted to loop) and decimal or
    ``0x`` hex strings. A decimal string is read as a Decimal, so ``"1.0"`` and
    ``Decimal("1.0")`` give the same number. Floats and booleans are refused.
    """
    if isinstance(value, (bool, float)):
        raise InvalidNumericValue(value)

    if isinstance(value, int):
        return int(value)

    if isinstance(value, IconAmount):
        return value.to_loop()

    if isinstance(value, Decimal):
        return _integral(value, value)

    if isinstance(value, str):
        if _HEX_NUMBER.fullmatch(value):
            return int(value, 16)
        if _DEC_NUMBER.fullmatch(value):
            return _integral(Decimal(value), value)

    raise InvalidNumericValue(value)


def to_number(value: NumericValue) -> int:
    return to_big_number(value)


def to_hex_number(value: NumericValue) -> str:
    """Convert ``value`` to a minimal lowercase ``0x`` hex string.

    :raises InvalidNumericValue: ``value`` is not a non-negative integer quantity
    """
    number = to_big_number(value)
    if number < 0:
        raise InvalidNumericValue(value, f"Negative value is not allowed: {value!r}")
    return hex(number)


def to_hex(value: Union[NumericValue, bytes]) -> str:
    """Convert byte-like values to hex, passing existing hex strings through."""
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()

    if is_hex_string(value):
        return value.lower()

    return to_hex_number(value)


def from_utf8(value: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgument(f"value must be str: {value!r}")
    return "0x" + value.encode('utf-8').hex()


def to_utf8(value: str) -> str:
    if not is_hex_string(value):
        raise InvalidArgument(f"value must be a 0x prefixed hex string: {value!r}")

    try:
        return bytes.fromhex(value[2:]).decode('utf-8')
    except ValueError as e:
        raise InvalidArgument(f"value is not utf-8 encoded hex: {value!r}") from e


def to_raw_transaction(transaction: 'Transaction') -> dict:
    from icxkit.transactions import TransactionSerializer
    return TransactionSerializer().to_raw_data(transaction)
