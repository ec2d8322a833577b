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
"""Checks for key material and address formats."""

import re
from typing import Union

from coincurve import PrivateKey, PublicKey

_EOA_ADDRESS = re.compile(r"hx[0-9a-f]{40}")
_SCORE_ADDRESS = re.compile(r"cx[0-9a-f]{40}")

Key = Union[bytes, bytearray, str]


def _key_to_bytes(value: Key) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        value = value[2:] if value.startswith("0x") else value
        return bytes.fromhex(value)
    raise TypeError(f"key must be bytes or hex string: {type(value)}")


def is_private_key(value: Key) -> bool:
    try:
        key = _key_to_bytes(value)
    except (TypeError, ValueError):
        return False

    if len(key) != 32:
        return False

    try:
        PrivateKey(key)
    except ValueError:
        return False
    return True


def is_public_key(value: Key) -> bool:
    try:
        key = _key_to_bytes(value)
    except (TypeError, ValueError):
        return False

    if len(key) == 64:
        key = b"\x04" + key
    if len(key) not in (33, 65):
        return False

    try:
        PublicKey(key)
    except ValueError:
        return False
    return True


def is_eoa_address(value) -> bool:
    return isinstance(value, str) and _EOA_ADDRESS.fullmatch(value) is not None


def is_score_address(value) -> bool:
    return isinstance(value, str) and _SCORE_ADDRESS.fullmatch(value) is not None


def is_address(value) -> bool:
    return is_eoa_address(value) or is_score_address(value)


def is_tx_hash(value) -> bool:
    return isinstance(value, str) and re.fullmatch(r"0x[0-9a-f]{64}", value) is not None
