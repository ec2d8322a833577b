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

from decimal import Decimal
from typing import Mapping, Optional

from icxkit.amount import IconAmount
from icxkit.converter import to_hex_number
from icxkit.exception import IconSdkError, InvalidNumericValue, SerializationFailed
from icxkit.hashing import HashGenerator, get_tx_hash_generator
from icxkit.transactions.transaction import CallData, DataType, DeployData, Transaction, TransactionBase
from icxkit.types import Hash32

_numeric_fields = (
    ("value", "value"),
    ("stepLimit", "step_limit"),
    ("nid", "nid"),
    ("nonce", "nonce"),
    ("version", "version"),
    ("timestamp", "timestamp"),
)


def canonicalize_param(value):
    """Convert a SCORE parameter to the text form the network expects.

    Integers become signed ``0x`` hex, booleans ``0x1``/``0x0`` and bytes
    ``0x`` hex. Strings and ``None`` are kept, mappings are rebuilt with sorted
    keys and lists are converted item by item.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "0x1" if value else "0x0"
    if isinstance(value, int):
        return hex(value)
    if isinstance(value, IconAmount):
        return hex(value.to_loop())
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return hex(int(value))
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise SerializationFailed(f"Key of params must be str: {key!r}")
        return {key: canonicalize_param(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [canonicalize_param(item) for item in value]

    raise SerializationFailed(f"Unsupported type of params value: {type(value).__qualname__}({value!r})")


def _check_str(field_name: str, value) -> str:
    if not isinstance(value, str):
        raise SerializationFailed(f"'{field_name}' must be str: {value!r}")
    return value


def _sort_keys(data: dict) -> dict:
    return {key: data[key] for key in sorted(data)}


class TransactionSerializer:
    """Convert transactions to raw transactions and to the digest to be signed."""

    def __init__(self, hash_generator: HashGenerator = None):
        self._hash_generator = hash_generator or get_tx_hash_generator()

    def to_raw_data(self, tx: Transaction) -> dict:
        if not isinstance(tx, Transaction):
            raise SerializationFailed(f"Not a transaction: {tx!r}")

        base = tx.base
        raw_data = {
            "to": _check_str("to", base.to),
            "from": _check_str("from", base.from_),
        }

        for raw_key, attr_name in _numeric_fields:
            value = getattr(base, attr_name)
            if value is None:
                continue
            try:
                raw_data[raw_key] = to_hex_number(value)
            except InvalidNumericValue as e:
                raise SerializationFailed(f"'{raw_key}' is not a valid number: {value!r}") from e

        if tx.data_type is not None:
            raw_data["dataType"] = tx.data_type.value
            raw_data["data"] = self._to_raw_payload(tx.data_type, tx.data)

        return _sort_keys(raw_data)

    def _to_raw_payload(self, data_type: DataType, data):
        if data_type is DataType.MESSAGE:
            return _check_str("data", data)

        if data_type is DataType.CALL:
            payload = {"method": _check_str("method", data.method)}
        elif data_type is DataType.DEPLOY:
            payload = {
                "contentType": _check_str("contentType", data.content_type),
                "content": _check_str("content", data.content)
            }
        else:
            raise SerializationFailed(f"Unknown data type: {data_type!r}")

        if data.params is not None:
            payload["params"] = canonicalize_param(data.params)

        return _sort_keys(payload)

    def from_raw_data(self, raw_data: dict) -> Transaction:
        """Restore a transaction from its raw form. ``signature`` is ignored."""
        try:
            base = TransactionBase(
                to=raw_data["to"],
                from_=raw_data["from"],
                value=raw_data.get("value"),
                step_limit=raw_data.get("stepLimit"),
                nid=raw_data.get("nid"),
                nonce=raw_data.get("nonce"),
                version=raw_data.get("version"),
                timestamp=raw_data.get("timestamp")
            )

            data_type: Optional[DataType] = None
            data = None
            if raw_data.get("dataType") is not None:
                data_type = DataType(raw_data["dataType"])
                raw_payload = raw_data["data"]
                if data_type is DataType.CALL:
                    data = CallData(method=raw_payload["method"], params=raw_payload.get("params"))
                elif data_type is DataType.DEPLOY:
                    data = DeployData(content_type=raw_payload["contentType"],
                                      content=raw_payload["content"],
                                      params=raw_payload.get("params"))
                else:
                    data = raw_payload

            return Transaction(base=base, data_type=data_type, data=data)
        except (KeyError, TypeError, ValueError, IconSdkError) as e:
            raise SerializationFailed(f"Invalid raw transaction: {raw_data!r}") from e

    def get_hash_from_raw_data(self, raw_data: dict) -> bytes:
        origin_data = dict(raw_data)
        origin_data.pop("signature", None)
        origin_data.pop("txHash", None)
        return self._hash_generator.digest(origin_data)

    def get_hash(self, tx: Transaction) -> bytes:
        return self.get_hash_from_raw_data(self.to_raw_data(tx))

    def get_tx_hash(self, tx: Transaction) -> str:
        return Hash32(self.get_hash(tx)).hex_0x()


def to_raw_transaction(tx: Transaction) -> dict:
    return TransactionSerializer().to_raw_data(tx)
