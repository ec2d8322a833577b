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
"""Builders staging the fields of a transaction until ``build()``.

Setters only record values and return the builder, so they can be chained in
any order. Every check happens once, in :func:`build_transaction`.
"""

import copy
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from icxkit import configure as conf, validator
from icxkit.converter import NumericValue, is_hex_string, to_hex, to_hex_number
from icxkit.exception import (BuilderAlreadyUsed, InvalidAddress, InvalidTransaction, MissingRequiredField,
                              SerializationFailed)
from icxkit.transactions.transaction import CallData, DataType, DeployData, Transaction, TransactionBase
from icxkit.transactions.transaction_serializer import canonicalize_param


@dataclass
class BaseStage:
    to: Optional[str] = None
    from_: Optional[str] = None
    value: Optional[NumericValue] = None
    step_limit: Optional[NumericValue] = None
    nid: Optional[NumericValue] = None
    nonce: Optional[NumericValue] = None
    version: Optional[NumericValue] = None
    timestamp: Optional[NumericValue] = None


@dataclass
class CallStage:
    method: Optional[str] = None
    params: Optional[Mapping] = None


@dataclass
class DeployStage:
    content_type: Optional[str] = None
    content: Union[None, str, bytes] = None
    params: Optional[Mapping] = None


@dataclass
class MessageStage:
    data: Union[None, str, bytes] = None


def _is_absent(value) -> bool:
    return value is None or value == ""


def _require(field_name: str, value):
    if _is_absent(value):
        raise MissingRequiredField(field_name)


def _optional_hex(value) -> Optional[str]:
    return None if value is None else to_hex_number(value)


def _freeze_params(params) -> Optional[Mapping]:
    if params is None:
        return None
    if not isinstance(params, Mapping):
        raise InvalidTransaction(f"params must be a mapping: {params!r}")

    try:
        canonicalize_param(params)
    except SerializationFailed as e:
        raise InvalidTransaction(f"params cannot be serialized: {e}") from e

    return MappingProxyType(copy.deepcopy(dict(params)))


def _build_data(data_type: Optional[DataType], payload) -> Union[None, CallData, DeployData, str]:
    if data_type is None:
        return None

    if data_type is DataType.CALL:
        _require("method", payload.method)
        return CallData(method=payload.method, params=_freeze_params(payload.params))

    if data_type is DataType.DEPLOY:
        _require("contentType", payload.content_type)
        _require("content", payload.content)
        content = payload.content
        if isinstance(content, (bytes, bytearray)):
            content = to_hex(content)
        elif not is_hex_string(content):
            raise InvalidTransaction(f"content must be bytes or a 0x prefixed hex string: {content!r}")
        return DeployData(content_type=payload.content_type,
                          content=content,
                          params=_freeze_params(payload.params))

    if data_type is DataType.MESSAGE:
        _require("data", payload.data)
        return to_hex(payload.data) if isinstance(payload.data, (bytes, bytearray)) else payload.data

    raise InvalidTransaction(f"Unknown data type: {data_type!r}")


def build_transaction(data_type: Optional[DataType], base: BaseStage, payload=None) -> Transaction:
    """Validate staged fields and create an immutable :class:`Transaction`.

    Checks run in a fixed order and the first violation is raised:
    required fields (``to``, ``from``, then the fields of the data type),
    the format of ``params`` and ``content``, address formats, then numeric
    values.
    """
    _require("to", base.to)
    _require("from", base.from_)
    data = _build_data(data_type, payload)

    if not validator.is_address(base.to):
        raise InvalidAddress("to", base.to)
    if not validator.is_address(base.from_):
        raise InvalidAddress("from", base.from_)

    version = conf.TRANSACTION_VERSION if base.version is None else base.version

    tx_base = TransactionBase(
        to=base.to,
        from_=base.from_,
        value=_optional_hex(base.value),
        step_limit=_optional_hex(base.step_limit),
        nid=_optional_hex(base.nid),
        nonce=_optional_hex(base.nonce),
        version=to_hex_number(version),
        timestamp=_optional_hex(base.timestamp)
    )
    tx = Transaction(base=tx_base, data_type=data_type, data=data)
    logging.debug(f"Transaction built: {tx}")
    return tx


class TransactionBuilder:
    data_type: Optional[DataType] = None

    def __init__(self):
        self._base = BaseStage()
        self._payload = None
        self._built = False

    def to(self, to: str):
        self._base.to = to
        return self

    def from_(self, from_: str):
        self._base.from_ = from_
        return self

    def value(self, value: NumericValue):
        self._base.value = value
        return self

    def step_limit(self, step_limit: NumericValue):
        self._base.step_limit = step_limit
        return self

    def nid(self, nid: NumericValue):
        self._base.nid = nid
        return self

    def nonce(self, nonce: NumericValue):
        self._base.nonce = nonce
        return self

    def version(self, version: NumericValue):
        self._base.version = version
        return self

    def timestamp(self, timestamp: NumericValue):
        self._base.timestamp = timestamp
        return self

    def build(self) -> Transaction:
        if self._built:
            raise BuilderAlreadyUsed(f"{self.__class__.__qualname__} has already built a transaction.")

        tx = build_transaction(self.data_type, self._base, self._payload)
        self._built = True
        return tx


class IcxTransactionBuilder(TransactionBuilder):
    """Builder of a plain ICX transfer."""


class CallTransactionBuilder(TransactionBuilder):
    data_type = DataType.CALL

    def __init__(self):
        super().__init__()
        self._payload = CallStage()

    def method(self, method: str):
        self._payload.method = method
        return self

    def params(self, params: Mapping[str, Any]):
        self._payload.params = params
        return self


class DeployTransactionBuilder(TransactionBuilder):
    data_type = DataType.DEPLOY

    def __init__(self):
        super().__init__()
        self._payload = DeployStage()

    def content_type(self, content_type: str):
        self._payload.content_type = content_type
        return self

    def content(self, content: Union[str, bytes]):
        self._payload.content = content
        return self

    def params(self, params: Mapping[str, Any]):
        self._payload.params = params
        return self


class MessageTransactionBuilder(TransactionBuilder):
    data_type = DataType.MESSAGE

    def __init__(self):
        super().__init__()
        self._payload = MessageStage()

    def data(self, data: Union[str, bytes]):
        self._payload.data = data
        return self
