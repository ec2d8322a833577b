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
"""Payload of ``icx_call``, a read-only call of a SCORE method."""

import copy
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from icxkit import validator
from icxkit.exception import BuilderAlreadyUsed, InvalidAddress, InvalidTransaction, MissingRequiredField
from icxkit.transactions.transaction_serializer import canonicalize_param


@dataclass(frozen=True)
class Call:
    to: str
    method: str
    from_: Optional[str] = None
    params: Optional[Mapping[str, Any]] = None

    def to_dict(self) -> dict:
        data = {"method": self.method}
        if self.params is not None:
            data["params"] = canonicalize_param(self.params)

        call = {
            "to": self.to,
            "dataType": "call",
            "data": data
        }
        if self.from_ is not None:
            call["from"] = self.from_
        return call


class CallBuilder:
    def __init__(self):
        self._to: Optional[str] = None
        self._from: Optional[str] = None
        self._method: Optional[str] = None
        self._params: Optional[Mapping[str, Any]] = None
        self._built = False

    def to(self, to: str):
        self._to = to
        return self

    def from_(self, from_: str):
        self._from = from_
        return self

    def method(self, method: str):
        self._method = method
        return self

    def params(self, params: Mapping[str, Any]):
        self._params = params
        return self

    def build(self) -> Call:
        if self._built:
            raise BuilderAlreadyUsed("CallBuilder has already built a call.")

        if not self._to:
            raise MissingRequiredField("to")
        if not self._method:
            raise MissingRequiredField("method")
        if not validator.is_score_address(self._to):
            raise InvalidAddress("to", self._to)
        if self._from is not None and not validator.is_eoa_address(self._from):
            raise InvalidAddress("from", self._from)
        if self._params is not None and not isinstance(self._params, Mapping):
            raise InvalidTransaction(f"params must be a mapping: {self._params!r}")

        params = None if self._params is None else copy.deepcopy(dict(self._params))
        call = Call(to=self._to, method=self._method, from_=self._from, params=params)
        self._built = True
        return call
