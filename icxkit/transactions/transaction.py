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

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional, Union

from icxkit.exception import InvalidTransaction

# str | int | bool | bytes | None | Mapping[str, ParamValue] | list of ParamValue
ParamValue = Any
Params = Mapping[str, ParamValue]


class DataType(Enum):
    CALL = "call"
    DEPLOY = "deploy"
    MESSAGE = "message"


@dataclass(frozen=True)
class CallData:
    method: str
    params: Optional[Params] = None


@dataclass(frozen=True)
class DeployData:
    content_type: str
    content: str
    params: Optional[Params] = None


@dataclass(frozen=True)
class TransactionBase:
    """Fields shared by every kind of transaction.

    Numeric fields are canonical ``0x`` hex strings, or ``None`` when not set.
    """
    to: str
    from_: str
    value: Optional[str] = None
    step_limit: Optional[str] = None
    nid: Optional[str] = None
    nonce: Optional[str] = None
    version: Optional[str] = None
    timestamp: Optional[str] = None


_payload_types = {
    None: type(None),
    DataType.CALL: CallData,
    DataType.DEPLOY: DeployData,
    DataType.MESSAGE: str,
}


@dataclass(frozen=True)
class Transaction:
    base: TransactionBase
    data_type: Optional[DataType] = None
    data: Union[None, CallData, DeployData, str] = None

    def __post_init__(self):
        if self.data_type not in _payload_types:
            raise InvalidTransaction(f"Unknown data type: {self.data_type!r}")

        expected_type = _payload_types[self.data_type]
        if not isinstance(self.data, expected_type):
            raise InvalidTransaction(
                f"Data of {self.type()} transaction must be {expected_type.__qualname__}, "
                f"not {type(self.data).__qualname__}")

    def __str__(self):
        base_str = ', '.join(f"{f.name}={getattr(self.base, f.name)}" for f in fields(self.base))
        return f"{self.__class__.__qualname__}({base_str}, data_type={self.type()}, data={self.data})"

    def type(self) -> Optional[str]:
        return self.data_type.value if self.data_type else None

    @property
    def to(self) -> str:
        return self.base.to

    @property
    def from_(self) -> str:
        return self.base.from_
