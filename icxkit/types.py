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
"""Fixed size byte strings used for hashes, addresses and signatures."""

import base64


class FixedBytes(bytes):
    size: int = None
    prefix: str = "0x"

    def __new__(cls, value=b""):
        self = super().__new__(cls, value)
        if cls.size is not None and len(self) != cls.size:
            raise ValueError(f"{cls.__qualname__} must be {cls.size} bytes, not {len(self)}")
        return self

    def __repr__(self):
        return f"{self.__class__.__qualname__}({self.to_prefixed_hex()})"

    def __str__(self):
        return self.to_prefixed_hex()

    def to_prefixed_hex(self) -> str:
        return self.prefix + self.hex()


class Hash32(FixedBytes):
    size = 32

    def hex_0x(self) -> str:
        return self.to_prefixed_hex()


class ExternalAddress(FixedBytes):
    """Address of an account, ``hx`` + 20 bytes."""
    size = 20
    prefix = "hx"

    def hex_hx(self) -> str:
        return self.to_prefixed_hex()


class Signature(FixedBytes):
    """Recoverable secp256k1 signature, 64 bytes of ``r || s`` and the recovery id."""
    size = 65

    def signature(self) -> bytes:
        return bytes(self[:-1])

    def recover_id(self) -> int:
        return self[-1]

    def to_base64str(self) -> str:
        return base64.b64encode(self).decode('utf-8')

    def __str__(self):
        return self.to_base64str()

    @classmethod
    def from_base64str(cls, value: str):
        return cls(base64.b64decode(value.encode('utf-8'), validate=True))
