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

import hashlib
from typing import Callable, Mapping, Optional

from .origin import origin_string

OriginFunc = Callable[[Mapping], str]


class HashGenerator:
    """SHA3-256 of ``"<salt>.<origin string>"``."""

    def __init__(self, salt: Optional[str] = None, origin: OriginFunc = origin_string):
        self.salt = salt
        self._origin = origin

    def salted_origin(self, raw_data: Mapping) -> str:
        origin = self._origin(raw_data)
        if self.salt is None:
            return origin
        return f"{self.salt}.{origin}"

    def digest(self, raw_data: Mapping) -> bytes:
        return hashlib.sha3_256(self.salted_origin(raw_data).encode('utf-8')).digest()

    def hexdigest(self, raw_data: Mapping) -> str:
        return "0x" + self.digest(raw_data).hex()
