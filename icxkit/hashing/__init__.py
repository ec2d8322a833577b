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

from icxkit import configure as conf

from .hash_generator import HashGenerator
from .origin import origin_string

_tx_hash_generator: HashGenerator = None


def get_tx_hash_generator() -> HashGenerator:
    """Shared generator salted with ``conf.HASH_SALT``, renewed when the salt changes."""
    global _tx_hash_generator

    if _tx_hash_generator is None or _tx_hash_generator.salt != conf.HASH_SALT:
        _tx_hash_generator = HashGenerator(conf.HASH_SALT)

    return _tx_hash_generator
