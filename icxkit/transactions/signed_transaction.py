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

import copy
import logging
from typing import TYPE_CHECKING

from icxkit.exception import SerializationFailed, SigningFailed
from icxkit.transactions.transaction_serializer import TransactionSerializer
from icxkit.types import Hash32

if TYPE_CHECKING:
    from icxkit.transactions import Transaction
    from icxkit.wallet import IconWallet


class SignedTransaction:
    """A transaction paired with the signature of its digest.

    The wallet is asked for a signature once, in the constructor, and is not
    kept. The raw transaction is cached so that it always matches the bytes
    which were signed.
    """

    def __init__(self, transaction: 'Transaction', wallet: 'IconWallet', serializer: TransactionSerializer = None):
        serializer = serializer or TransactionSerializer()

        try:
            raw_data = serializer.to_raw_data(transaction)
            tx_hash = serializer.get_hash_from_raw_data(raw_data)
        except SerializationFailed:
            raise
        except (TypeError, ValueError) as e:
            raise SerializationFailed(f"Cannot serialize transaction: {e}") from e

        try:
            signature = wallet.sign(tx_hash)
        except Exception as e:
            logging.debug(f"Fail to sign transaction({Hash32(tx_hash).hex_0x()}): {e}")
            raise SigningFailed(f"Cannot sign transaction: {e}") from e

        if not isinstance(signature, str) or not signature:
            raise SigningFailed(f"Wallet returned an invalid signature: {signature!r}")

        self._transaction = transaction
        self._raw_data = raw_data
        self._hash = Hash32(tx_hash)
        self._signature = signature

    @property
    def transaction(self) -> 'Transaction':
        return self._transaction

    @property
    def tx_hash(self) -> str:
        return self._hash.hex_0x()

    def get_raw_transaction(self) -> dict:
        return copy.deepcopy(self._raw_data)

    def get_signature(self) -> str:
        return self._signature

    def get_properties(self) -> dict:
        properties = self.get_raw_transaction()
        properties["signature"] = self._signature
        return properties
