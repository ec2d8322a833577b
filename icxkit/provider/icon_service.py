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
"""JSON-RPC v3 methods of an ICON node."""

from typing import Union

from icxkit import validator
from icxkit.converter import to_big_number, to_hex_number
from icxkit.exception import InvalidArgument, InvalidNumericValue
from icxkit.provider.http_provider import HttpCall, HttpProvider
from icxkit.transactions.call import Call
from icxkit.transactions.signed_transaction import SignedTransaction


def _check_address(address: str):
    if not validator.is_address(address):
        raise InvalidArgument(f"Invalid address: {address!r}")


def _check_hash(name: str, value: str):
    if not validator.is_tx_hash(value):
        raise InvalidArgument(f"Invalid {name}: {value!r}")


class IconService:
    """Every method validates its arguments and returns an unresolved `HttpCall`."""

    def __init__(self, provider: HttpProvider):
        self._provider = provider

    @property
    def provider(self) -> HttpProvider:
        return self._provider

    def get_total_supply(self) -> HttpCall:
        return self._provider.request("icx_getTotalSupply", converter=to_big_number)

    def get_balance(self, address: str) -> HttpCall:
        _check_address(address)
        return self._provider.request("icx_getBalance", {"address": address}, converter=to_big_number)

    def get_block(self, value: Union[int, str]) -> HttpCall:
        """Get a block by its height, its hash or "latest"."""
        if value == "latest":
            return self.get_last_block()
        if isinstance(value, int) and not isinstance(value, bool):
            return self.get_block_by_height(value)
        if isinstance(value, str) and value.startswith("0x"):
            return self.get_block_by_hash(value)
        raise InvalidArgument(f"Invalid block identifier: {value!r}")

    def get_block_by_height(self, height: int) -> HttpCall:
        try:
            height = to_hex_number(height)
        except InvalidNumericValue as e:
            raise InvalidArgument(f"Invalid block height: {height!r}") from e
        return self._provider.request("icx_getBlockByHeight", {"height": height})

    def get_block_by_hash(self, block_hash: str) -> HttpCall:
        _check_hash("block hash", block_hash)
        return self._provider.request("icx_getBlockByHash", {"hash": block_hash})

    def get_last_block(self) -> HttpCall:
        return self._provider.request("icx_getLastBlock")

    def get_score_api(self, address: str) -> HttpCall:
        if not validator.is_score_address(address):
            raise InvalidArgument(f"Invalid SCORE address: {address!r}")
        return self._provider.request("icx_getScoreApi", {"address": address})

    def get_transaction(self, tx_hash: str) -> HttpCall:
        _check_hash("transaction hash", tx_hash)
        return self._provider.request("icx_getTransactionByHash", {"txHash": tx_hash})

    def get_transaction_result(self, tx_hash: str) -> HttpCall:
        _check_hash("transaction hash", tx_hash)
        return self._provider.request("icx_getTransactionResult", {"txHash": tx_hash})

    def send_transaction(self, signed_transaction: SignedTransaction) -> HttpCall:
        if not isinstance(signed_transaction, SignedTransaction):
            raise InvalidArgument(f"Not a signed transaction: {type(signed_transaction)}")
        return self._provider.request("icx_sendTransaction", signed_transaction.get_properties())

    def call(self, call: Call) -> HttpCall:
        if not isinstance(call, Call):
            raise InvalidArgument(f"Not a call: {type(call)}")
        return self._provider.request("icx_call", call.to_dict())
