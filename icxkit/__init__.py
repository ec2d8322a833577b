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
"""Build, sign and send ICON JSON-RPC v3 transactions."""

from .amount import IconAmount, Unit
from .converter import from_utf8, to_big_number, to_hex, to_hex_number, to_number, to_raw_transaction, to_utf8
from .exception import *
from .transactions import (Call, CallBuilder, CallTransactionBuilder, DeployTransactionBuilder, IcxTransactionBuilder,
                           MessageTransactionBuilder, SignedTransaction, Transaction, TransactionSerializer)
from .wallet import IconWallet, SignatureVerifier
from .provider import HttpProvider, IconService
