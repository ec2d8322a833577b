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

from .transaction import CallData, DataType, DeployData, Transaction, TransactionBase
from .transaction_builder import (TransactionBuilder, IcxTransactionBuilder, CallTransactionBuilder,
                                  DeployTransactionBuilder, MessageTransactionBuilder, build_transaction)
from .transaction_serializer import TransactionSerializer, canonicalize_param, to_raw_transaction
from .signed_transaction import SignedTransaction
from .call import Call, CallBuilder
