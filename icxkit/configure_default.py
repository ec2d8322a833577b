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
"""All icxkit configure value can set by system environment.
But before set by system environment, icxkit use this default values.
"""

import os

from enum import IntFlag, auto


#############
# LOGGING ###
#############
class LogOutputType(IntFlag):
    console = auto()
    file = auto()


ICXKIT_LOG_LEVEL = os.getenv('ICXKIT_LOG_LEVEL', 'INFO')
LOG_FORMAT = "%(asctime)s,%(msecs)03d %(process)d %(thread)d %(levelname)s %(filename)s(%(lineno)d) %(message)s"
LOG_OUTPUT_TYPE = LogOutputType.console
LOG_FILE_LOCATION = os.path.join(os.getcwd(), 'log')
LOG_FILE_PREFIX = "icxkit"
LOG_FILE_EXTENSION = "log"


###################
# TRANSACTION ###
###################
TRANSACTION_VERSION = 3
HASH_SALT = "icx_sendTransaction"


###################
# HTTP PROVIDER ###
###################
HTTP_TIMEOUT = 10
JSONRPC_API_PATH = "/api/v3"
