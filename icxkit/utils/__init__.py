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
"""util functions for icxkit"""

import logging
import time
from urllib.parse import urlparse

import verboselogs

logger = verboselogs.VerboseLogger("icxkit.sdk")
# records propagate to the icxkit logger configured by loggers.update_preset()
logger.parent = logging.getLogger("icxkit")


def get_now_time_stamp(init_time_seconds=None):
    time_seconds = time.time() if init_time_seconds is None else init_time_seconds
    return int(time_seconds * 1_000_000)


def normalize_request_url(url_input: str, api_path: str) -> str:
    """Complete a node url with scheme and JSON-RPC path.

    ex) 127.0.0.1:9000 => http://127.0.0.1:9000/api/v3
        https://ctz.solidwallet.io => https://ctz.solidwallet.io/api/v3
    """
    url_input = url_input.strip()
    if not url_input:
        url_input = "http://localhost:9000"
    elif "://" not in url_input:
        url_input = "http://" + url_input

    parsed = urlparse(url_input)
    if parsed.path in ("", "/"):
        return f"{parsed.scheme}://{parsed.netloc}{api_path}"
    return url_input.rstrip("/")
