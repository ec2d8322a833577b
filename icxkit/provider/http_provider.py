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
"""The JSON-RPC transport over HTTP."""

import logging
from typing import Any, Callable, Optional

import requests
from aiohttp import ClientSession, ClientTimeout
from jsonrpcclient import Error, Ok, parse, request

from icxkit import configure as conf
from icxkit import utils
from icxkit.exception import JsonRpcError

Converter = Callable[[Any], Any]


class HttpCall:
    """A pending JSON-RPC call. It is resolved once by `execute` or `execute_async`."""

    def __init__(self, url: str, payload: dict, timeout, converter: Optional[Converter] = None):
        self._url = url
        self._payload = payload
        self._timeout = timeout
        self._converter = converter

    @property
    def url(self) -> str:
        return self._url

    @property
    def payload(self) -> dict:
        return self._payload

    @property
    def method(self) -> str:
        return self._payload["method"]

    def execute(self):
        try:
            response = requests.post(url=self._url, json=self._payload, timeout=self._timeout)
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logging.debug(f"JSON-RPC call fail method_name({self.method}), caused by : {type(e)}, {e}")
            raise

        utils.logger.spam(f"JSON-RPC call complete method_name({self.method})")
        return self._handle_response(data)

    async def execute_async(self):
        timeout = ClientTimeout(total=self._timeout)
        async with ClientSession(timeout=timeout) as session:
            async with session.post(url=self._url, json=self._payload) as response:
                data = await response.json(content_type=None)

        utils.logger.spam(f"JSON-RPC call async complete method_name({self.method})")
        return self._handle_response(data)

    def _handle_response(self, data):
        if not isinstance(data, dict):
            raise JsonRpcError(-32700, f"Unexpected response: {data!r}")

        try:
            response = parse(data)
        except (KeyError, TypeError) as e:
            raise JsonRpcError(-32700, f"Unexpected response: {data!r}") from e

        if isinstance(response, Error):
            logging.debug(f"JSON-RPC error method_name({self.method}): {response.code}, {response.message}")
            raise JsonRpcError(response.code, response.message, response.data)
        if not isinstance(response, Ok):
            raise JsonRpcError(-32700, f"Unexpected response: {data!r}")

        if self._converter is None:
            return response.result
        return self._converter(response.result)


class HttpProvider:
    def __init__(self, url: str, timeout=None):
        self._url = utils.normalize_request_url(url, conf.JSONRPC_API_PATH)
        self._timeout = timeout or conf.HTTP_TIMEOUT

    @property
    def url(self) -> str:
        return self._url

    @property
    def timeout(self):
        return self._timeout

    def request(self, method: str, params: Optional[dict] = None, converter: Optional[Converter] = None) -> HttpCall:
        payload = request(method, params=params) if params else request(method)
        return HttpCall(self._url, payload, self._timeout, converter)

    def __repr__(self):
        return f"{self.__class__.__qualname__}(url={self._url})"
