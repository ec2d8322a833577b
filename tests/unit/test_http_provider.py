import asyncio

import pytest

from icxkit import HttpProvider
from icxkit import configure as conf
from icxkit.converter import to_big_number
from icxkit.exception import JsonRpcError


class FakeResponse:
    def __init__(self, data):
        self._data = data

    async def json(self, content_type=None):
        return self._data

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    requests = []

    def __init__(self, data, **kwargs):
        self._data = data
        self.kwargs = kwargs

    def post(self, url, json):
        self.requests.append((url, json))
        return FakeResponse(self._data)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class TestHttpProvider:
    @pytest.mark.parametrize("url, expected", [
        ("http://localhost:9000", "http://localhost:9000/api/v3"),
        ("http://localhost:9000/", "http://localhost:9000/api/v3"),
        ("127.0.0.1:9000", "http://127.0.0.1:9000/api/v3"),
        ("https://ctz.solidwallet.io/api/v3", "https://ctz.solidwallet.io/api/v3"),
        ("https://ctz.solidwallet.io/api/v3/", "https://ctz.solidwallet.io/api/v3"),
    ])
    def test_url(self, url, expected):
        assert HttpProvider(url).url == expected

    def test_timeout(self):
        assert HttpProvider("http://localhost:9000").timeout == conf.HTTP_TIMEOUT
        assert HttpProvider("http://localhost:9000", timeout=3).timeout == 3

    def test_request_payload(self):
        http_call = HttpProvider("http://localhost:9000").request("icx_getBalance", {"address": "hx" + "ab" * 20})

        assert http_call.url == "http://localhost:9000/api/v3"
        assert http_call.method == "icx_getBalance"
        assert http_call.payload["jsonrpc"] == "2.0"
        assert http_call.payload["method"] == "icx_getBalance"
        assert http_call.payload["params"] == {"address": "hx" + "ab" * 20}
        assert "id" in http_call.payload


class TestHttpCall:
    @pytest.fixture
    def post(self, mocker):
        return mocker.patch("icxkit.provider.http_provider.requests.post")

    def test_execute(self, post):
        http_call = HttpProvider("http://localhost:9000").request("icx_getTotalSupply", converter=to_big_number)
        post.return_value.json.return_value = {"jsonrpc": "2.0", "result": "0x10", "id": http_call.payload["id"]}

        assert http_call.execute() == 16
        post.assert_called_once_with(url="http://localhost:9000/api/v3",
                                     json=http_call.payload,
                                     timeout=conf.HTTP_TIMEOUT)

    def test_execute_without_converter(self, post):
        http_call = HttpProvider("http://localhost:9000").request("icx_getLastBlock")
        post.return_value.json.return_value = {"jsonrpc": "2.0", "result": {"height": 1}, "id": 1}

        assert http_call.execute() == {"height": 1}

    def test_error_response(self, post):
        http_call = HttpProvider("http://localhost:9000").request("icx_getBalance", {"address": "hx00"})
        post.return_value.json.return_value = {
            "jsonrpc": "2.0",
            "error": {"code": -32602, "message": "Invalid params"},
            "id": 1
        }

        with pytest.raises(JsonRpcError) as exc_info:
            http_call.execute()
        assert exc_info.value.code == -32602
        assert exc_info.value.message == "Invalid params"

    @pytest.mark.parametrize("data", [[], "0x10", {"jsonrpc": "2.0", "id": 1}])
    def test_unexpected_response(self, post, data):
        post.return_value.json.return_value = data

        with pytest.raises(JsonRpcError):
            HttpProvider("http://localhost:9000").request("icx_getLastBlock").execute()

    def test_parsed_response_of_unknown_kind(self, post, mocker):
        post.return_value.json.return_value = {"jsonrpc": "2.0", "result": "0x10", "id": 1}
        mocker.patch("icxkit.provider.http_provider.parse", return_value=object())

        with pytest.raises(JsonRpcError) as exc_info:
            HttpProvider("http://localhost:9000").request("icx_getTotalSupply").execute()
        assert exc_info.value.code == -32700

    def test_not_json_response(self, post):
        post.return_value.json.side_effect = ValueError("not json")

        with pytest.raises(ValueError):
            HttpProvider("http://localhost:9000").request("icx_getLastBlock").execute()

    def test_execute_async(self, mocker):
        data = {"jsonrpc": "2.0", "result": "0xff", "id": 1}
        FakeSession.requests = []
        mocker.patch("icxkit.provider.http_provider.ClientSession", lambda **kwargs: FakeSession(data, **kwargs))

        http_call = HttpProvider("http://localhost:9000").request("icx_getTotalSupply", converter=to_big_number)

        assert asyncio.run(http_call.execute_async()) == 255
        assert FakeSession.requests == [("http://localhost:9000/api/v3", http_call.payload)]
