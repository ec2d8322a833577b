import json
import os

import pytest

from icxkit import configure as conf
from icxkit.configure import Configure, get_configuration, set_configuration
from icxkit.hashing import get_tx_hash_generator


@pytest.fixture(autouse=True)
def reset_configure():
    yield
    Configure().init_configure()


class TestConfigure:
    def test_defaults(self):
        assert conf.TRANSACTION_VERSION == 3
        assert conf.HASH_SALT == "icx_sendTransaction"
        assert conf.JSONRPC_API_PATH == "/api/v3"

    def test_singleton(self):
        assert Configure() is Configure()

    def test_get_configuration(self):
        assert get_configuration("HTTP_TIMEOUT") == {'name': "HTTP_TIMEOUT", 'value': "10", 'type': "int"}
        assert get_configuration("NOT_A_CONFIGURE") is None

    def test_set_configuration(self):
        assert set_configuration("HASH_SALT", "icx_test")
        assert conf.HASH_SALT == "icx_test"
        assert get_tx_hash_generator().salt == "icx_test"

        assert not set_configuration("NOT_A_CONFIGURE", 1)

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT", "30")
        Configure().init_configure()
        assert conf.HTTP_TIMEOUT == 30

        monkeypatch.undo()
        Configure().init_configure()
        assert conf.HTTP_TIMEOUT == 10

    def test_invalid_environment_value_is_ignored(self, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT", "ten")
        Configure().init_configure()
        assert conf.HTTP_TIMEOUT == 10

    def test_load_configure_json(self, tmp_path):
        configure_path = os.path.join(str(tmp_path), "configure.json")
        with open(configure_path, "w") as configure_file:
            json.dump({"HTTP_TIMEOUT": 3, "NOT_A_CONFIGURE": 1}, configure_file)

        Configure().load_configure_json(configure_path)

        assert conf.HTTP_TIMEOUT == 3
        assert get_configuration("NOT_A_CONFIGURE") is None
