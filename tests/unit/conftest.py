from typing import Callable

import pytest

from icxkit import (CallTransactionBuilder, DeployTransactionBuilder, IcxTransactionBuilder, IconWallet,
                    MessageTransactionBuilder, Transaction)

PRIVATE_KEY = bytes.fromhex("4d2a6bfc8f6c1f2e2b0f6f7a4c4b5b6d5e7f8091a2b3c4d5e6f708192a3b4c5d")
EOA_ADDRESS = "hx" + "ab" * 20
SCORE_ADDRESS = "cx" + "cd" * 20
TIMESTAMP = 1_546_300_800_000_000

TxBuilderFactory = Callable[..., object]


@pytest.fixture
def wallet() -> IconWallet:
    return IconWallet.load_private_key(PRIVATE_KEY)


@pytest.fixture
def tx_builder_factory(wallet) -> TxBuilderFactory:
    """Builders with every common field filled. ``data_type`` selects the kind of builder."""

    def _tx_builder_factory(data_type=None, nonce=1):
        if data_type == "call":
            tx_builder = CallTransactionBuilder().to(SCORE_ADDRESS).method("transfer")\
                .params({"_to": EOA_ADDRESS, "_value": 1})
        elif data_type == "deploy":
            tx_builder = DeployTransactionBuilder().to(SCORE_ADDRESS).content_type("application/zip")\
                .content(b"\x50\x4b\x03\x04").params({"name": "token"})
        elif data_type == "message":
            tx_builder = MessageTransactionBuilder().to(EOA_ADDRESS).data("0x68656c6c6f")
        else:
            tx_builder = IcxTransactionBuilder().to(EOA_ADDRESS).value(10 ** 18)

        return tx_builder.from_(wallet.get_address())\
            .step_limit(100_000)\
            .nid(3)\
            .nonce(nonce)\
            .timestamp(TIMESTAMP)

    return _tx_builder_factory


@pytest.fixture
def tx_factory(tx_builder_factory) -> Callable[..., Transaction]:
    def _tx_factory(data_type=None, nonce=1) -> Transaction:
        return tx_builder_factory(data_type, nonce).build()

    return _tx_factory
