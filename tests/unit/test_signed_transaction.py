import base64

import pytest

from icxkit import SignatureVerifier, SignedTransaction, TransactionSerializer
from icxkit.exception import SerializationFailed, SigningFailed
from icxkit.transactions import CallData, DataType, Transaction
from conftest import EOA_ADDRESS


class TestSignedTransaction:
    @pytest.mark.parametrize("data_type", [None, "call", "deploy", "message"])
    def test_properties_are_raw_data_with_signature(self, tx_factory, wallet, data_type):
        tx = tx_factory(data_type)
        signed_tx = SignedTransaction(tx, wallet)

        properties = signed_tx.get_properties()
        raw_data = TransactionSerializer().to_raw_data(tx)

        assert set(properties) == set(raw_data) | {"signature"}
        assert properties.pop("signature") == signed_tx.get_signature()
        assert properties == raw_data

    def test_signature_is_deterministic(self, tx_factory, wallet):
        tx = tx_factory("call")
        assert SignedTransaction(tx, wallet).get_signature() == SignedTransaction(tx, wallet).get_signature()

    def test_nonce_changes_signature(self, tx_factory, wallet):
        signature_1 = SignedTransaction(tx_factory(nonce=1), wallet).get_signature()
        signature_2 = SignedTransaction(tx_factory(nonce=2), wallet).get_signature()

        assert signature_1 != signature_2

    def test_signature_form(self, tx_factory, wallet):
        signature = SignedTransaction(tx_factory(), wallet).get_signature()
        assert len(base64.b64decode(signature)) == 65

    def test_signature_recovers_sender(self, tx_factory, wallet):
        signed_tx = SignedTransaction(tx_factory(), wallet)
        tx_hash = bytes.fromhex(signed_tx.tx_hash[2:])

        assert SignatureVerifier.from_address(wallet.get_address()).verify_hash(tx_hash, signed_tx.get_signature())
        assert not SignatureVerifier.from_address(EOA_ADDRESS).verify_hash(tx_hash, signed_tx.get_signature())

    def test_tx_hash(self, tx_factory, wallet):
        tx = tx_factory()
        signed_tx = SignedTransaction(tx, wallet)

        assert signed_tx.tx_hash == TransactionSerializer().get_tx_hash(tx)
        assert signed_tx.transaction is tx

    def test_raw_transaction_is_a_copy(self, tx_factory, wallet):
        signed_tx = SignedTransaction(tx_factory("call"), wallet)

        raw_data = signed_tx.get_raw_transaction()
        raw_data["data"]["method"] = "changed"
        raw_data["nonce"] = "0x99"

        assert signed_tx.get_raw_transaction()["data"]["method"] == "transfer"
        assert signed_tx.get_raw_transaction()["nonce"] == "0x1"

    def test_wallet_signs_digest(self, tx_factory, mocker):
        tx = tx_factory()
        fake_wallet = mocker.Mock()
        fake_wallet.sign.return_value = "c2lnbmF0dXJl"

        signed_tx = SignedTransaction(tx, fake_wallet)

        fake_wallet.sign.assert_called_once_with(TransactionSerializer().get_hash(tx))
        assert signed_tx.get_signature() == "c2lnbmF0dXJl"

    def test_wallet_failure(self, tx_factory, mocker):
        fake_wallet = mocker.Mock()
        fake_wallet.sign.side_effect = RuntimeError("device is locked")

        with pytest.raises(SigningFailed) as exc_info:
            SignedTransaction(tx_factory(), fake_wallet)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.parametrize("signature", ["", None, b"signature"])
    def test_invalid_signature_from_wallet(self, tx_factory, mocker, signature):
        fake_wallet = mocker.Mock()
        fake_wallet.sign.return_value = signature

        with pytest.raises(SigningFailed):
            SignedTransaction(tx_factory(), fake_wallet)

    def test_unserializable_transaction(self, tx_factory, mocker):
        fake_wallet = mocker.Mock()
        tx = tx_factory("call")
        tx = Transaction(base=tx.base, data_type=DataType.CALL, data=CallData(method="transfer", params={"_value": 0.5}))

        with pytest.raises(SerializationFailed):
            SignedTransaction(tx, fake_wallet)
        fake_wallet.sign.assert_not_called()
