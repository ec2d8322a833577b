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
""" A class for the key pair of an EOA"""

import json
import logging
from typing import Union

from asn1crypto import keys
from coincurve import PrivateKey
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from eth_keyfile import create_keyfile_json, decode_keyfile_json

from icxkit import utils, validator
from icxkit.exception import InvalidArgument, InvalidKeystore, InvalidPrivateKey
from icxkit.types import Signature
from icxkit.wallet.verifier import address_from_pubkey

Key = Union[bytes, bytearray, str]


def _lower_keys(data):
    if isinstance(data, dict):
        return {key.lower(): _lower_keys(value) for key, value in data.items()}
    return data


class IconWallet:
    def __init__(self, private_key: PrivateKey):
        self.__private_key = private_key
        self.__address = address_from_pubkey(private_key.public_key.format(compressed=False))

    @classmethod
    def create(cls) -> 'IconWallet':
        wallet = cls(PrivateKey())
        utils.logger.verbose(f"New wallet created: {wallet.address}")
        return wallet

    @classmethod
    def load_private_key(cls, private_key: Key) -> 'IconWallet':
        if not validator.is_private_key(private_key):
            raise InvalidPrivateKey("Invalid private key.")

        if isinstance(private_key, str):
            private_key = bytes.fromhex(private_key[2:] if private_key.startswith("0x") else private_key)
        return cls(PrivateKey(bytes(private_key)))

    @classmethod
    def load_key_file(cls, key_file: str, password: Union[str, bytes]) -> 'IconWallet':
        """Load a wallet from a PKCS#8 ``.der`` / ``.pem`` file or a keystore file."""
        if isinstance(password, bytes):
            password_bytes = password
        else:
            password_bytes = password.encode()

        if key_file.endswith('.der') or key_file.endswith('.pem'):
            with open(key_file, "rb") as file:
                private_bytes = file.read()
            try:
                if key_file.endswith('.der'):
                    temp_private = serialization.load_der_private_key(private_bytes, password_bytes, default_backend())
                else:
                    temp_private = serialization.load_pem_private_key(private_bytes, password_bytes, default_backend())
            except (ValueError, TypeError) as e:
                raise InvalidPrivateKey(f"Invalid Password: {e}") from e

            no_pass_private = temp_private.private_bytes(
                encoding=serialization.Encoding.DER,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption()
            )
            key_info = keys.PrivateKeyInfo.load(no_pass_private)
            private_key = key_info['private_key'].native['private_key'].to_bytes(32, 'big')
            return cls.load_private_key(private_key)

        with open(key_file, "r", encoding="utf-8") as file:
            keystore = file.read()
        return cls.load_keystore(keystore, password_bytes.decode())

    @classmethod
    def load_keystore(cls, keystore: Union[dict, str], password: str, non_strict: bool = False) -> 'IconWallet':
        """Decrypt a Web3 secret storage (version 3) keystore.

        :param keystore: keystore object or its json string
        :param password: password of the keystore
        :param non_strict: compare the keys of the keystore case-insensitively
        """
        if isinstance(keystore, str):
            try:
                keystore = json.loads(keystore)
            except ValueError as e:
                raise InvalidKeystore(f"Keystore is not json: {e}") from e

        if not isinstance(keystore, dict):
            raise InvalidKeystore(f"Keystore must be an object: {type(keystore)}")

        if non_strict:
            keystore = _lower_keys(keystore)

        if keystore.get("version") != 3 or "crypto" not in keystore:
            raise InvalidKeystore("Not a version 3 keystore.")

        try:
            private_key = decode_keyfile_json(keystore, password.encode())
        except (ValueError, KeyError, TypeError, NotImplementedError) as e:
            raise InvalidKeystore(f"Cannot decrypt keystore: {e}") from e

        wallet = cls.load_private_key(private_key)
        address = keystore.get("address")
        if address is not None and address != wallet.address:
            raise InvalidKeystore(f"Address of keystore({address}) does not match its key({wallet.address}).")

        return wallet

    def store(self, password: str, **options) -> dict:
        """Encrypt the private key to a keystore object.

        :param password: password for encryption
        :param options: ``kdf`` ("scrypt" or "pbkdf2") and ``iterations``
        """
        keystore = create_keyfile_json(
            self.__private_key.secret,
            password.encode(),
            kdf=options.get("kdf", "scrypt"),
            iterations=options.get("iterations")
        )
        keystore["address"] = self.address
        keystore["coinType"] = "icx"
        return keystore

    def sign(self, data: Union[bytes, str]) -> str:
        """Sign a 32 bytes digest and return the base64 recoverable signature.

        Signatures are deterministic (RFC 6979).
        """
        if isinstance(data, str):
            data = data[2:] if data.startswith("0x") else data
            try:
                data = bytes.fromhex(data)
            except ValueError as e:
                raise InvalidArgument(f"hash data must be hex string or bytes: {e}") from e

        if not isinstance(data, (bytes, bytearray)) or len(data) != 32:
            logging.debug("data must be 32 bytes digest")
            raise InvalidArgument(f"data must be 32 bytes digest: {data!r}")

        signature = self.__private_key.sign_recoverable(bytes(data), hasher=None)
        return Signature(signature).to_base64str()

    def get_private_key(self) -> str:
        return self.__private_key.secret.hex()

    def get_public_key(self) -> str:
        return self.__private_key.public_key.format(compressed=False)[1:].hex()

    def get_address(self) -> str:
        return self.__address

    @property
    def address(self) -> str:
        return self.__address

    def __repr__(self):
        return f"{self.__class__.__qualname__}(address={self.__address})"
