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
""" A class for signature verifier of transactions"""

import binascii
import hashlib
import logging
from typing import Union

from coincurve import PublicKey

from icxkit.types import ExternalAddress, Signature


def address_from_pubkey(pubkey: bytes) -> str:
    """Derive an EOA address from an uncompressed (65 bytes) public key."""
    if len(pubkey) == 33:
        pubkey = PublicKey(pubkey).format(compressed=False)
    hash_pub = hashlib.sha3_256(pubkey[1:]).digest()
    return ExternalAddress(hash_pub[-20:]).hex_hx()


def _to_signature(signature: Union[str, bytes]) -> Signature:
    if isinstance(signature, Signature):
        return signature
    if isinstance(signature, str):
        return Signature.from_base64str(signature)
    return Signature(signature)


class SignatureVerifier:
    def __init__(self, address: str):
        self.address = address

    @classmethod
    def from_address(cls, address: str):
        return cls(address)

    @classmethod
    def from_pubkey(cls, pubkey: bytes):
        return cls(address_from_pubkey(pubkey))

    @staticmethod
    def recover_pubkey(tx_hash: bytes, signature: Union[str, bytes]) -> bytes:
        signature = _to_signature(signature)
        public_key = PublicKey.from_signature_and_message(bytes(signature), tx_hash, hasher=None)
        return public_key.format(compressed=False)

    def verify_hash(self, tx_hash: bytes, signature: Union[str, bytes]) -> bool:
        try:
            pubkey = self.recover_pubkey(tx_hash, signature)
        except (ValueError, TypeError, binascii.Error) as e:
            logging.debug(f"Fail to verify the signature : ({tx_hash})/({signature})\n{e}")
            return False

        return address_from_pubkey(pubkey) == self.address
