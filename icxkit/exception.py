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
"""A module of exceptions for errors on building, signing and sending transactions"""


class IconSdkError(Exception):
    """Base class of every error raised by icxkit.
    """
    pass


class InvalidAmount(IconSdkError):
    """Raise when an amount value or its unit digit cannot be parsed.
    """

    def __init__(self, value, message=''):
        super().__init__(message or f"Invalid amount: {value!r}")
        self.value = value


class InvalidNumericValue(IconSdkError):
    """Raise when a value is not representable as a non-negative integer quantity.
    """

    def __init__(self, value, message=''):
        super().__init__(message or f"Invalid numeric value: {value!r}")
        self.value = value


class InvalidAddress(IconSdkError):
    def __init__(self, field: str, address, message=''):
        super().__init__(message or f"Invalid address of '{field}': {address!r}")
        self.field = field
        self.address = address


class MissingRequiredField(IconSdkError):
    def __init__(self, field: str):
        super().__init__(f"Required field '{field}' is not set")
        self.field = field


class InvalidTransaction(IconSdkError):
    """Raise when the payload of a transaction does not match its data type.
    """
    pass


class BuilderAlreadyUsed(IconSdkError):
    """Raise when `build()` is called twice on the same builder.
    """
    pass


class SerializationFailed(IconSdkError):
    """Raise when a transaction cannot be converted to its canonical raw form.
    """
    pass


class SigningFailed(IconSdkError):
    """Raise when a wallet cannot produce a signature.
    """
    pass


class InvalidPrivateKey(IconSdkError):
    pass


class InvalidKeystore(IconSdkError):
    pass


class InvalidArgument(IconSdkError):
    pass


class JsonRpcError(IconSdkError):
    """Raise when a node answers with a JSON-RPC error object.
    """

    def __init__(self, code: int, message: str, data=None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self):
        return \
            f"{super().__str__()}\n" \
            f"Code: {self.code}"
