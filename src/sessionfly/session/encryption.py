# Copyright 2026 Firefly Software Solutions Inc.
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
"""Encrypter port and Fernet adapter for encrypted cookie sessions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cryptography.fernet import Fernet, InvalidToken

from sessionfly.kernel.exceptions import DecryptionException


@runtime_checkable
class Encrypter(Protocol):
    """Port for symmetric, authenticated encryption of session payloads."""

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt *data*. The result must be safe to embed in a cookie value."""
        ...

    def decrypt(self, token: bytes) -> bytes:
        """Decrypt *token*. Raises DecryptionException on tampered input."""
        ...


class FernetEncrypter:
    """Encrypter adapter using :class:`cryptography.fernet.Fernet`.

    Fernet tokens are AES-128-CBC + HMAC-SHA256 and URL-safe base64 encoded,
    so tampering is detected and tokens can travel as cookie values as-is.

    Args:
        key: A 32-byte URL-safe base64 key; generated when omitted.
    """

    def __init__(self, key: bytes | str | None = None) -> None:
        self._key = key.encode() if isinstance(key, str) else (key or Fernet.generate_key())
        self._fernet = Fernet(self._key)

    @property
    def key(self) -> bytes:
        return self._key

    def encrypt(self, data: bytes) -> bytes:
        return self._fernet.encrypt(data)

    def decrypt(self, token: bytes) -> bytes:
        try:
            return self._fernet.decrypt(token)
        except InvalidToken as exc:
            raise DecryptionException("Session payload could not be decrypted") from exc
