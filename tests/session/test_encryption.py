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
"""Tests for FernetEncrypter."""

from __future__ import annotations

import pytest
from cryptography.fernet import Fernet

from sessionfly.kernel.exceptions import DecryptionException, SessionPayloadException
from sessionfly.session.encryption import Encrypter, FernetEncrypter


class TestFernetEncrypter:
    def test_satisfies_port(self):
        assert isinstance(FernetEncrypter(), Encrypter)

    def test_round_trip(self):
        encrypter = FernetEncrypter()
        assert encrypter.decrypt(encrypter.encrypt(b"payload")) == b"payload"

    def test_accepts_str_key(self):
        key = Fernet.generate_key()
        writer = FernetEncrypter(key.decode())
        reader = FernetEncrypter(key)
        assert reader.decrypt(writer.encrypt(b"x")) == b"x"
        assert writer.key == key

    def test_generates_key_when_omitted(self):
        assert FernetEncrypter().key != FernetEncrypter().key

    def test_token_is_cookie_safe(self):
        token = FernetEncrypter().encrypt(b"{}").decode("ascii")
        assert all(c.isalnum() or c in "-_=" for c in token)

    def test_wrong_key_raises(self):
        token = FernetEncrypter().encrypt(b"x")
        with pytest.raises(DecryptionException):
            FernetEncrypter().decrypt(token)

    def test_decryption_error_is_a_payload_error(self):
        with pytest.raises(SessionPayloadException):
            FernetEncrypter().decrypt(b"not-a-token")

    def test_invalid_key_is_rejected(self):
        with pytest.raises(ValueError):
            FernetEncrypter(b"too-short")
