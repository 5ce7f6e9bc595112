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
"""Client-side session handlers that keep the whole record in a cookie."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

from sessionfly.kernel.exceptions import SessionPayloadException
from sessionfly.session.cookies import CookieJar
from sessionfly.session.encryption import Encrypter
from sessionfly.session.record import SessionRecord
from sessionfly.session.serializer import JsonSessionSerializer, SessionSerializer

_logger = logging.getLogger("sessionfly.session")

DEFAULT_PAYLOAD_COOKIE = "illuminate_payload"


class CookieSessionHandler:
    """Stores the serialized record in a payload cookie, separate from the id cookie.

    A store pushes its lifetime and cookie options in through
    :meth:`configure_cookie`, so the payload cookie always matches the
    session-id cookie. There is no server-side storage. The payload is only
    base64 encoded: clients can read every session value and can forge new
    ones. Use
    :class:`EncryptedCookieSessionHandler` for anything that must stay
    confidential or trusted.
    """

    def __init__(
        self,
        cookie_jar: CookieJar | None = None,
        serializer: SessionSerializer | None = None,
        payload_name: str = DEFAULT_PAYLOAD_COOKIE,
    ) -> None:
        self._cookies = cookie_jar or CookieJar()
        self._serializer = serializer or JsonSessionSerializer()
        self._payload = payload_name

    @property
    def cookie_jar(self) -> CookieJar:
        return self._cookies

    @property
    def payload_name(self) -> str:
        return self._payload

    def set_payload_name(self, name: str) -> None:
        self._payload = name

    def configure_cookie(self, **options: Any) -> None:
        """Apply lifetime (``minutes``) and attribute defaults to the payload cookie."""
        self._cookies.set_defaults(**options)

    async def retrieve(self, session_id: str, request: Any = None) -> SessionRecord | None:
        cookies = getattr(request, "cookies", None) or {}
        value = cookies.get(self._payload)
        if not value:
            return None
        try:
            return self._serializer.deserialize(self.decode(value))
        except SessionPayloadException as exc:
            _logger.info("Ignoring session payload cookie '%s': %s", self._payload, exc)
            return None

    async def create(self, session_id: str, record: SessionRecord, response: Any = None) -> None:
        value = self.encode(self._serializer.serialize(record))
        self._cookies.attach(response, self._cookies.make(self._payload, value, now=record.last_activity))

    async def update(self, session_id: str, record: SessionRecord, response: Any = None) -> None:
        await self.create(session_id, record, response)

    def encode(self, payload: str) -> str:
        """Turn a serialized record into a cookie-safe value."""
        return base64.urlsafe_b64encode(payload.encode()).decode("ascii")

    def decode(self, value: str) -> bytes:
        """Reverse :meth:`encode`; raises SessionPayloadException on bad input."""
        try:
            return base64.urlsafe_b64decode(value.encode("ascii"))
        except (binascii.Error, UnicodeEncodeError) as exc:
            raise SessionPayloadException("Session payload cookie is not valid base64") from exc


class EncryptedCookieSessionHandler(CookieSessionHandler):
    """Cookie session handler whose payload is encrypted and authenticated.

    Payloads that fail to decrypt (tampered, truncated, or issued under a
    different key) are treated as a missing session.
    """

    def __init__(
        self,
        encrypter: Encrypter,
        cookie_jar: CookieJar | None = None,
        serializer: SessionSerializer | None = None,
        payload_name: str = DEFAULT_PAYLOAD_COOKIE,
    ) -> None:
        super().__init__(cookie_jar, serializer, payload_name)
        self._encrypter = encrypter

    @property
    def encrypter(self) -> Encrypter:
        return self._encrypter

    def encode(self, payload: str) -> str:
        return self._encrypter.encrypt(payload.encode()).decode("ascii")

    def decode(self, value: str) -> bytes:
        try:
            token = value.encode("ascii")
        except UnicodeEncodeError as exc:
            raise SessionPayloadException("Session payload cookie is not ASCII") from exc
        return self._encrypter.decrypt(token)
