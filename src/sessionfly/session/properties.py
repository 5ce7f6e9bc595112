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
"""Session configuration properties bound from ``sessionfly.session``."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sessionfly.cache.adapters.file import FileCache
from sessionfly.core.config import config_properties
from sessionfly.session.adapters.cookie import DEFAULT_PAYLOAD_COOKIE, CookieSessionHandler
from sessionfly.session.adapters.file import FileSessionHandler
from sessionfly.session.store import DEFAULT_COOKIE_NAME, DEFAULT_LIFETIME, SessionStore


class CookieProperties(BaseModel):
    """Attributes of the session-id cookie (and of the payload cookie)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = DEFAULT_COOKIE_NAME
    path: str = "/"
    domain: str | None = None
    secure: bool = False
    http_only: bool = Field(default=True, alias="http-only")
    same_site: Literal["lax", "strict", "none"] | None = Field(default="lax", alias="same-site")


@config_properties(prefix="sessionfly.session")
class SessionProperties(BaseModel):
    """Session settings.

    Example ``sessionfly.yaml``::

        sessionfly:
          session:
            lifetime: 30
            lottery: [1, 50]
            cookie:
              name: app_session
              secure: true
    """

    model_config = ConfigDict(populate_by_name=True)

    lifetime: int = Field(default=DEFAULT_LIFETIME, gt=0)
    lottery: tuple[int, int] = (2, 100)
    cookie: CookieProperties = Field(default_factory=CookieProperties)
    payload_cookie: str = Field(default=DEFAULT_PAYLOAD_COOKIE, alias="payload-cookie")
    files: str = "storage/sessions"

    @field_validator("lottery")
    @classmethod
    def _check_lottery(cls, value: tuple[int, int]) -> tuple[int, int]:
        chance, out_of = value
        if out_of <= 0 or chance < 0:
            raise ValueError("lottery must be [chance, out_of] with 0 <= chance and 0 < out_of")
        return value

    def apply(self, store: SessionStore) -> SessionStore:
        """Push these settings into *store* (and its cookie handler, if any)."""
        store.set_lifetime(self.lifetime)
        store.set_sweep_lottery(self.lottery)
        for option, value in self.cookie.model_dump().items():
            store.set_cookie_option(option, value)
        if isinstance(store.handler, CookieSessionHandler):
            store.handler.set_payload_name(self.payload_cookie)
        return store

    def file_handler(self) -> FileSessionHandler:
        """Build a file session handler storing records under :attr:`files`."""
        return FileSessionHandler(FileCache(self.files))
