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
"""Cookie factory shared by the session store and the cookie session handlers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

SameSite = Literal["lax", "strict", "none"]


@dataclass(frozen=True)
class SessionCookie:
    """An outgoing cookie, independent of any HTTP framework."""

    name: str
    value: str
    expires: int | None = None
    max_age: int | None = None
    path: str = "/"
    domain: str | None = None
    secure: bool = False
    http_only: bool = True
    same_site: SameSite | None = "lax"


class CookieJar:
    """Builds cookies from shared defaults and attaches them to responses.

    The session store and a cookie session handler share one jar, so the
    session-id cookie and the payload cookie always carry the same
    lifetime, path, domain and flags.

    Responses are expected to expose Starlette's ``set_cookie`` signature.
    """

    def __init__(
        self,
        path: str = "/",
        domain: str | None = None,
        secure: bool = False,
        http_only: bool = True,
        same_site: SameSite | None = "lax",
        minutes: int = 0,
    ) -> None:
        self.path = path
        self.domain = domain
        self.secure = secure
        self.http_only = http_only
        self.same_site = same_site
        self.minutes = minutes

    def set_defaults(self, **options: Any) -> None:
        """Update default cookie attributes (``path``, ``domain``, ``secure``, ...)."""
        for name, value in options.items():
            if not hasattr(self, name) or name.startswith("_"):
                raise AttributeError(f"Unknown cookie option '{name}'")
            setattr(self, name, value)

    def make(
        self,
        name: str,
        value: str,
        minutes: int | None = None,
        now: float | None = None,
    ) -> SessionCookie:
        """Build a cookie expiring *minutes* from *now*.

        *minutes* falls back to the jar's default; ``0`` yields a
        browser-session cookie with no expiry.
        """
        minutes = self.minutes if minutes is None else minutes
        expires = max_age = None
        if minutes:
            max_age = minutes * 60
            expires = int((time.time() if now is None else now) + max_age)

        return SessionCookie(
            name=name,
            value=value,
            expires=expires,
            max_age=max_age,
            path=self.path,
            domain=self.domain,
            secure=self.secure,
            http_only=self.http_only,
            same_site=self.same_site,
        )

    def attach(self, response: Any, cookie: SessionCookie) -> None:
        """Add *cookie* to *response* via ``response.set_cookie(...)``."""
        expires = datetime.fromtimestamp(cookie.expires, tz=UTC) if cookie.expires is not None else None
        response.set_cookie(
            key=cookie.name,
            value=cookie.value,
            max_age=cookie.max_age,
            expires=expires,
            path=cookie.path,
            domain=cookie.domain,
            secure=cookie.secure,
            httponly=cookie.http_only,
            samesite=cookie.same_site,
        )
