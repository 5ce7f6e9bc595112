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
"""Session handler and sweeper protocols."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from sessionfly.session.record import SessionRecord


@runtime_checkable
class SessionHandler(Protocol):
    """Persistence strategy used by :class:`~sessionfly.session.store.SessionStore`.

    Handlers only move records in and out of storage; validation, expiry
    and flash aging belong to the store. ``request`` and ``response`` are
    passed through for handlers that keep state on the client.
    """

    async def retrieve(self, session_id: str, request: Any = None) -> SessionRecord | None: ...

    async def create(self, session_id: str, record: SessionRecord, response: Any = None) -> None: ...

    async def update(self, session_id: str, record: SessionRecord, response: Any = None) -> None: ...


@runtime_checkable
class Sweeper(Protocol):
    """Optional capability: purge records last written before *expiration*.

    The store checks for it with ``isinstance`` and runs it on a lottery.
    """

    async def sweep(self, expiration: float) -> int: ...


@runtime_checkable
class CookieConfigurable(Protocol):
    """Optional capability: handlers that write their own cookies.

    The store pushes its lifetime and cookie options through
    :meth:`configure_cookie` so every cookie it emits agrees on expiry,
    path, domain and flags.
    """

    def configure_cookie(self, **options: Any) -> None: ...
