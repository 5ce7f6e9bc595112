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
"""Cache-backed session handler."""

from __future__ import annotations

import logging
from typing import Any

from sessionfly.cache.ports.outbound import CacheAdapter
from sessionfly.kernel.exceptions import SessionPayloadException
from sessionfly.logging.masking import mask_session_id
from sessionfly.session.record import SessionRecord
from sessionfly.session.serializer import JsonSessionSerializer, SessionSerializer

_logger = logging.getLogger("sessionfly.session")


class CacheSessionHandler:
    """Stores each serialized record under its session id in a cache.

    Entries are written without a TTL: the cache is the system of record and
    the store decides expiry from ``last_activity``.
    """

    def __init__(self, cache: CacheAdapter, serializer: SessionSerializer | None = None) -> None:
        self._cache = cache
        self._serializer = serializer or JsonSessionSerializer()

    @property
    def cache(self) -> CacheAdapter:
        return self._cache

    async def retrieve(self, session_id: str, request: Any = None) -> SessionRecord | None:
        payload = await self._cache.get(session_id)
        if payload is None:
            return None
        try:
            return self._serializer.deserialize(payload)
        except SessionPayloadException:
            _logger.warning("Discarding unreadable session payload for %s", mask_session_id(session_id))
            return None

    async def create(self, session_id: str, record: SessionRecord, response: Any = None) -> None:
        await self._cache.put(session_id, self._serializer.serialize(record), ttl=None)

    async def update(self, session_id: str, record: SessionRecord, response: Any = None) -> None:
        await self.create(session_id, record, response)
