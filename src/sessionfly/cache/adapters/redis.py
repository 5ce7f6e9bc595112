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
"""Redis-backed cache adapter."""

from __future__ import annotations

import json
import logging
from datetime import timedelta
from typing import Any, cast

_logger = logging.getLogger(__name__)


class RedisCacheAdapter:
    """Cache adapter that delegates to a ``redis.asyncio.Redis``-like client.

    Values are JSON-serialized before storage. Keys are namespaced with
    *prefix* so session payloads can share a database with other data;
    ``clear()`` therefore only removes keys under that prefix.
    """

    def __init__(self, client: Any, prefix: str = "sessionfly:") -> None:
        self._client = client
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> Any | None:
        """Retrieve and deserialize a cached value."""
        raw = await self._client.get(self._key(key))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            _logger.warning("Failed to deserialize cached value for key '%s'", key)
            return None

    async def put(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        """Serialize and store a value; ``ttl=None`` stores it without expiry."""
        raw = json.dumps(value)
        ex = int(ttl.total_seconds()) if ttl is not None else None
        await self._client.set(self._key(key), raw.encode(), ex=ex)

    async def evict(self, key: str) -> bool:
        """Remove a key. Returns True if the key existed."""
        count = await self._client.delete(self._key(key))
        return cast(bool, count > 0)

    async def exists(self, key: str) -> bool:
        """Check whether a key exists."""
        count = await self._client.exists(self._key(key))
        return cast(bool, count > 0)

    async def clear(self) -> None:
        """Remove every key under this adapter's prefix."""
        keys = [key async for key in self._client.scan_iter(match=f"{self._prefix}*")]
        if keys:
            await self._client.delete(*keys)

    async def stop(self) -> None:
        """Close the underlying Redis connection."""
        await self._client.aclose()
