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
"""File-backed cache adapter — one file per key."""

from __future__ import annotations

import hashlib
import json
import logging
import time
from datetime import timedelta
from pathlib import Path
from typing import Any

from sessionfly.cache.filesystem import Filesystem

_logger = logging.getLogger(__name__)

# Each file starts with a fixed-width expiry stamp; 0 means "never expires".
_EXPIRY_WIDTH = 10


class FileCache:
    """Cache adapter that keeps every entry in its own file under *directory*.

    File names are the SHA-1 of the key, so arbitrary keys map to safe
    names. The file's modification time doubles as the entry's last write,
    which is what the file session handler sweeps on.
    """

    def __init__(self, directory: str | Path, filesystem: Filesystem | None = None) -> None:
        self._directory = Path(directory)
        self._files = filesystem or Filesystem()
        self._files.make_directory(self._directory)

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def filesystem(self) -> Filesystem:
        return self._files

    def path(self, key: str) -> Path:
        """Return the file path that holds *key*."""
        return self._directory / hashlib.sha1(key.encode()).hexdigest()

    async def get(self, key: str) -> Any | None:
        """Read and decode the entry for *key*; expired entries are removed."""
        path = self.path(key)
        try:
            contents = self._files.get(path)
        except FileNotFoundError:
            return None

        try:
            expires_at = int(contents[:_EXPIRY_WIDTH])
            value = json.loads(contents[_EXPIRY_WIDTH:])
        except ValueError:
            _logger.warning("Discarding unreadable cache file '%s'", path.name)
            return None

        if expires_at and time.time() >= expires_at:
            self._files.delete(path)
            return None

        return value

    async def put(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        """Write *value* for *key*; ``ttl=None`` keeps it until evicted or swept."""
        expires_at = int(time.time() + ttl.total_seconds()) if ttl is not None else 0
        self._files.put(self.path(key), f"{expires_at:0{_EXPIRY_WIDTH}d}{json.dumps(value)}")

    async def evict(self, key: str) -> bool:
        return self._files.delete(self.path(key))

    async def exists(self, key: str) -> bool:
        return await self.get(key) is not None

    async def clear(self) -> None:
        """Delete every file in the cache directory."""
        for path in self._files.files(self._directory):
            self._files.delete(path)
