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
"""File-backed session handler with expired-record sweeping."""

from __future__ import annotations

import logging

from sessionfly.cache.adapters.file import FileCache
from sessionfly.cache.ports.outbound import CacheAdapter
from sessionfly.kernel.exceptions import InvalidConfigurationException
from sessionfly.session.adapters.cache import CacheSessionHandler
from sessionfly.session.serializer import SessionSerializer

_logger = logging.getLogger("sessionfly.session")


class FileSessionHandler(CacheSessionHandler):
    """Cache-backed handler over a :class:`FileCache`, plus :meth:`sweep`.

    Raises:
        InvalidConfigurationException: if *cache* is not a FileCache.
    """

    def __init__(self, cache: CacheAdapter, serializer: SessionSerializer | None = None) -> None:
        if not isinstance(cache, FileCache):
            raise InvalidConfigurationException(
                "File session driver requires file cache.",
                context={"cache": type(cache).__name__},
            )
        super().__init__(cache, serializer)
        self._file_cache = cache

    async def sweep(self, expiration: float) -> int:
        """Delete session files last modified before *expiration* (unix seconds).

        Files removed concurrently by another request are skipped; any other
        I/O error is logged and the pass moves on to the next file.
        """
        files = self._file_cache.filesystem
        removed = 0

        for path in files.files(self._file_cache.directory):
            try:
                if files.last_modified(path) < expiration and files.delete(path):
                    removed += 1
            except FileNotFoundError:
                continue
            except OSError as exc:
                _logger.warning("Could not sweep session file '%s': %s", path, exc)

        if removed:
            _logger.debug("Swept %d expired session file(s)", removed)
        return removed
