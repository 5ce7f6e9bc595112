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
"""Filesystem — the small slice of file operations the file cache relies on."""

from __future__ import annotations

import os
from pathlib import Path


class Filesystem:
    """Thin synchronous wrapper over :mod:`pathlib`.

    Kept as its own object so the file cache and the session sweeper can be
    exercised against a double instead of a real directory.
    """

    def exists(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def get(self, path: str | Path) -> str:
        """Return the contents of *path*. Raises FileNotFoundError if missing."""
        return Path(path).read_text(encoding="utf-8")

    def put(self, path: str | Path, contents: str) -> None:
        """Write *contents* to *path* atomically (temp file + rename)."""
        target = Path(path)
        temp = target.with_name(f"{target.name}.{os.getpid()}.tmp")
        temp.write_text(contents, encoding="utf-8")
        os.replace(temp, target)

    def delete(self, path: str | Path) -> bool:
        """Delete *path*. Returns False if it was already gone."""
        try:
            Path(path).unlink()
        except FileNotFoundError:
            return False
        return True

    def last_modified(self, path: str | Path) -> float:
        """Return the modification time of *path* as unix seconds."""
        return Path(path).stat().st_mtime

    def files(self, directory: str | Path) -> list[Path]:
        """List the regular files directly inside *directory*, sorted by name."""
        root = Path(directory)
        if not root.is_dir():
            return []
        return sorted(p for p in root.iterdir() if p.is_file())

    def make_directory(self, directory: str | Path) -> None:
        Path(directory).mkdir(parents=True, exist_ok=True)
