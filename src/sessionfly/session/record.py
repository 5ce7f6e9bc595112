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
"""SessionRecord — the durable unit a session handler persists."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Any

SESSION_ID_LENGTH = 40


def generate_session_id() -> str:
    """Return a new 40-character lowercase hex session id from the OS CSPRNG."""
    return secrets.token_hex(SESSION_ID_LENGTH // 2)


@dataclass
class FlashBags:
    """Two-generation flash buffer.

    ``new`` holds values flashed during the current request; ``old`` holds
    values flashed during the previous one. Aging moves ``new`` into ``old``.
    """

    old: dict[str, Any] = field(default_factory=dict)
    new: dict[str, Any] = field(default_factory=dict)

    def age(self) -> None:
        self.old = self.new
        self.new = {}

    def clear(self) -> None:
        self.old = {}
        self.new = {}


@dataclass
class SessionRecord:
    """Session state as stored by a handler.

    Attributes:
        id: 40-character opaque identifier.
        data: Caller key/value payload.
        flash: Flash buckets, kept apart from ``data`` so no caller key can
            collide with them.
        last_activity: Unix seconds of the last persist, ``None`` until the
            record has been written once.
    """

    id: str
    data: dict[str, Any] = field(default_factory=dict)
    flash: FlashBags = field(default_factory=FlashBags)
    last_activity: int | None = None

    @classmethod
    def fresh(cls, session_id: str) -> SessionRecord:
        return cls(id=session_id)

    def to_dict(self) -> dict[str, Any]:
        """Return the plain-dict form handed to serializers."""
        payload: dict[str, Any] = {
            "id": self.id,
            "data": self.data,
            "flash": {"old": self.flash.old, "new": self.flash.new},
        }
        if self.last_activity is not None:
            payload["last_activity"] = self.last_activity
        return payload

    @classmethod
    def from_dict(cls, payload: Any) -> SessionRecord | None:
        """Rebuild a record from :meth:`to_dict` output.

        Returns ``None`` for anything that is not a well-formed record.
        """
        if not isinstance(payload, dict):
            return None

        session_id = payload.get("id")
        data = payload.get("data")
        flash = payload.get("flash", {})
        last_activity = payload.get("last_activity")

        if not isinstance(session_id, str) or not isinstance(data, dict) or not isinstance(flash, dict):
            return None
        old, new = flash.get("old", {}), flash.get("new", {})
        if not isinstance(old, dict) or not isinstance(new, dict):
            return None
        if last_activity is not None and (isinstance(last_activity, bool) or not isinstance(last_activity, int)):
            return None

        return cls(
            id=session_id,
            data=dict(data),
            flash=FlashBags(old=dict(old), new=dict(new)),
            last_activity=last_activity,
        )
