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
"""Session id masking for log output.

A session id is a bearer credential: anyone who reads it from a log file can
replay it. Log lines carry a short SHA-256 fingerprint instead, which is
stable enough to correlate requests of the same session.
"""

from __future__ import annotations

import hashlib
from collections.abc import MutableMapping
from typing import Any

_MASKED_KEYS = frozenset({"session_id", "old_session_id", "new_session_id"})


def mask_session_id(session_id: str | None) -> str:
    """Return a loggable fingerprint (``sha256:<16 hex>``) for *session_id*."""
    if not session_id:
        return "-"
    return f"sha256:{hashlib.sha256(session_id.encode()).hexdigest()[:16]}"


def mask_session_ids(_logger: Any, _method: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """structlog processor replacing session id fields with their fingerprint."""
    for key in _MASKED_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str) and not value.startswith("sha256:"):
            event_dict[key] = mask_session_id(value)
    return event_dict
