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
"""Session payload serializers."""

from __future__ import annotations

import json
from typing import Protocol, runtime_checkable

from sessionfly.kernel.exceptions import SessionPayloadException
from sessionfly.session.record import SessionRecord


@runtime_checkable
class SessionSerializer(Protocol):
    """Turns a :class:`SessionRecord` into a string payload and back."""

    def serialize(self, record: SessionRecord) -> str: ...

    def deserialize(self, payload: str | bytes) -> SessionRecord: ...


class JsonSessionSerializer:
    """JSON serializer with sorted keys and compact separators.

    Output is byte-stable for equal records, which keeps encrypted cookie
    payloads reproducible. Session values must be JSON-compatible.
    """

    def serialize(self, record: SessionRecord) -> str:
        """Encode *record*; raises SessionPayloadException for non-JSON values."""
        try:
            return json.dumps(record.to_dict(), sort_keys=True, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise SessionPayloadException(f"Session data is not JSON serializable: {exc}") from exc

    def deserialize(self, payload: str | bytes) -> SessionRecord:
        """Decode *payload*; raises SessionPayloadException when malformed."""
        try:
            decoded = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as exc:
            raise SessionPayloadException("Session payload is not valid JSON") from exc

        record = SessionRecord.from_dict(decoded)
        if record is None:
            raise SessionPayloadException("Session payload is not a session record")
        return record
