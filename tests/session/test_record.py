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
"""Tests for SessionRecord, FlashBags and the JSON serializer."""

from __future__ import annotations

import json
import re
from datetime import date

import pytest

from sessionfly.kernel.exceptions import SessionPayloadException
from sessionfly.session.record import FlashBags, SessionRecord, generate_session_id
from sessionfly.session.serializer import JsonSessionSerializer, SessionSerializer


class TestSessionId:
    def test_is_forty_lowercase_hex_chars(self):
        assert re.fullmatch(r"[0-9a-f]{40}", generate_session_id())

    def test_ids_differ(self):
        assert len({generate_session_id() for _ in range(100)}) == 100


class TestFlashBags:
    def test_age_moves_new_to_old_and_drops_old(self):
        bags = FlashBags(old={"a": 1}, new={"b": 2})
        bags.age()
        assert bags == FlashBags(old={"b": 2}, new={})

    def test_clear(self):
        bags = FlashBags(old={"a": 1}, new={"b": 2})
        bags.clear()
        assert bags == FlashBags()


class TestSessionRecord:
    def test_fresh_record_is_empty(self):
        record = SessionRecord.fresh("x" * 40)
        assert record.data == {}
        assert record.flash == FlashBags()
        assert record.last_activity is None

    def test_to_dict_omits_missing_last_activity(self):
        assert "last_activity" not in SessionRecord(id="x").to_dict()

    def test_dict_round_trip(self):
        record = SessionRecord(id="x", data={"k": "v"}, flash=FlashBags(old={"o": 1}), last_activity=5)
        assert SessionRecord.from_dict(record.to_dict()) == record

    def test_from_dict_defaults_flash(self):
        record = SessionRecord.from_dict({"id": "x", "data": {}})
        assert record is not None
        assert record.flash == FlashBags()

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            "x",
            {"data": {}},
            {"id": 1, "data": {}},
            {"id": "x"},
            {"id": "x", "data": []},
            {"id": "x", "data": {}, "flash": []},
            {"id": "x", "data": {}, "flash": {"old": []}},
            {"id": "x", "data": {}, "last_activity": "yesterday"},
            {"id": "x", "data": {}, "last_activity": 1.5},
            {"id": "x", "data": {}, "last_activity": True},
        ],
    )
    def test_from_dict_rejects_malformed(self, payload):
        assert SessionRecord.from_dict(payload) is None


class TestJsonSessionSerializer:
    def test_satisfies_port(self):
        assert isinstance(JsonSessionSerializer(), SessionSerializer)

    def test_output_is_stable(self):
        serializer = JsonSessionSerializer()
        first = SessionRecord(id="x", data={"b": 1, "a": 2}, last_activity=5)
        second = SessionRecord(id="x", data={"a": 2, "b": 1}, last_activity=5)
        assert serializer.serialize(first) == serializer.serialize(second)
        assert " " not in serializer.serialize(first)

    def test_flash_is_kept_apart_from_data(self):
        payload = json.loads(JsonSessionSerializer().serialize(SessionRecord(id="x", flash=FlashBags(new={"k": 1}))))
        assert payload["data"] == {}
        assert payload["flash"] == {"old": {}, "new": {"k": 1}}

    def test_deserialize_accepts_bytes(self):
        serializer = JsonSessionSerializer()
        record = SessionRecord(id="x", data={"k": [1, 2]}, last_activity=5)
        assert serializer.deserialize(serializer.serialize(record).encode()) == record

    @pytest.mark.parametrize("payload", ["{oops", "[1, 2]", b"\xff\xfe\x00", '{"id": "x"}'])
    def test_deserialize_rejects_malformed(self, payload):
        with pytest.raises(SessionPayloadException):
            JsonSessionSerializer().deserialize(payload)

    def test_serialize_rejects_non_json_values(self):
        record = SessionRecord(id="x", data={"when": date(2024, 1, 1)})
        with pytest.raises(SessionPayloadException, match="not JSON serializable"):
            JsonSessionSerializer().serialize(record)
