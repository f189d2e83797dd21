from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from taskpulse.events.schemas import ConnectedEvent, Event
from taskpulse.realtime.framing import PING_FRAME, encode_event


def test_encode_event_is_compact_data_frame() -> None:
    frame = encode_event(Event(type="task.updated", data={"id": "42"}))
    assert frame == b'data: {"type":"task.updated","data":{"id":"42"}}\n\n'


def test_encode_event_accepts_mapping() -> None:
    frame = encode_event({"type": "project.deleted", "data": {"id": "p-1"}})
    assert frame == b'data: {"type":"project.deleted","data":{"id":"p-1"}}\n\n'


def test_encode_event_keeps_non_ascii_as_utf8() -> None:
    frame = encode_event(Event(type="comment.created", data={"text": "zażółć"}))
    assert "zażółć".encode("utf-8") in frame


def test_connected_event_carries_timestamp() -> None:
    frame = encode_event(ConnectedEvent()).decode("utf-8")
    assert frame.startswith('data: {"type":"connected","timestamp":"')
    assert frame.endswith('"}\n\n')

    stamp = frame.split('"timestamp":"')[1].split('"')[0]
    parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
    assert parsed.tzinfo is not None


def test_unserializable_payload_raises_at_caller() -> None:
    with pytest.raises(ValueError):
        encode_event(Event(type="task.updated", data={"bad": object()}))


def test_empty_event_type_is_encoded() -> None:
    assert encode_event({"type": "", "data": None}) == b'data: {"type":"","data":null}\n\n'


def test_extra_keys_follow_type_and_data() -> None:
    frame = encode_event({"type": "task.updated", "data": {"id": "42"}, "actor": "u1"})
    assert frame == b'data: {"type":"task.updated","data":{"id":"42"},"actor":"u1"}\n\n'


def test_missing_type_is_a_caller_error() -> None:
    with pytest.raises(ValidationError):
        encode_event({"data": {"id": "42"}})


def test_handshake_timestamp_has_millisecond_precision() -> None:
    stamp = datetime(2026, 10, 19, 8, 30, 44, 775094, tzinfo=timezone.utc)
    frame = encode_event(ConnectedEvent(timestamp=stamp))
    assert frame == b'data: {"type":"connected","timestamp":"2026-10-19T08:30:44.775Z"}\n\n'


def test_ping_frame_is_comment() -> None:
    assert PING_FRAME == b": ping\n\n"


def test_retry_hint_leads_the_frame() -> None:
    frame = encode_event(Event(type="a"), retry_ms=1500)
    assert frame == b'retry: 1500\ndata: {"type":"a","data":null}\n\n'
    with pytest.raises(ValueError):
        encode_event(Event(type="a"), retry_ms=-1)
