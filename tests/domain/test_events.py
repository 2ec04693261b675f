from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_map.domain.events import LogEvent
from lib_log_map.domain.levels import LogLevel
from lib_log_map.domain.messages import MapMessage, SimpleMessage


def test_log_event_requires_timezone_aware_timestamp() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        LogEvent(
            event_id="evt-1",
            timestamp=datetime(2025, 9, 23, 12, 0, 0),
            logger_name="tests",
            level=LogLevel.INFO,
            message=SimpleMessage("hello"),
        )


def test_log_event_coerces_timestamp_to_utc() -> None:
    local = timezone(timedelta(hours=2))
    event = LogEvent(
        event_id="evt-1",
        timestamp=datetime(2025, 9, 23, 13, 0, 0, tzinfo=local),
        logger_name="tests",
        level=LogLevel.INFO,
        message=SimpleMessage("hello"),
    )
    assert event.timestamp.tzinfo is timezone.utc
    assert event.timestamp.hour == 11


def test_log_event_rejects_empty_event_id() -> None:
    with pytest.raises(ValueError, match="event_id"):
        LogEvent(
            event_id="",
            timestamp=datetime.now(timezone.utc),
            logger_name="tests",
            level=LogLevel.INFO,
            message=SimpleMessage("hello"),
        )


def test_log_event_wraps_plain_strings() -> None:
    event = LogEvent(
        event_id="evt-1",
        timestamp=datetime.now(timezone.utc),
        logger_name="tests",
        level=LogLevel.INFO,
        message="hello",  # type: ignore[arg-type]
    )
    assert event.message == SimpleMessage("hello")


def test_log_event_rejects_unknown_message_types() -> None:
    with pytest.raises(TypeError, match="unsupported message type"):
        LogEvent(
            event_id="evt-1",
            timestamp=datetime.now(timezone.utc),
            logger_name="tests",
            level=LogLevel.INFO,
            message=42,  # type: ignore[arg-type]
        )


def test_log_event_to_dict_includes_map_data(make_event) -> None:
    data = make_event({"code": "E100", "user": "alice"}, level=LogLevel.ERROR).to_dict()
    assert data["message"] == "{code=E100, user=alice}"
    assert data["data"] == {"code": "E100", "user": "alice"}
    assert data["level"] == "error"


def test_log_event_to_dict_omits_data_for_simple_messages(make_event) -> None:
    assert "data" not in make_event("plain").to_dict()


def test_log_event_replace_returns_copy(make_event) -> None:
    event = make_event({"a": "1"})
    changed = event.replace(message=MapMessage({"a": "2"}))
    assert event.message.formatted() == "{a=1}"
    assert changed.message.formatted() == "{a=2}"
