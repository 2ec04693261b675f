from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from io import StringIO

import pytest
from rich.console import Console

from lib_log_map.domain.events import LogEvent
from lib_log_map.domain.levels import LogLevel
from lib_log_map.domain.messages import MapMessage, Message, SimpleMessage

EventFactory = Callable[..., LogEvent]


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120)


@pytest.fixture
def make_event() -> EventFactory:
    def factory(
        message: Message | Mapping[str, str] | str,
        *,
        level: LogLevel = LogLevel.INFO,
        logger_name: str = "tests",
        event_id: str = "evt-1",
    ) -> LogEvent:
        if isinstance(message, Mapping):
            message = MapMessage(message)
        elif isinstance(message, str):
            message = SimpleMessage(message)
        return LogEvent(
            event_id=event_id,
            timestamp=datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
            logger_name=logger_name,
            level=level,
            message=message,
        )

    return factory
