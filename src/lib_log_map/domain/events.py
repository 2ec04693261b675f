"""Domain event handed to pattern layouts for rendering.

Purpose
-------
Provide an immutable representation of a single log statement so converters
can read the message and metadata without risk of mutating shared state.

Contents
--------
* :class:`LogEvent` dataclass.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Input to every converter in :mod:`lib_log_map.adapters.pattern` and to the
layout use case in :mod:`lib_log_map.application.use_cases.render_event`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel
from .messages import MapMessage, Message, SimpleMessage


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event rendered by pattern layouts.

    Attributes
    ----------
    event_id:
        Stable identifier used for diagnostics.
    timestamp:
        Time of the event in timezone-aware UTC.
    logger_name:
        Logical logger emitting the event.
    level:
        :class:`LogLevel` severity associated with the event.
    message:
        :class:`SimpleMessage` or :class:`MapMessage` payload. Plain strings
        are wrapped in a :class:`SimpleMessage`.
    """

    event_id: str
    timestamp: datetime
    logger_name: str
    level: LogLevel
    message: Message

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        if not self.event_id:
            raise ValueError("event_id must not be empty")
        if isinstance(self.message, str):
            object.__setattr__(self, "message", SimpleMessage(self.message))
        elif not isinstance(self.message, (SimpleMessage, MapMessage)):
            raise TypeError(f"unsupported message type: {type(self.message).__name__}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event to a dictionary with ISO8601 timestamps."""

        data: dict[str, Any] = {
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "logger_name": self.logger_name,
            "level": self.level.severity,
            "message": self.message.formatted(),
        }
        view = self.message.map_view()
        if view is not None:
            data["data"] = dict(view)
        return data

    def replace(self, **changes: Any) -> "LogEvent":
        """Return a copied event with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["LogEvent"]
