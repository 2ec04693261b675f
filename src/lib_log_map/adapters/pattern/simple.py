"""Companion converters for the non-map parts of a layout.

A layout rarely consists of the map token alone; these converters render the
literal text between tokens, the level, the logger name and the message.
"""

from __future__ import annotations

from lib_log_map.application.ports.sinks import BinarySink, TextSink
from lib_log_map.domain.events import LogEvent
from lib_log_map.domain.formatting_info import FormattingInfo

from .base import LogEventPatternConverter, Options


class LiteralPatternConverter(LogEventPatternConverter):
    """Emit fixed text regardless of the event."""

    def __init__(self, literal: str) -> None:
        super().__init__("Literal", "literal")
        self._literal = literal

    @property
    def literal(self) -> str:
        return self._literal

    def format(self, event: LogEvent, sink: TextSink) -> None:
        sink.append(self._literal)

    def format_bytes(self, event: LogEvent, sink: BinarySink, charset: str) -> None:
        if self._literal:
            sink.append(self._cached_formatted_bytes(self._literal, charset))


class LevelPatternConverter(LogEventPatternConverter):
    """Emit the level name (``%p``); ``%p{lower}`` selects the lowercase form."""

    CONVERTER_KEYS = ("p", "level")

    def __init__(self, options: Options | None = None, formatting_info: FormattingInfo | None = None) -> None:
        super().__init__("Level", "level", formatting_info)
        self._lowercase = bool(options) and options[0].strip().lower() == "lower"

    @classmethod
    def new_instance(cls, options: Options | None = None, formatting_info: FormattingInfo | None = None) -> "LevelPatternConverter":
        return cls(options, formatting_info)

    def format(self, event: LogEvent, sink: TextSink) -> None:
        sink.append(event.level.severity if self._lowercase else event.level.name)


class LoggerPatternConverter(LogEventPatternConverter):
    """Emit the logger name (``%c``)."""

    CONVERTER_KEYS = ("c", "logger")

    def __init__(self, options: Options | None = None, formatting_info: FormattingInfo | None = None) -> None:
        super().__init__("Logger", "logger", formatting_info)

    @classmethod
    def new_instance(cls, options: Options | None = None, formatting_info: FormattingInfo | None = None) -> "LoggerPatternConverter":
        return cls(options, formatting_info)

    def format(self, event: LogEvent, sink: TextSink) -> None:
        sink.append(event.logger_name)


class MessagePatternConverter(LogEventPatternConverter):
    """Emit the formatted message (``%m``); map messages render as ``{k=v, ...}``."""

    CONVERTER_KEYS = ("m", "msg", "message")

    def __init__(self, options: Options | None = None, formatting_info: FormattingInfo | None = None) -> None:
        super().__init__("Message", "message", formatting_info)

    @classmethod
    def new_instance(cls, options: Options | None = None, formatting_info: FormattingInfo | None = None) -> "MessagePatternConverter":
        return cls(options, formatting_info)

    def format(self, event: LogEvent, sink: TextSink) -> None:
        data = event.message.map_view()
        if data is not None:
            sink.append(self._cached_formatted_string(data))
        else:
            sink.append(event.message.formatted())


__all__ = [
    "LevelPatternConverter",
    "LiteralPatternConverter",
    "LoggerPatternConverter",
    "MessagePatternConverter",
]
