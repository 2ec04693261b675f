"""Domain entities and value objects used by the pattern layout converters."""

from __future__ import annotations

from .buffers import BinaryBuffer, TextBuffer
from .events import LogEvent
from .formatting_info import FormattingInfo
from .levels import LogLevel
from .map_rendering import render_map
from .messages import MapMessage, Message, SimpleMessage
from .rendering_cache import RenderingCache

__all__ = [
    "BinaryBuffer",
    "FormattingInfo",
    "LogEvent",
    "LogLevel",
    "MapMessage",
    "Message",
    "RenderingCache",
    "SimpleMessage",
    "TextBuffer",
    "render_map",
]
