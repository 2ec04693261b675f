"""Pattern converters rendering pieces of a log event."""

from __future__ import annotations

from .base import LogEventPatternConverter
from .map_converter import MapPatternConverter
from .registry import converter_keys, create_converter
from .simple import LevelPatternConverter, LiteralPatternConverter, LoggerPatternConverter, MessagePatternConverter

__all__ = [
    "LevelPatternConverter",
    "LiteralPatternConverter",
    "LogEventPatternConverter",
    "LoggerPatternConverter",
    "MapPatternConverter",
    "MessagePatternConverter",
    "converter_keys",
    "create_converter",
]
