"""Concrete converters and presentation adapters."""

from __future__ import annotations

from .pattern import (
    LevelPatternConverter,
    LiteralPatternConverter,
    LogEventPatternConverter,
    LoggerPatternConverter,
    MapPatternConverter,
    MessagePatternConverter,
    converter_keys,
    create_converter,
)
from .console.rich_console import RichConsoleAdapter

__all__ = [
    "LevelPatternConverter",
    "LiteralPatternConverter",
    "LogEventPatternConverter",
    "LoggerPatternConverter",
    "MapPatternConverter",
    "MessagePatternConverter",
    "RichConsoleAdapter",
    "converter_keys",
    "create_converter",
]
