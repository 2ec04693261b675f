"""Map pattern converter and the layout pieces it plugs into.

Renders map-shaped log messages either as ``{k1=v1, k2=v2}`` or as the value
of a single key, to text or to charset-encoded bytes, with a per-converter
single-entry cache shared safely between threads.
"""

from __future__ import annotations

from .adapters.pattern import (
    LevelPatternConverter,
    LiteralPatternConverter,
    LogEventPatternConverter,
    LoggerPatternConverter,
    MapPatternConverter,
    MessagePatternConverter,
    converter_keys,
    create_converter,
)
from .application.use_cases.render_event import PatternLayout, create_render_event
from .domain import BinaryBuffer, FormattingInfo, LogEvent, LogLevel, MapMessage, SimpleMessage, TextBuffer, render_map


def summary_info() -> str:
    """Return the metadata banner printed by the CLI ``info`` command.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "BinaryBuffer",
    "FormattingInfo",
    "LevelPatternConverter",
    "LiteralPatternConverter",
    "LogEvent",
    "LogEventPatternConverter",
    "LogLevel",
    "LoggerPatternConverter",
    "MapMessage",
    "MapPatternConverter",
    "MessagePatternConverter",
    "PatternLayout",
    "SimpleMessage",
    "TextBuffer",
    "converter_keys",
    "create_converter",
    "create_render_event",
    "render_map",
    "summary_info",
]
