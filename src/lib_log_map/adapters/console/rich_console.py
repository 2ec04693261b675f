"""Rich-powered console adapter printing events through a pattern layout.

Purpose
-------
Show what a layout produces on an interactive terminal, coloured by level.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :data:`DEFAULT_CONSOLE_PATTERN` - converters used when no layout is given.
* :class:`RichConsoleAdapter` - implementation of :class:`ConsolePort`.

System Role
-----------
Human-facing sink used by the CLI ``render`` command. Line content comes
entirely from the :class:`PatternLayout`; Rich only adds colour.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console
from rich.text import Text

from lib_log_map.adapters.pattern import (
    LevelPatternConverter,
    LiteralPatternConverter,
    LoggerPatternConverter,
    MapPatternConverter,
)
from lib_log_map.application.ports.console import ConsolePort
from lib_log_map.application.ports.converter import PatternConverterPort
from lib_log_map.application.use_cases.render_event import PatternLayout, create_render_event
from lib_log_map.domain.events import LogEvent
from lib_log_map.domain.formatting_info import FormattingInfo
from lib_log_map.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


def default_console_layout(map_converter: PatternConverterPort | None = None) -> PatternLayout:
    """Return the ``%-8p %c %map`` layout used when none is configured.

    ``map_converter`` replaces the trailing full-map converter, e.g. with one
    rendering a single key.
    """

    return create_render_event(
        [
            LevelPatternConverter(formatting_info=FormattingInfo(min_length=8, left_align=True)),
            LiteralPatternConverter(" "),
            LoggerPatternConverter(),
            LiteralPatternConverter(" "),
            map_converter if map_converter is not None else MapPatternConverter(),
        ]
    )


class RichConsoleAdapter(ConsolePort):
    """Render log events with a pattern layout and Rich colouring."""

    def __init__(
        self,
        *,
        layout: PatternLayout | None = None,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the adapter with a layout and colour/style overrides."""
        self._layout = layout if layout is not None else default_console_layout()
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    @property
    def layout(self) -> PatternLayout:
        return self._layout

    def emit(self, event: LogEvent, *, colorize: bool) -> None:
        """Print ``event`` using Rich with optional colour.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> from lib_log_map.domain.messages import MapMessage
        >>> event = LogEvent('id', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), 'svc', LogLevel.INFO, MapMessage({'a': '1'}))
        >>> console = Console(file=StringIO(), record=True)
        >>> RichConsoleAdapter(console=console).emit(event, colorize=False)
        >>> '{a=1}' in console.export_text()
        True
        """
        style = self._style_map.get(event.level, "") if colorize and not self._no_color else ""
        line = Text(self._layout.to_text(event), style=style)
        self._console.print(line, highlight=False, markup=False)


__all__ = ["RichConsoleAdapter", "default_console_layout"]
