"""Port describing one interchangeable formatting unit of a pattern layout."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_map.domain.events import LogEvent
from lib_log_map.domain.formatting_info import FormattingInfo

from .sinks import BinarySink, TextSink


@runtime_checkable
class PatternConverterPort(Protocol):
    """Render one piece of a :class:`LogEvent` into a sink.

    Implementations must tolerate events they cannot handle by writing
    nothing; a layout mixes converters that each understand only some
    message shapes.
    """

    @property
    def name(self) -> str:
        """Diagnostic label, e.g. ``"MAP{user}"``."""

    @property
    def style(self) -> str:
        """Style class used by layouts for introspection."""

    @property
    def formatting_info(self) -> FormattingInfo:
        """Width modifiers applied by the layout after formatting."""

    def format(self, event: LogEvent, sink: TextSink) -> None:
        """Append the text rendering of ``event`` to ``sink``."""

    def format_bytes(self, event: LogEvent, sink: BinarySink, charset: str) -> None:
        """Append the rendering of ``event`` encoded under ``charset``."""


__all__ = ["PatternConverterPort"]
