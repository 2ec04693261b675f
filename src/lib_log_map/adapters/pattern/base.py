"""Shared behaviour for converters that render parts of a :class:`LogEvent`.

Purpose
-------
Hold the state every converter carries (name, style, width modifiers) and
the single-entry rendering cache, so concrete converters only decide *what*
to render.

Contents
--------
* :class:`LogEventPatternConverter` – base class implementing
  :class:`~lib_log_map.application.ports.converter.PatternConverterPort`.

System Role
-----------
Base of every converter in :mod:`lib_log_map.adapters.pattern`. The default
:meth:`LogEventPatternConverter.format_bytes` renders text and encodes it;
converters with a cheaper byte path override it and use
:meth:`_cached_formatted_bytes`.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence

from lib_log_map.domain.buffers import TextBuffer
from lib_log_map.application.ports.converter import PatternConverterPort
from lib_log_map.application.ports.sinks import BinarySink, TextSink
from lib_log_map.domain.events import LogEvent
from lib_log_map.domain.formatting_info import FormattingInfo
from lib_log_map.domain.rendering_cache import RenderingCache, Source

Options = Sequence[str]


class LogEventPatternConverter(PatternConverterPort):
    """Abstract base class for layout converters; subclasses implement :meth:`format`."""

    #: Pattern keys the registry maps to this converter; empty for unkeyed converters.
    CONVERTER_KEYS: tuple[str, ...] = ()

    def __init__(self, name: str, style: str, formatting_info: FormattingInfo | None = None) -> None:
        self._name = name
        self._style = style
        self._formatting_info = formatting_info if formatting_info is not None else FormattingInfo.default()
        self._cache = RenderingCache()

    @property
    def name(self) -> str:
        return self._name

    @property
    def style(self) -> str:
        return self._style

    @property
    def formatting_info(self) -> FormattingInfo:
        return self._formatting_info

    @abstractmethod
    def format(self, event: LogEvent, sink: TextSink) -> None:
        """Append the text rendering of ``event`` to ``sink``."""

    def format_bytes(self, event: LogEvent, sink: BinarySink, charset: str) -> None:
        """Render ``event`` as text and append it encoded under ``charset``."""

        buffer = TextBuffer()
        self.format(event, buffer)
        if len(buffer):
            sink.append(buffer.getvalue().encode(charset))

    def _cached_formatted_string(self, source: Source) -> str:
        """Return the rendering of ``source``; mappings render as ``{k=v, ...}``."""

        return self._cache.text(source)

    def _cached_formatted_bytes(self, source: Source, charset: str) -> bytes:
        """Return the rendering of ``source`` encoded under ``charset``."""

        return self._cache.encoded(source, charset)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, style={self._style!r})"


__all__ = ["LogEventPatternConverter", "Options"]
