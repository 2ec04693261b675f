"""Converter rendering the key/value data of map-shaped messages.

Purpose
-------
Back the ``%K``, ``%map`` and ``%MAP`` pattern tokens. Without options the
converter writes every pair as ``{k1=v1, k2=v2}``; with an option such as
``%K{user}`` it writes only the value stored under ``user``.

Contents
--------
* :class:`MapPatternConverter` – text and byte rendering with caching.

System Role
-----------
One of the interchangeable converters of a pattern layout. Events whose
message has no map view, and maps lacking the requested key, produce no
output instead of an error so the rest of the layout keeps rendering.
Encoding failures from the codec layer propagate unchanged.
"""

from __future__ import annotations

from lib_log_map.application.ports.sinks import BinarySink, TextSink
from lib_log_map.domain.events import LogEvent
from lib_log_map.domain.formatting_info import FormattingInfo
from lib_log_map.domain.rendering_cache import Source

from .base import LogEventPatternConverter, Options


class MapPatternConverter(LogEventPatternConverter):
    """Render a :class:`~lib_log_map.domain.messages.MapMessage` or one of its values.

    Parameters
    ----------
    options:
        Parsed token options. Only the first entry is used, as the key to
        render; ``None`` or an empty sequence selects the full map.
    formatting_info:
        Width modifiers passed through to the layout.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_map.domain.buffers import TextBuffer
    >>> from lib_log_map.domain.levels import LogLevel
    >>> from lib_log_map.domain.messages import MapMessage
    >>> event = LogEvent('id', datetime(2025, 9, 30, tzinfo=timezone.utc), 'svc', LogLevel.INFO, MapMessage({'a': '1', 'b': '2'}))
    >>> buffer = TextBuffer()
    >>> MapPatternConverter.new_instance([]).format(event, buffer)
    >>> buffer.getvalue()
    '{a=1, b=2}'
    >>> MapPatternConverter.new_instance(['b']).name
    'MAP{b}'
    """

    CONVERTER_KEYS = ("K", "map", "MAP")

    def __init__(self, options: Options | None = None, formatting_info: FormattingInfo | None = None) -> None:
        key = options[0] if options else None
        super().__init__("MAP" if key is None else "MAP{" + key + "}", "map", formatting_info)
        self._key = key

    @classmethod
    def new_instance(cls, options: Options | None = None, formatting_info: FormattingInfo | None = None) -> "MapPatternConverter":
        """Create a converter from parsed token options."""

        return cls(options, formatting_info)

    @property
    def key(self) -> str | None:
        """Key whose value is rendered, or ``None`` for the full map."""

        return self._key

    def format(self, event: LogEvent, sink: TextSink) -> None:
        source = self._select(event)
        if source is not None:
            sink.append(self._cached_formatted_string(source))

    def format_bytes(self, event: LogEvent, sink: BinarySink, charset: str) -> None:
        source = self._select(event)
        if source is not None:
            sink.append(self._cached_formatted_bytes(source, charset))

    def _select(self, event: LogEvent) -> Source | None:
        """Return the full map, the requested value, or ``None`` when nothing applies."""

        data = event.message.map_view()
        if data is None:
            return None
        if self._key is None:
            return data
        return data.get(self._key)


__all__ = ["MapPatternConverter"]
