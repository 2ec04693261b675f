"""Use case rendering a log event through an ordered list of converters.

Purpose
-------
Turn a sequence of converters into a layout that can produce both the text
and the encoded form of an event, applying each converter's width modifiers
to the field it produced.

Contents
--------
* :class:`PatternFormatter` – one converter plus its padding step.
* :class:`PatternLayout` – the ordered formatters with ``to_text``/``to_bytes``.
* :func:`create_render_event` factory returning a :class:`PatternLayout`.

System Role
-----------
Application-layer orchestrator used by the CLI and the Rich console adapter.
Converters decide what to write; this module decides where it goes and how
wide it is. Converter errors are not caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from lib_log_map.application.ports.converter import PatternConverterPort
from lib_log_map.domain.buffers import BinaryBuffer, TextBuffer
from lib_log_map.domain.events import LogEvent

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "utf-8"


@dataclass(slots=True, frozen=True)
class PatternFormatter:
    """Apply one converter and then its :class:`FormattingInfo` to a buffer."""

    converter: PatternConverterPort

    def format(self, event: LogEvent, buffer: TextBuffer) -> None:
        start = len(buffer)
        self.converter.format(event, buffer)
        info = self.converter.formatting_info
        if not info.is_default:
            field = buffer.truncate(start)
            buffer.append(info.apply(field))

    def format_bytes(self, event: LogEvent, buffer: BinaryBuffer, charset: str) -> None:
        """Append the encoded field, padding in characters before encoding."""

        if self.converter.formatting_info.is_default:
            self.converter.format_bytes(event, buffer, charset)
            return
        scratch = TextBuffer()
        self.format(event, scratch)
        if len(scratch):
            buffer.append(scratch.getvalue().encode(charset))


class PatternLayout:
    """Ordered formatters rendering an event as text or bytes.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_map.adapters.pattern import LiteralPatternConverter, MapPatternConverter
    >>> from lib_log_map.domain.levels import LogLevel
    >>> from lib_log_map.domain.messages import MapMessage
    >>> layout = create_render_event([LiteralPatternConverter('user='), MapPatternConverter(['user'])])
    >>> event = LogEvent('id', datetime(2025, 9, 30, tzinfo=timezone.utc), 'svc', LogLevel.INFO, MapMessage({'user': 'alice'}))
    >>> layout.to_text(event)
    'user=alice'
    >>> layout.to_bytes(event)
    b'user=alice'
    """

    def __init__(self, formatters: Sequence[PatternFormatter], *, charset: str = DEFAULT_CHARSET) -> None:
        self._formatters = tuple(formatters)
        self._charset = charset

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def converters(self) -> tuple[PatternConverterPort, ...]:
        return tuple(formatter.converter for formatter in self._formatters)

    def to_text(self, event: LogEvent) -> str:
        """Return the text rendering of ``event``."""

        buffer = TextBuffer()
        for formatter in self._formatters:
            formatter.format(event, buffer)
        return buffer.getvalue()

    def to_bytes(self, event: LogEvent, charset: str | None = None) -> bytes:
        """Return ``event`` encoded under ``charset`` (defaults to the layout charset)."""

        target = charset or self._charset
        buffer = BinaryBuffer()
        for formatter in self._formatters:
            formatter.format_bytes(event, buffer, target)
        return buffer.getvalue()


def create_render_event(
    converters: Sequence[PatternConverterPort],
    *,
    charset: str = DEFAULT_CHARSET,
) -> PatternLayout:
    """Build a :class:`PatternLayout` from ``converters`` in rendering order."""

    layout = PatternLayout([PatternFormatter(converter) for converter in converters], charset=charset)
    logger.debug(
        "assembled pattern layout",
        extra={"converters": [converter.name for converter in converters], "charset": charset},
    )
    return layout


__all__ = ["DEFAULT_CHARSET", "PatternFormatter", "PatternLayout", "create_render_event"]
