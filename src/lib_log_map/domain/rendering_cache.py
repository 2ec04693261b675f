"""Single-entry memo for converter output shared across threads.

Purpose
-------
A layout pass frequently renders the same event twice: once as text for a
console or file, once as bytes for a network or binary sink. The cache lets
the second call reuse the first call's work without growing with the number
of distinct events.

Contents
--------
* :class:`RenderingCache` – one text slot and one byte slot per converter.
* :func:`snapshot_source` – order-sensitive, immutable key for a source.

System Role
-----------
Owned by every :class:`~lib_log_map.adapters.pattern.base.LogEventPatternConverter`.
Converters are shared by all threads logging through a layout, so each slot
holds a frozen record that is replaced with one attribute assignment. Readers
copy the slot into a local before comparing, which means a reader can only
ever see a complete record. A concurrent writer may evict a record another
thread was about to reuse; that thread then recomputes instead of returning
a rendering that belongs to a different source.
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from .map_rendering import render_pairs

Source = Union[str, Mapping[str, str]]
SourceKey = Union[str, tuple[tuple[str, str], ...]]


def snapshot_source(source: Source) -> SourceKey:
    """Return an immutable key that compares equal only for equal renderings.

    Mappings become a tuple of their items so two dicts with the same
    contents in a different order are treated as different sources.

    Examples
    --------
    >>> snapshot_source({"a": "1", "b": "2"})
    (('a', '1'), ('b', '2'))
    >>> snapshot_source("plain")
    'plain'
    """

    if isinstance(source, str):
        return source
    return tuple(source.items())


def render_snapshot(key: SourceKey) -> str:
    """Render a snapshot produced by :func:`snapshot_source`."""

    if isinstance(key, str):
        return key
    return render_pairs(key)


@dataclass(slots=True, frozen=True)
class _TextEntry:
    source: SourceKey
    text: str


@dataclass(slots=True, frozen=True)
class _BytesEntry:
    source: SourceKey
    charset: str
    data: bytes


class RenderingCache:
    """Most-recent-only cache of text and encoded renderings.

    Examples
    --------
    >>> cache = RenderingCache()
    >>> cache.text({"a": "1"})
    '{a=1}'
    >>> cache.encoded({"a": "1"}, "utf-8")
    b'{a=1}'
    """

    __slots__ = ("_text", "_bytes")

    def __init__(self) -> None:
        self._text: _TextEntry | None = None
        self._bytes: _BytesEntry | None = None

    def text(self, source: Source) -> str:
        """Return the rendering of ``source``, reusing the last one when equal."""

        return self._text_for(snapshot_source(source))

    def encoded(self, source: Source, charset: str) -> bytes:
        """Return the rendering of ``source`` encoded under ``charset``.

        Unknown charsets raise :class:`LookupError` and unencodable text raises
        :class:`UnicodeEncodeError`; neither is caught here.
        """

        key = snapshot_source(source)
        codec = codecs.lookup(charset).name
        entry = self._bytes
        if entry is not None and entry.charset == codec and entry.source == key:
            return entry.data
        data = self._text_for(key).encode(codec)
        self._bytes = _BytesEntry(key, codec, data)
        return data

    def clear(self) -> None:
        self._text = None
        self._bytes = None

    def _text_for(self, key: SourceKey) -> str:
        entry = self._text
        if entry is not None and entry.source == key:
            return entry.text
        text = render_snapshot(key)
        self._text = _TextEntry(key, text)
        return text


__all__ = ["RenderingCache", "Source", "SourceKey", "render_snapshot", "snapshot_source"]
