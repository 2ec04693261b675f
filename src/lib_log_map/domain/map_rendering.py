"""Hashtable-style rendering of string mappings.

The full-map output of :class:`~lib_log_map.adapters.pattern.map_converter.MapPatternConverter`
and :meth:`~lib_log_map.domain.messages.MapMessage.formatted` share this
single convention: entries in iteration order as ``key=value``, joined by
``", "`` and wrapped in braces.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

MAP_OPEN = "{"
MAP_CLOSE = "}"
ENTRY_SEPARATOR = ", "
KEY_VALUE_SEPARATOR = "="


def render_map(data: Mapping[str, str]) -> str:
    """Return ``data`` rendered as ``{k1=v1, k2=v2}``.

    Examples
    --------
    >>> render_map({"a": "1", "b": "2"})
    '{a=1, b=2}'
    >>> render_map({})
    '{}'
    """

    return render_pairs(data.items())


def render_pairs(pairs: Iterable[tuple[str, str]]) -> str:
    """Render already-extracted ``(key, value)`` pairs in the same convention."""

    body = ENTRY_SEPARATOR.join(f"{key}{KEY_VALUE_SEPARATOR}{value}" for key, value in pairs)
    return f"{MAP_OPEN}{body}{MAP_CLOSE}"


__all__ = ["ENTRY_SEPARATOR", "KEY_VALUE_SEPARATOR", "MAP_CLOSE", "MAP_OPEN", "render_map", "render_pairs"]
