"""Message payloads attached to log events.

Purpose
-------
Model the closed set of message shapes a layout can receive: plain text and
map-shaped key/value data.

Contents
--------
* :class:`SimpleMessage` – a single preformatted string.
* :class:`MapMessage` – an immutable ``str`` → ``str`` mapping.
* :data:`Message` – union of the supported variants.

System Role
-----------
Converters never test concrete message classes. They ask every message for
its :meth:`map_view`; only map-shaped messages answer with a mapping, so
converters that need key/value data decline everything else silently.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

from .map_rendering import render_map


@dataclass(slots=True, frozen=True)
class SimpleMessage:
    """Plain-text message.

    Examples
    --------
    >>> SimpleMessage("started").map_view() is None
    True
    """

    text: str

    def formatted(self) -> str:
        return self.text

    def map_view(self) -> Mapping[str, str] | None:
        return None


@dataclass(slots=True, frozen=True)
class MapMessage:
    """Map-shaped message carrying unique string keys and string values.

    The constructor copies ``data`` so later changes to the caller's dict do
    not leak into events already handed to the pipeline. Iteration order of
    the copy matches the order of ``data``.

    Examples
    --------
    >>> message = MapMessage({"user": "alice", "action": "login"})
    >>> message.formatted()
    '{user=alice, action=login}'
    >>> dict(message.map_view())
    {'user': 'alice', 'action': 'login'}
    """

    data: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def formatted(self) -> str:
        """Return the Hashtable-style rendering of all pairs."""

        return render_map(self.data)

    def map_view(self) -> Mapping[str, str]:
        """Return a read-only view over the key/value pairs."""

        return self.data

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.data.get(key, default)

    def with_entries(self, **pairs: str) -> "MapMessage":
        """Return a new message with ``pairs`` added or replaced."""

        merged = dict(self.data)
        merged.update(pairs)
        return MapMessage(merged)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapMessage):
            return NotImplemented
        return dict(self.data) == dict(other.data)

    def __hash__(self) -> int:
        return hash(frozenset(self.data.items()))


Message = Union[SimpleMessage, MapMessage]


__all__ = ["MapMessage", "Message", "SimpleMessage"]
