"""Output sink ports used by pattern converters.

Purpose
-------
Describe the two append-only destinations a converter writes into: a text
sink and a byte sink. The byte sink receives already-encoded data; the
charset travels alongside the call, not inside the sink.

Contents
--------
* :class:`TextSink` – accepts ``str`` fragments.
* :class:`BinarySink` – accepts ``bytes`` fragments.

System Role
-----------
Keeps converters independent of concrete buffers so appenders may pass their
own writers as long as they expose ``append``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Append-only character destination."""

    def append(self, text: str) -> None:
        """Append ``text`` to the sink."""


@runtime_checkable
class BinarySink(Protocol):
    """Append-only byte destination."""

    def append(self, data: bytes) -> None:
        """Append ``data`` to the sink."""


__all__ = ["BinarySink", "TextSink"]
