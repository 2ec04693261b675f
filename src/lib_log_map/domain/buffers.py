"""In-memory sinks satisfying the ``TextSink`` and ``BinarySink`` ports.

Purpose
-------
Give layouts and tests a concrete place to collect converter output.

Contents
--------
* :class:`TextBuffer` – list-backed string builder.
* :class:`BinaryBuffer` – ``bytearray``-backed byte builder.

System Role
-----------
The ports in :mod:`lib_log_map.application.ports.sinks` are structural, so
these buffers satisfy them without inheriting from them. Used by
:class:`~lib_log_map.application.use_cases.render_event.PatternLayout` for
every render pass; appenders with their own writers can bypass them.
"""

from __future__ import annotations


class TextBuffer:
    """Collect text fragments.

    Examples
    --------
    >>> buffer = TextBuffer()
    >>> buffer.append("{a=1")
    >>> buffer.append("}")
    >>> buffer.getvalue()
    '{a=1}'
    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self._length += len(text)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def truncate(self, length: int) -> str:
        """Cut the buffer back to ``length`` characters and return the removed tail."""

        if length < 0 or length > self._length:
            raise ValueError(f"cannot truncate buffer of length {self._length} to {length}")
        value = self.getvalue()
        self._parts = [value[:length]] if length else []
        self._length = length
        return value[length:]

    def __len__(self) -> int:
        return self._length


class BinaryBuffer:
    """Collect encoded byte fragments.

    Examples
    --------
    >>> buffer = BinaryBuffer()
    >>> buffer.append(b"ab")
    >>> len(buffer), buffer.getvalue()
    (2, b'ab')
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = bytearray()

    def append(self, data: bytes) -> None:
        self._data += data

    def getvalue(self) -> bytes:
        return bytes(self._data)

    def truncate(self, length: int) -> bytes:
        """Cut the buffer back to ``length`` bytes and return the removed tail."""

        if length < 0 or length > len(self._data):
            raise ValueError(f"cannot truncate buffer of length {len(self._data)} to {length}")
        tail = bytes(self._data[length:])
        del self._data[length:]
        return tail

    def __len__(self) -> int:
        return len(self._data)


__all__ = ["BinaryBuffer", "TextBuffer"]
