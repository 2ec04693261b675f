"""Severity levels carried by log events rendered through pattern layouts.

Purpose
-------
Give layouts a small enum they can render (``%p``/``%level``) and compare
without depending on the stdlib :mod:`logging` constants directly.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.

System Role
-----------
Referenced by :class:`lib_log_map.domain.events.LogEvent` and by the level
converter and the Rich console adapter, which colours lines per level.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels understood by the layout converters."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name.

        Examples
        --------
        >>> LogLevel.WARNING.severity
        'warning'
        """

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


__all__ = ["LogLevel"]
