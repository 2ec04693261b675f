"""Field padding and truncation rules attached to each layout converter.

Purpose
-------
Capture the width modifiers of a pattern token (``%-10map``, ``%.5K``) as an
immutable value so converters can carry them without interpreting them.

Contents
--------
* :class:`FormattingInfo` – minimum/maximum width, alignment, truncation side.

System Role
-----------
Applied by :class:`lib_log_map.application.use_cases.render_event.PatternFormatter`
after a converter has produced its field; converters themselves only pass the
value through.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache


@dataclass(slots=True, frozen=True)
class FormattingInfo:
    """Width modifiers for a single converter field.

    Attributes
    ----------
    min_length:
        Fields shorter than this are padded with spaces (or zeros).
    max_length:
        Fields longer than this are truncated.
    left_align:
        Pad on the right instead of the left.
    left_truncate:
        Drop characters from the start when truncating (keeps the tail).
    zero_pad:
        Pad with ``"0"`` instead of spaces when right-aligning.

    Examples
    --------
    >>> FormattingInfo(min_length=5).apply("ab")
    '   ab'
    >>> FormattingInfo(min_length=5, left_align=True).apply("ab")
    'ab   '
    >>> FormattingInfo(max_length=3).apply("abcdef")
    'def'
    """

    min_length: int = 0
    max_length: int = sys.maxsize
    left_align: bool = False
    left_truncate: bool = True
    zero_pad: bool = False

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise ValueError("min_length must not be negative")
        if self.max_length < 0:
            raise ValueError("max_length must not be negative")

    @classmethod
    def default(cls) -> "FormattingInfo":
        """Return the shared no-op instance."""

        return _default_info()

    @property
    def is_default(self) -> bool:
        return self == _default_info()

    def apply(self, text: str) -> str:
        """Return ``text`` padded or truncated according to these modifiers."""

        length = len(text)
        if length > self.max_length:
            if self.left_truncate:
                return text[length - self.max_length :]
            return text[: self.max_length]
        if length < self.min_length:
            fill = self.min_length - length
            if self.left_align:
                return text + " " * fill
            return ("0" if self.zero_pad else " ") * fill + text
        return text


@lru_cache(maxsize=1)
def _default_info() -> FormattingInfo:
    return FormattingInfo()


__all__ = ["FormattingInfo"]
