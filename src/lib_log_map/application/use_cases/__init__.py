"""Use cases orchestrating converters."""

from __future__ import annotations

from .render_event import PatternFormatter, PatternLayout, create_render_event

__all__ = ["PatternFormatter", "PatternLayout", "create_render_event"]
