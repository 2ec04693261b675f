"""Ports shared by the application layer and the adapters implementing them."""

from __future__ import annotations

from .console import ConsolePort
from .converter import PatternConverterPort
from .sinks import BinarySink, TextSink

__all__ = ["BinarySink", "ConsolePort", "PatternConverterPort", "TextSink"]
