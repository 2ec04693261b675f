from __future__ import annotations

import pytest

from lib_log_map.application.ports.sinks import BinarySink, TextSink
from lib_log_map.domain.buffers import BinaryBuffer, TextBuffer


def test_buffers_satisfy_sink_ports() -> None:
    assert isinstance(TextBuffer(), TextSink)
    assert isinstance(BinaryBuffer(), BinarySink)


def test_text_buffer_collects_fragments() -> None:
    buffer = TextBuffer()
    buffer.append("{a=1")
    buffer.append("")
    buffer.append("}")
    assert buffer.getvalue() == "{a=1}"
    assert len(buffer) == 5


def test_text_buffer_truncate_returns_tail() -> None:
    buffer = TextBuffer()
    buffer.append("INFO ")
    buffer.append("{a=1}")
    assert buffer.truncate(5) == "{a=1}"
    assert buffer.getvalue() == "INFO "
    assert buffer.truncate(0) == "INFO "
    assert buffer.getvalue() == ""


def test_text_buffer_truncate_rejects_out_of_range() -> None:
    buffer = TextBuffer()
    buffer.append("abc")
    with pytest.raises(ValueError):
        buffer.truncate(4)


def test_binary_buffer_collects_and_truncates() -> None:
    buffer = BinaryBuffer()
    buffer.append(b"abc")
    buffer.append(b"def")
    assert buffer.getvalue() == b"abcdef"
    assert buffer.truncate(2) == b"cdef"
    assert buffer.getvalue() == b"ab"
    with pytest.raises(ValueError):
        buffer.truncate(-1)
