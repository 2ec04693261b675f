from __future__ import annotations

import pytest

from lib_log_map.domain.messages import MapMessage, SimpleMessage


def test_simple_message_has_no_map_view() -> None:
    message = SimpleMessage("service started")
    assert message.map_view() is None
    assert message.formatted() == "service started"


def test_map_message_exposes_pairs_in_insertion_order() -> None:
    message = MapMessage({"b": "2", "a": "1"})
    assert list(message.map_view().items()) == [("b", "2"), ("a", "1")]
    assert message.formatted() == "{b=2, a=1}"


def test_map_message_copies_caller_dict() -> None:
    source = {"user": "alice"}
    message = MapMessage(source)
    source["user"] = "mallory"
    source["extra"] = "x"
    assert dict(message.map_view()) == {"user": "alice"}


def test_map_message_view_is_read_only() -> None:
    message = MapMessage({"a": "1"})
    with pytest.raises(TypeError):
        message.map_view()["a"] = "2"  # type: ignore[index]


def test_map_message_with_entries_returns_new_message() -> None:
    original = MapMessage({"a": "1"})
    updated = original.with_entries(b="2", a="0")
    assert dict(original.map_view()) == {"a": "1"}
    assert updated.formatted() == "{a=0, b=2}"


def test_map_message_container_helpers() -> None:
    message = MapMessage({"a": "1", "b": "2"})
    assert len(message) == 2
    assert "a" in message
    assert "c" not in message
    assert list(message) == ["a", "b"]
    assert message.get("b") == "2"
    assert message.get("c") is None


def test_map_messages_with_equal_content_are_equal_and_hash_alike() -> None:
    first = MapMessage({"a": "1", "b": "2"})
    second = MapMessage({"b": "2", "a": "1"})
    assert first == second
    assert hash(first) == hash(second)
    assert first != MapMessage({"a": "1"})


def test_empty_map_message_renders_braces() -> None:
    assert MapMessage().formatted() == "{}"
