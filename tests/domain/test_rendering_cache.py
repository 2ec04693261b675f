from __future__ import annotations

import pytest

from lib_log_map.domain.rendering_cache import RenderingCache, render_snapshot, snapshot_source


def test_text_reuses_entry_for_equal_source() -> None:
    cache = RenderingCache()
    first = cache.text({"a": "1"})
    second = cache.text({"a": "1"})
    assert first == "{a=1}"
    assert second is first


def test_text_recomputes_for_different_source() -> None:
    cache = RenderingCache()
    assert cache.text({"a": "1"}) == "{a=1}"
    assert cache.text({"a": "2"}) == "{a=2}"
    assert cache.text({"a": "1"}) == "{a=1}"


def test_text_distinguishes_iteration_order() -> None:
    cache = RenderingCache()
    assert cache.text({"a": "1", "b": "2"}) == "{a=1, b=2}"
    assert cache.text({"b": "2", "a": "1"}) == "{b=2, a=1}"


def test_text_of_plain_string_is_the_string() -> None:
    cache = RenderingCache()
    assert cache.text("value") == "value"


def test_string_and_map_sources_never_collide() -> None:
    cache = RenderingCache()
    assert cache.text("{}") == "{}"
    assert cache.text({}) == "{}"
    assert snapshot_source("{}") != snapshot_source({})


def test_encoded_matches_cold_encoding() -> None:
    cache = RenderingCache()
    cache.text({"name": "Jürgen"})
    cache.text({"name": "Jürgen"})
    assert cache.encoded({"name": "Jürgen"}, "utf-8") == "{name=Jürgen}".encode("utf-8")


def test_encoded_is_keyed_by_charset() -> None:
    cache = RenderingCache()
    utf8 = cache.encoded({"name": "Jürgen"}, "utf-8")
    latin1 = cache.encoded({"name": "Jürgen"}, "latin-1")
    utf16 = cache.encoded({"name": "Jürgen"}, "utf-16")
    assert utf8 == "{name=Jürgen}".encode("utf-8")
    assert latin1 == "{name=Jürgen}".encode("latin-1")
    assert utf16 == "{name=Jürgen}".encode("utf-16")
    assert len({utf8, latin1, utf16}) == 3


def test_encoded_reuses_entry_for_charset_aliases() -> None:
    cache = RenderingCache()
    first = cache.encoded("value", "UTF-8")
    second = cache.encoded("value", "utf8")
    assert second is first


def test_encoded_propagates_unknown_charset() -> None:
    with pytest.raises(LookupError):
        RenderingCache().encoded({"a": "1"}, "no-such-charset")


def test_encoded_propagates_unencodable_text() -> None:
    with pytest.raises(UnicodeEncodeError):
        RenderingCache().encoded({"name": "Jürgen"}, "ascii")


def test_clear_drops_entries() -> None:
    cache = RenderingCache()
    first = cache.text({"a": "1"})
    cache.clear()
    second = cache.text({"a": "1"})
    assert second == first
    assert second is not first


def test_render_snapshot_inverts_snapshot_source() -> None:
    assert render_snapshot(snapshot_source({"a": "1"})) == "{a=1}"
    assert render_snapshot(snapshot_source("x")) == "x"
