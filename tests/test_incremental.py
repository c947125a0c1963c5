"""Tests for change application and incremental re-parsing."""

import logging

import pytest

from inkdown import Markdown, parse
from inkdown.incremental import ContentChange, Position, apply_changes, parse_incremental


def _change(start: int, end: int, text: str) -> ContentChange:
    return ContentChange(Position(0, start, start), Position(0, end, end), text)


class TestApplyChanges:
    """Offset-based edits against the old source."""

    def test_replace(self) -> None:
        assert apply_changes("# Title", [_change(2, 7, "Hi")]) == "# Hi"

    def test_insert(self) -> None:
        assert apply_changes("ab", [_change(1, 1, "X")]) == "aXb"

    def test_delete(self) -> None:
        assert apply_changes("abc", [_change(0, 1, "")]) == "bc"

    def test_several_changes_use_original_offsets(self) -> None:
        changes = [_change(0, 1, "A"), _change(4, 5, "E")]
        assert apply_changes("abcde", changes) == "AbcdE"

    def test_order_of_changes_does_not_matter(self) -> None:
        changes = [_change(4, 5, "E"), _change(0, 1, "AAA")]
        assert apply_changes("abcde", changes) == "AAAbcdE"

    def test_out_of_range_offsets_clamped(self) -> None:
        assert apply_changes("ab", [_change(5, 9, "!")]) == "ab!"

    def test_no_changes(self) -> None:
        assert apply_changes("same", []) == "same"


class TestParseIncremental:
    """Re-parsing always matches a full parse."""

    def test_matches_full_parse(self) -> None:
        old = "# Title\n- a\n- b"
        change = _change(2, 7, "Renamed")
        new = apply_changes(old, [change])
        assert parse_incremental(new, [change]) == parse(new)

    def test_without_changes(self) -> None:
        assert parse_incremental("**x**") == parse("**x**")

    def test_logs_full_reparse(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="inkdown")
        parse_incremental("a", [_change(0, 0, "a")])
        assert any("Reparsing full document" in r.getMessage() for r in caplog.records)

    def test_markdown_method(self) -> None:
        md = Markdown()
        source = "# a\n[b](c)"
        result = md.parse_incremental(source, [_change(0, 0, "# ")])
        assert result == md.parse_result(source)
