"""Tests for didi.journal.collector."""

import pytest

from didi.core.exceptions import ValidationError
from didi.journal.collector import collect_content, collect_entry, parse_keywords


def _reader(lines):
    it = iter(lines)
    return lambda: next(it, None)


class TestCollectContent:
    def test_blank_line_preserved_and_double_blank_terminates(self):
        assert collect_content(["line1", "", "line2", "", ""]) == "line1\n\nline2"

    def test_stops_at_terminator(self):
        lines = iter(["a", "", "", "after"])
        assert collect_content(lines) == "a"
        assert next(lines) == "after"

    def test_confirmed_empty(self):
        assert collect_content(["", ""]) == ""

    def test_strips_line_endings(self):
        assert collect_content(["one\r\n", "two\n", "\n", "\r\n"]) == "one\ntwo"

    def test_keeps_inner_whitespace(self):
        assert collect_content(["  indented", "\ttabbed", "", ""]) == "  indented\n\ttabbed"

    def test_end_of_input_terminates(self):
        assert collect_content(["only", ""]) == "only"


class TestParseKeywords:
    def test_split_and_lowercase(self):
        assert parse_keywords("Travel  ROME\tfood") == frozenset({"travel", "rome", "food"})

    def test_duplicates_removed(self):
        assert parse_keywords("rome Rome ROME") == frozenset({"rome"})

    def test_empty_line(self):
        assert parse_keywords("") == frozenset()
        assert parse_keywords(None) == frozenset()
        assert parse_keywords("   ") == frozenset()


class TestCollectEntry:
    def test_full_entry(self):
        draft = collect_entry(_reader(["Trip to Rome\n", "Day one\n", "\n", "Day two\n", "\n", "\n", "Travel rome\n"]))
        assert draft.title == "Trip to Rome"
        assert draft.content == "Day one\n\nDay two"
        assert draft.keywords == frozenset({"travel", "rome"})

    def test_prompts_in_order(self):
        asked = []
        collect_entry(_reader(["T", "", "", "k"]), prompt=asked.append)
        assert asked == ["Title", "Content", "Keywords"]

    def test_missing_keywords_line(self):
        draft = collect_entry(_reader(["T", "body", "", ""]))
        assert draft.keywords == frozenset()

    def test_blank_title_raises(self):
        with pytest.raises(ValidationError):
            collect_entry(_reader(["  ", "body", "", ""]))

    def test_no_input_raises(self):
        with pytest.raises(ValidationError):
            collect_entry(_reader([]))
