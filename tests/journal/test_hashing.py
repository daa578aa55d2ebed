"""Tests for didi.journal.hashing."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

from didi.journal.hashing import fingerprint, format_timestamp, verify
from didi.journal.models import Entry

CREATED = datetime(2024, 5, 1, 12, 0, 0, 500, tzinfo=timezone.utc)


class TestFingerprint:
    def test_deterministic(self):
        a = fingerprint("Title", "Body", {"x", "y"}, CREATED)
        b = fingerprint("Title", "Body", {"x", "y"}, CREATED)
        assert a == b

    def test_hex_sha256(self):
        digest = fingerprint("Title", "Body", [], CREATED)
        assert len(digest) == 64
        int(digest, 16)

    def test_keyword_order_irrelevant(self):
        a = fingerprint("Title", "Body", ["rome", "travel", "food"], CREATED)
        b = fingerprint("Title", "Body", ["food", "travel", "rome"], CREATED)
        c = fingerprint("Title", "Body", ["Travel", "ROME", "food", "rome"], CREATED)
        assert a == b == c

    def test_each_field_matters(self):
        base = fingerprint("Title", "Body", ["k"], CREATED)
        assert fingerprint("Other", "Body", ["k"], CREATED) != base
        assert fingerprint("Title", "Other", ["k"], CREATED) != base
        assert fingerprint("Title", "Body", ["j"], CREATED) != base
        assert fingerprint("Title", "Body", ["k"], CREATED + timedelta(microseconds=1)) != base

    def test_field_boundaries_are_unambiguous(self):
        assert fingerprint("ab", "c", [], CREATED) != fingerprint("a", "bc", [], CREATED)
        assert fingerprint("a\x1fb", "c", [], CREATED) != fingerprint("a", "b\x1fc", [], CREATED)

    def test_keyword_boundaries_are_unambiguous(self):
        assert fingerprint("T", "", ["a;b"], CREATED) != fingerprint("T", "", ["a", "b"], CREATED)
        assert fingerprint("T", "", ["a,b"], CREATED) != fingerprint("T", "", ["a", "b"], CREATED)


class TestFormatTimestamp:
    def test_microseconds_always_present(self):
        stamp = format_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert stamp == "2024-01-01T00:00:00.000000+00:00"

    def test_round_trip(self):
        assert datetime.fromisoformat(format_timestamp(CREATED)) == CREATED


class TestVerify:
    def _entry(self):
        digest = fingerprint("Title", "Body", ["k"], CREATED)
        return Entry(id=1, title="Title", content="Body", keywords={"k"}, created_at=CREATED, hash=digest)

    def test_matching(self):
        assert verify(self._entry())

    def test_tampered_content(self):
        assert not verify(replace(self._entry(), content="Edited"))

    def test_hidden_flag_not_hashed(self):
        assert verify(self._entry().with_hidden(True))
