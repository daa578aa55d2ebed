"""Entry fingerprints.

A fingerprint is a SHA-256 digest over an entry's title, content,
keywords and creation time. It is shown to the user as an integrity aid
and is never used as a lookup key. No security property is implied.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from .models import normalize_keywords

if TYPE_CHECKING:
    from .models import Entry


def format_timestamp(value: datetime) -> str:
    """Canonical text form of a timestamp, shared by storage and hashing."""
    return value.isoformat(timespec="microseconds")


def fingerprint(title: str, content: str, keywords: Iterable[str], created_at: datetime) -> str:
    """Compute the hex digest for an entry's fields.

    Keywords are normalized and sorted first, so collection order never
    changes the result. The fields are encoded as one JSON array, which
    keeps every field and keyword boundary explicit.
    """
    sorted_keywords = sorted(normalize_keywords(keywords))
    fields = [sorted_keywords, title, content, format_timestamp(created_at)]
    payload = json.dumps(fields, ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def verify(entry: Entry) -> bool:
    """Whether the stored hash still matches the entry's fields."""
    return fingerprint(entry.title, entry.content, entry.keywords, entry.created_at) == entry.hash
