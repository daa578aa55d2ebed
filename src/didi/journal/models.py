"""Core data models for diary entries.

An Entry is append-and-annotate: created once by the store, afterwards
only its ``hidden`` flag ever changes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import NamedTuple

from didi.core.exceptions import DiaryError, ValidationError


def validate_title(title: str) -> str:
    """Return ``title`` unchanged, or raise ValidationError if it is blank."""
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title must be a non-empty string")
    return title


def normalize_keywords(keywords: Iterable[str]) -> frozenset[str]:
    """Lowercase and deduplicate keywords, dropping empty tokens."""
    if isinstance(keywords, str):
        raise ValidationError("Keywords must be a collection of strings, not a single string")
    normalized = set()
    for keyword in keywords:
        if not isinstance(keyword, str):
            raise ValidationError(f"Keyword must be a string, got {type(keyword).__name__}")
        token = keyword.strip().lower()
        if token:
            normalized.add(token)
    return frozenset(normalized)


class EntryDraft(NamedTuple):
    """Raw ``(title, content, keywords)`` as gathered by the input collector."""

    title: str
    content: str
    keywords: frozenset[str]


@dataclass(frozen=True)
class Entry:
    """A persisted diary entry.

    Attributes:
        id: Store-assigned id, never reused.
        title: Non-empty title.
        content: Body text, multi-line structure preserved verbatim.
        keywords: Lowercase keyword set.
        created_at: Timezone-aware insertion timestamp.
        hash: Hex fingerprint computed at insert time.
        hidden: Whether the entry is excluded from default listings.
    """

    id: int
    title: str
    content: str
    keywords: frozenset[str]
    created_at: datetime
    hash: str
    hidden: bool = False

    def __post_init__(self):
        validate_title(self.title)
        if not isinstance(self.content, str):
            raise ValidationError("Content must be a string")
        object.__setattr__(self, "keywords", normalize_keywords(self.keywords))

    @property
    def sorted_keywords(self) -> list[str]:
        return sorted(self.keywords)

    def with_hidden(self, hidden: bool) -> Entry:
        """Return a copy with only the ``hidden`` flag changed."""
        return replace(self, hidden=hidden)

    def __repr__(self) -> str:
        flag = ", hidden" if self.hidden else ""
        return f"Entry(id={self.id}, title='{self.title}'{flag})"


@dataclass
class BatchResult:
    """Outcome of a per-id batch operation such as hide/unhide.

    Attributes:
        succeeded: Ids the operation was applied to, in processing order.
        failed: Ids that could not be processed, mapped to their error.
    """

    succeeded: list[int] = field(default_factory=list)
    failed: dict[int, DiaryError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def changed(self) -> int:
        return len(self.succeeded)

    def failures_by_kind(self) -> dict[str, list[int]]:
        grouped: dict[str, list[int]] = {}
        for entry_id, error in self.failed.items():
            grouped.setdefault(error.kind.value, []).append(entry_id)
        return grouped
