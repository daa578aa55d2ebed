"""Entry predicates and search.

Visibility is its own predicate so that ``DiaryStore.list`` and
``search`` apply exactly the same hidden-entry rule. Search is plain
existence matching: a term hits when it is a case-insensitive substring
of the title or equals one of the entry's keywords. Results keep the
store's created_at order; there is no ranking.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from didi.core.exceptions import ValidationError

from .models import Entry

if TYPE_CHECKING:
    from .store import DiaryStore

Predicate = Callable[[Entry], bool]


def visible(include_hidden: bool) -> Predicate:
    """Predicate admitting hidden entries only when ``include_hidden`` is set."""
    if include_hidden:
        return lambda entry: True
    return lambda entry: not entry.hidden


def normalize_terms(terms: Iterable[str]) -> list[str]:
    """Lowercase search terms and drop blank ones.

    Raises:
        ValidationError: If no usable term remains.
    """
    if isinstance(terms, str):
        terms = [terms]
    normalized = [t.strip().lower() for t in terms if t and t.strip()]
    if not normalized:
        raise ValidationError("At least one non-empty search term is required")
    return normalized


def matches_term(entry: Entry, term: str) -> bool:
    """Match a single, already lowercased term against one entry."""
    return term in entry.title.lower() or term in entry.keywords


def matches_any(terms: Iterable[str]) -> Predicate:
    """Predicate that is true when any of ``terms`` matches (OR semantics)."""
    normalized = normalize_terms(terms)
    return lambda entry: any(matches_term(entry, term) for term in normalized)


def all_of(*predicates: Predicate) -> Predicate:
    return lambda entry: all(p(entry) for p in predicates)


def search(store: DiaryStore, terms: Iterable[str], include_hidden: bool = False) -> list[Entry]:
    """Return entries matching any term, in created_at order.

    Args:
        store: The diary to search.
        terms: Search terms, OR-combined.
        include_hidden: Whether hidden entries may appear in the results.

    Returns:
        Matching entries, oldest first.
    """
    predicate = all_of(visible(include_hidden), matches_any(terms))
    return list(store.select(predicate))
