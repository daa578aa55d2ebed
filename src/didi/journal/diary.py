"""Command-level diary operations.

Each function takes an explicit DiaryStore handle (only
``initialize_store`` builds one) and returns full Entry records; what
gets printed is the caller's business.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from .hashing import verify
from .models import BatchResult, Entry
from .search import search
from .store import DiaryStore


@dataclass
class Listing:
    """Entries returned by ``list_entries`` plus the caller's display flags."""

    entries: list[Entry]
    want_ids: bool = False
    want_hashes: bool = False

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def initialize_store(target: str | os.PathLike, force: bool = False) -> DiaryStore:
    """Create a diary at ``target`` and return a handle to it."""
    store = DiaryStore(target)
    store.initialize(force=force)
    return store


def add_entry(store: DiaryStore, title: str, content: str, keywords: Iterable[str]) -> Entry:
    entry = store.insert(title, content, keywords)
    logger.info("Added entry {} '{}'", entry.id, entry.title)
    return entry


def list_entries(
    store: DiaryStore,
    include_hidden: bool = False,
    want_ids: bool = False,
    want_hashes: bool = False,
) -> Listing:
    return Listing(list(store.list(include_hidden)), want_ids=want_ids, want_hashes=want_hashes)


def search_entries(store: DiaryStore, terms: Iterable[str], include_hidden: bool = False) -> list[Entry]:
    return search(store, terms, include_hidden=include_hidden)


def hide_entries(store: DiaryStore, ids: Iterable[int]) -> BatchResult:
    return store.set_hidden(ids, True)


def unhide_entries(store: DiaryStore, ids: Iterable[int]) -> BatchResult:
    return store.set_hidden(ids, False)


def verify_entries(store: DiaryStore) -> list[Entry]:
    """Return every entry (hidden ones included) whose stored hash no longer matches."""
    mismatched = [entry for entry in store.list(include_hidden=True) if not verify(entry)]
    if mismatched:
        logger.warning("{} entries failed hash verification", len(mismatched))
    return mismatched
