"""Diary entry persistence and retrieval.

Provides the Entry model, fingerprinting, the SQLite-backed DiaryStore,
line-based input collection, and search over stored entries.
"""

from .collector import collect_content, collect_entry, parse_keywords
from .config import DisplayConfig
from .diary import (
    Listing,
    add_entry,
    hide_entries,
    initialize_store,
    list_entries,
    search_entries,
    unhide_entries,
    verify_entries,
)
from .hashing import fingerprint, verify
from .models import BatchResult, Entry, EntryDraft
from .search import search
from .store import DiaryStore, EntryView

__all__ = [
    "BatchResult",
    "DiaryStore",
    "DisplayConfig",
    "Entry",
    "EntryDraft",
    "EntryView",
    "Listing",
    "add_entry",
    "collect_content",
    "collect_entry",
    "fingerprint",
    "hide_entries",
    "initialize_store",
    "list_entries",
    "parse_keywords",
    "search",
    "search_entries",
    "unhide_entries",
    "verify",
    "verify_entries",
]
