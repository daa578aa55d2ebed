"""
didi exception hierarchy.

All didi exceptions inherit from DiaryError, making it easy for the CLI
to catch library-level errors while still distinguishing specific failure
modes. Each class carries an ErrorKind so batch results can report
per-item failures without re-raising them.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    IO = "io"


class DiaryError(Exception):
    """Base exception class for all didi errors."""

    kind: ErrorKind


class AlreadyExistsError(DiaryError):
    """Raised when initializing a store that already exists."""

    kind = ErrorKind.ALREADY_EXISTS


class NotFoundError(DiaryError):
    """Raised when an entry id does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entry_id: int):
        super().__init__(f"No entry with id {entry_id}")
        self.entry_id = entry_id


class ValidationError(DiaryError, ValueError):
    """Raised for empty titles and other malformed input."""

    kind = ErrorKind.VALIDATION


class StorageError(DiaryError, OSError):
    """Raised for filesystem and SQLite failures."""

    kind = ErrorKind.IO
