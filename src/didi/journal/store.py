"""DiaryStore — the SQLite-backed entries table.

The store is an explicit handle over a database path. It never keeps a
connection open between operations: every call acquires its own
connection through ``_connect`` and releases it on every exit path.
Each mutation (an insert, or one id's hide/unhide flip) runs in its own
``BEGIN IMMEDIATE`` transaction, so SQLite's file locking is the only
coordination between concurrent invocations.
"""

from __future__ import annotations

import json
import os
import sqlite3
from collections.abc import Callable, Generator, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from didi.core.exceptions import AlreadyExistsError, NotFoundError, StorageError, ValidationError

from .hashing import fingerprint, format_timestamp
from .models import BatchResult, Entry, normalize_keywords, validate_title
from .search import Predicate, visible


@dataclass(frozen=True)
class _Cols:
    table: str = "entries"
    id: str = "id"
    hash: str = "hash"
    created_at: str = "created_at"
    keywords: str = "keywords"
    title: str = "title"
    content: str = "content"
    hidden: str = "hidden"


_COLS = _Cols()

_SCHEMA = f"""
CREATE TABLE {_COLS.table} (
    {_COLS.id} INTEGER PRIMARY KEY AUTOINCREMENT,
    {_COLS.hash} TEXT NOT NULL,
    {_COLS.created_at} TEXT NOT NULL,
    {_COLS.keywords} TEXT NOT NULL,
    {_COLS.title} TEXT NOT NULL,
    {_COLS.content} TEXT NOT NULL,
    {_COLS.hidden} INTEGER NOT NULL DEFAULT 0
)
"""

_SELECT = (
    f"SELECT {_COLS.id}, {_COLS.hash}, {_COLS.created_at}, {_COLS.keywords}, "
    f"{_COLS.title}, {_COLS.content}, {_COLS.hidden} FROM {_COLS.table}"
)

# Stay well below SQLite's host-parameter limit for IN (...) lookups.
_LOOKUP_CHUNK = 500


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EntryView:
    """Lazy, restartable sequence of entries in created_at order.

    Nothing is read until iteration starts, and every new iteration runs
    a fresh query, so the view always reflects the current table.
    """

    def __init__(self, store: DiaryStore, predicate: Predicate):
        self._store = store
        self._predicate = predicate

    def __iter__(self) -> Iterator[Entry]:
        entries = self._store._iter_entries()
        try:
            for entry in entries:
                if self._predicate(entry):
                    yield entry
        finally:
            # releases the connection when the caller stops early
            entries.close()

    def __repr__(self) -> str:
        return f"EntryView(store={self._store.path!s})"


class DiaryStore:
    """Entries table of a single diary database file."""

    def __init__(
        self,
        target: str | os.PathLike,
        *,
        timeout: float = 5.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Args:
            target: Path of the SQLite database file.
            timeout: Seconds to wait for another process's write lock.
            clock: Source of insertion timestamps. Defaults to UTC now.
        """
        self.path = Path(os.fspath(target))
        self._timeout = timeout
        self._clock = clock or _utc_now

    def __repr__(self) -> str:
        return f"DiaryStore(path='{self.path}')"

    # -- Connections ----------------------------------------------------------

    def _open(self, create: bool) -> sqlite3.Connection:
        if not create and not self.path.exists():
            raise StorageError(f"No diary database at '{self.path}'. Run `didi create` first.")
        try:
            if create:
                conn = sqlite3.connect(self.path, timeout=self._timeout)
            else:
                # mode=rw never creates a missing file behind our back
                uri = f"{self.path.resolve().as_uri()}?mode=rw"
                conn = sqlite3.connect(uri, uri=True, timeout=self._timeout)
        except sqlite3.Error as e:
            raise StorageError(f"Couldn't open diary database at '{self.path}': {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _connect(self, create: bool = False) -> Generator[sqlite3.Connection, None, None]:
        conn = self._open(create)
        logger.debug("Opened connection to {}", self.path)
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(f"Diary database error at '{self.path}': {e}") from e
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()

    @staticmethod
    def _has_table(conn: sqlite3.Connection) -> bool:
        row = conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?", (_COLS.table,)
        ).fetchone()
        return row is not None

    # -- Lifecycle ------------------------------------------------------------

    def exists(self) -> bool:
        """Whether an initialized diary lives at the target path."""
        if not self.path.exists():
            return False
        with self._connect() as conn:
            return self._has_table(conn)

    def initialize(self, force: bool = False) -> None:
        """Create the entries table.

        Args:
            force: Drop and recreate an existing table instead of failing.

        Raises:
            AlreadyExistsError: If the diary exists and ``force`` is False.
            StorageError: On permission, path or engine problems.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Couldn't create directory for '{self.path}': {e}") from e

        with self._connect(create=True) as conn:
            conn.execute("BEGIN IMMEDIATE")
            if self._has_table(conn):
                if not force:
                    raise AlreadyExistsError(f"A diary already exists at '{self.path}'")
                logger.warning("Re-initializing diary at {}; existing entries are dropped", self.path)
                conn.execute(f"DROP TABLE {_COLS.table}")
            conn.execute(_SCHEMA)
        logger.info("Initialized diary at {}", self.path)

    def check(self) -> None:
        """Raise StorageError unless the diary is initialized and readable."""
        with self._connect() as conn:
            if not self._has_table(conn):
                raise StorageError(f"'{self.path}' is not an initialized diary. Run `didi create` first.")

    # -- Writes ---------------------------------------------------------------

    def insert(self, title: str, content: str, keywords: Iterable[str]) -> Entry:
        """Append a new entry and return it with its generated fields.

        Raises:
            ValidationError: If the title is empty or the input is malformed.
            StorageError: If the write fails.
        """
        validate_title(title)
        if not isinstance(content, str):
            raise ValidationError("Content must be a string")
        normalized = normalize_keywords(keywords)

        with self._connect() as conn:
            conn.execute("BEGIN IMMEDIATE")
            # Read the clock under the write lock so created_at follows id order
            created_at = self._clock().astimezone(timezone.utc)
            digest = fingerprint(title, content, normalized, created_at)
            cur = conn.execute(
                f"""
                INSERT INTO {_COLS.table} ({_COLS.hash}, {_COLS.created_at}, {_COLS.keywords},
                    {_COLS.title}, {_COLS.content}, {_COLS.hidden})
                VALUES (?, ?, ?, ?, ?, 0)
                """,
                (
                    digest,
                    format_timestamp(created_at),
                    json.dumps(sorted(normalized)),
                    title,
                    content,
                ),
            )
            entry_id = cur.lastrowid

        logger.debug("Inserted entry {} ({!r})", entry_id, title)
        return Entry(
            id=entry_id,
            title=title,
            content=content,
            keywords=normalized,
            created_at=created_at,
            hash=digest,
            hidden=False,
        )

    def set_hidden(self, ids: Iterable[int], hidden: bool) -> BatchResult:
        """Set the hidden flag of each id in its own transaction.

        Missing ids are recorded as NotFoundError and a failing write as
        StorageError; either way the remaining ids are still processed.

        Raises:
            ValidationError: If any id is not an integer.
            StorageError: If the diary cannot be opened at all.
        """
        unique_ids = _unique_ids(ids)
        self.check()

        result = BatchResult()
        for entry_id in unique_ids:
            try:
                with self._connect() as conn:
                    conn.execute("BEGIN IMMEDIATE")
                    cur = conn.execute(
                        f"UPDATE {_COLS.table} SET {_COLS.hidden} = ? WHERE {_COLS.id} = ?",
                        (1 if hidden else 0, entry_id),
                    )
                    if cur.rowcount == 0:
                        raise NotFoundError(entry_id)
            except (NotFoundError, StorageError) as e:
                logger.debug("Couldn't set hidden={} on entry {}: {}", hidden, entry_id, e)
                result.failed[entry_id] = e
            else:
                result.succeeded.append(entry_id)

        logger.debug("set_hidden({}) changed {} entries", hidden, result.changed)
        return result

    # -- Reads ----------------------------------------------------------------

    def _iter_entries(self) -> Iterator[Entry]:
        with self._connect() as conn:
            for row in conn.execute(f"{_SELECT} ORDER BY {_COLS.created_at} ASC, {_COLS.id} ASC"):
                yield _row_to_entry(row)

    def list(self, include_hidden: bool = False) -> EntryView:
        """All entries oldest first; hidden ones only when ``include_hidden``."""
        return EntryView(self, visible(include_hidden))

    def select(self, predicate: Predicate) -> EntryView:
        """Entries satisfying ``predicate``, oldest first."""
        return EntryView(self, predicate)

    def find_by_ids(self, ids: Iterable[int]) -> list[Entry]:
        """Look entries up by id. Unknown ids are absent from the result."""
        unique_ids = _unique_ids(ids)
        entries: list[Entry] = []
        if not unique_ids:
            return entries
        with self._connect() as conn:
            for start in range(0, len(unique_ids), _LOOKUP_CHUNK):
                chunk = unique_ids[start : start + _LOOKUP_CHUNK]
                placeholders = ", ".join("?" for _ in chunk)
                rows = conn.execute(
                    f"{_SELECT} WHERE {_COLS.id} IN ({placeholders}) ORDER BY {_COLS.id}", chunk
                ).fetchall()
                entries.extend(_row_to_entry(r) for r in rows)
        return entries

    def get(self, entry_id: int) -> Entry:
        """Return one entry or raise NotFoundError."""
        found = self.find_by_ids([entry_id])
        if not found:
            raise NotFoundError(entry_id)
        return found[0]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _unique_ids(ids: Iterable[int]) -> list[int]:
    if isinstance(ids, int):
        ids = [ids]
    unique: set[int] = set()
    for entry_id in ids:
        if isinstance(entry_id, bool) or not isinstance(entry_id, int):
            raise ValidationError(f"Entry id must be an integer, got {entry_id!r}")
        unique.add(entry_id)
    return sorted(unique)


def _row_to_entry(row: sqlite3.Row) -> Entry:
    return Entry(
        id=int(row[_COLS.id]),
        title=str(row[_COLS.title]),
        content=str(row[_COLS.content]),
        keywords=frozenset(json.loads(row[_COLS.keywords])),
        created_at=datetime.fromisoformat(row[_COLS.created_at]),
        hash=str(row[_COLS.hash]),
        hidden=bool(row[_COLS.hidden]),
    )
