"""Terminal rendering of entries and batch results."""

from __future__ import annotations

import getpass
import shutil
from collections.abc import Iterable
from email.utils import format_datetime

import click

from didi.core.exceptions import ErrorKind
from didi.journal.config import DisplayConfig
from didi.journal.models import BatchResult, Entry

_TITLE_WIDTH = 40


def _cyan(text: str, **styles) -> str:
    return click.style(text, fg="cyan", **styles)


def _rule() -> str:
    return "-" * shutil.get_terminal_size((80, 24)).columns


def _plural(count: int) -> str:
    return "entry" if count == 1 else "entries"


def format_entry(entry: Entry, display: DisplayConfig) -> str:
    """Header line, optional keywords line and optional content for one entry."""
    header = _cyan(entry.title, underline=True) + " " * max(1, _TITLE_WIDTH - len(entry.title))
    if display.show_date:
        header += _cyan(format_datetime(entry.created_at.astimezone())) + " "
    if display.show_ids:
        header += _cyan(f"[{entry.id}]") + " "
    if display.show_hashes:
        header += _cyan(f"[{entry.hash}]")
    lines = [header.rstrip()]

    if display.show_keywords:
        lines.append("Keywords: " + ", ".join(_cyan(k) for k in entry.sorted_keywords))
    if display.show_content:
        lines.append(entry.content)
    return "\n".join(lines)


def print_entries(entries: Iterable[Entry], display: DisplayConfig) -> int:
    """Print entries between separator rules. Returns how many were printed."""
    count = 0
    for entry in entries:
        click.echo(_rule() + "\n")
        click.echo(format_entry(entry, display) + "\n")
        count += 1
    if count:
        click.echo(_rule())
    click.echo(f"Found {_cyan(str(count))} {_plural(count)}.")
    return count


def print_batch_result(result: BatchResult) -> None:
    click.echo(f"Changed {_cyan(str(result.changed))} {_plural(result.changed)}.")
    for kind, ids in result.failures_by_kind().items():
        click.secho(f"  {kind}: {', '.join(str(i) for i in ids)}", fg="yellow", err=True)
        if kind == ErrorKind.NOT_FOUND:
            continue
        for entry_id in ids:
            click.secho(f"    [{entry_id}] {result.failed[entry_id]}", fg="yellow", err=True)


def print_welcome(path) -> None:
    """Greet the current user with the location of the opened diary."""
    try:
        user = getpass.getuser()
    except (KeyError, OSError):
        # no login name in env vars or the password database
        user = ""
    who = f" {_cyan(user)}" if user else ""
    click.echo(f"Welcome{who} at '{_cyan(str(path))}'!\n")
