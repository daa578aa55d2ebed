"""Shared setup logic for CLI commands."""

from __future__ import annotations

import sys
from collections.abc import Generator
from contextlib import contextmanager

import click

from didi.core.config import Config, resolve_database_path
from didi.core.exceptions import DiaryError
from didi.journal.config import DisplayConfig
from didi.journal.store import DiaryStore


def load_config(config_file: str | None = None) -> Config:
    """Load config from the given file (if present), defaults and DIDI_* env vars."""
    return Config(config_file=config_file)


def open_store(config: Config) -> DiaryStore:
    """Build a store handle for the configured diary path."""
    return DiaryStore(resolve_database_path(config))


def open_diary(config: Config) -> DiaryStore:
    """Open an initialized diary and greet the user.

    Raises StorageError when there is no diary yet, so call it inside
    ``diary_errors``.
    """
    from didi.core.cli.render import print_welcome

    store = open_store(config)
    store.check()
    print_welcome(store.path)
    return store


@contextmanager
def diary_errors() -> Generator[None, None, None]:
    """Report DiaryError as ``Error (<kind>): <message>`` and exit 1."""
    try:
        yield
    except DiaryError as e:
        click.secho(f"Error ({e.kind.value}): {e}", fg="red", err=True)
        sys.exit(1)


def display_options(f):
    """Attach the display flags shared by ``list`` and ``search``."""
    options = [
        click.option("-n", "--nocontent", is_flag=True, help="Don't show content"),
        click.option("-i", "--id", "show_ids", is_flag=True, help="Show id of entry"),
        click.option("-h", "--hash", "show_hashes", is_flag=True, help="Show hash of entry"),
        click.option("-k", "--keywords", "show_keywords", is_flag=True, help="Show keywords of entry"),
        click.option("-d", "--nodate", is_flag=True, help="Don't show date"),
        click.option("-a", "--hidden", "include_hidden", is_flag=True, help="Show hidden entries"),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def build_display(
    config: Config,
    *,
    nocontent: bool,
    show_ids: bool,
    show_hashes: bool,
    show_keywords: bool,
    nodate: bool,
    include_hidden: bool,
) -> DisplayConfig:
    """Combine config defaults with command-line flags (flags win)."""
    return DisplayConfig(
        show_date=config.get_bool("display.show_date", True) and not nodate,
        show_ids=show_ids or config.get_bool("display.show_ids"),
        show_hashes=show_hashes or config.get_bool("display.show_hashes"),
        show_keywords=show_keywords or config.get_bool("display.show_keywords"),
        show_content=config.get_bool("display.show_content", True) and not nocontent,
        include_hidden=include_hidden,
    )
