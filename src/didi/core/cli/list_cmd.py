"""didi list / didi search — print entries."""

from __future__ import annotations

import click

from didi.core.cli.common import display_options


@click.command("list")
@display_options
@click.pass_obj
def list_(config, **flags) -> None:
    """Lists all entries"""
    from didi.core.cli.common import build_display, diary_errors, open_diary
    from didi.core.cli.render import print_entries
    from didi.journal.diary import list_entries

    with diary_errors():
        display = build_display(config, **flags)
        store = open_diary(config)
        listing = list_entries(
            store,
            include_hidden=display.include_hidden,
            want_ids=display.show_ids,
            want_hashes=display.show_hashes,
        )
        print_entries(listing, display)


@click.command()
@click.argument("terms", nargs=-1, required=True)
@display_options
@click.pass_obj
def search(config, terms: tuple[str, ...], **flags) -> None:
    """Searches for entries by title and keywords"""
    from didi.core.cli.common import build_display, diary_errors, open_diary
    from didi.core.cli.render import print_entries
    from didi.journal.diary import search_entries

    with diary_errors():
        display = build_display(config, **flags)
        store = open_diary(config)
        found = search_entries(store, terms, include_hidden=display.include_hidden)
        print_entries(found, display)
