"""didi hide / didi unhide — toggle entry visibility."""

from __future__ import annotations

import sys

import click

_IDS = click.argument("ids", nargs=-1, required=True, type=click.IntRange(min=0))


def _apply(config, ids: tuple[int, ...], hidden: bool) -> None:
    from didi.core.cli.common import diary_errors, open_diary
    from didi.core.cli.render import print_batch_result
    from didi.journal.diary import hide_entries, unhide_entries

    with diary_errors():
        store = open_diary(config)
        result = hide_entries(store, ids) if hidden else unhide_entries(store, ids)
    print_batch_result(result)
    if not result.ok:
        sys.exit(1)


@click.command()
@_IDS
@click.pass_obj
def hide(config, ids: tuple[int, ...]) -> None:
    """Hide one or more entries"""
    _apply(config, ids, hidden=True)


@click.command()
@_IDS
@click.pass_obj
def unhide(config, ids: tuple[int, ...]) -> None:
    """Unhide one or more entries"""
    _apply(config, ids, hidden=False)
