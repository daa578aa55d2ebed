"""didi verify — recompute entry hashes."""

from __future__ import annotations

import sys

import click


@click.command()
@click.pass_obj
def verify(config) -> None:
    """Check every entry against its stored hash"""
    from didi.core.cli.common import diary_errors, open_diary
    from didi.journal.diary import verify_entries

    with diary_errors():
        store = open_diary(config)
        mismatched = verify_entries(store)
    if not mismatched:
        click.echo("All entries match their hashes.")
        return
    for entry in mismatched:
        click.secho(f"[{entry.id}] {entry.title}: hash mismatch", fg="red")
    sys.exit(1)
