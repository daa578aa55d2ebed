"""didi create — initialize the diary database."""

from __future__ import annotations

import click


@click.command()
@click.option("--force", is_flag=True, help="Drop and recreate an existing diary.")
@click.pass_obj
def create(config, force: bool) -> None:
    """Creates the database"""
    from didi.core.cli.common import diary_errors, open_store

    store = open_store(config)
    with diary_errors():
        if force and store.exists():
            click.confirm(f"This deletes every entry in '{store.path}'. Continue?", abort=True)
        store.initialize(force=force)
    click.echo(f"Created database at '{click.style(str(store.path), fg='cyan')}'!")
