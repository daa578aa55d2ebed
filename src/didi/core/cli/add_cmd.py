"""didi add — write a new entry from terminal input."""

from __future__ import annotations

import click


@click.command()
@click.pass_obj
def add(config) -> None:
    """Adds an entry"""
    from didi.core.cli.common import diary_errors, open_diary
    from didi.journal.collector import collect_entry
    from didi.journal.diary import add_entry

    stdin = click.get_text_stream("stdin")

    def read_line() -> str | None:
        return stdin.readline() or None

    def prompt(label: str) -> None:
        hint = " (finish with two empty lines)" if label == "Content" else ""
        click.echo(click.style(f"{label}{hint}: ", fg="cyan"), nl=label == "Content")

    with diary_errors():
        store = open_diary(config)
        draft = collect_entry(read_line, prompt=prompt)
        entry = add_entry(store, draft.title, draft.content, draft.keywords)
    click.echo(f"Added {click.style(entry.title, fg='cyan')}!")
