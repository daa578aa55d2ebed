"""didi CLI — entry point for create, add, list, search, hide, unhide and verify."""

import click

from didi import __version__
from didi.core.config import DEFAULT_CONFIG_FILE


@click.group()
@click.version_option(version=__version__, package_name="didi")
@click.option(
    "--config",
    "config_file",
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    help="YAML or JSON config file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log what the diary is doing.")
@click.pass_context
def main(ctx: click.Context, config_file: str, verbose: bool) -> None:
    """Digital Diary — a small CLI diary used to document your life."""
    from didi.core.cli.common import load_config
    from didi.core.utils.logging import setup_logging

    config = load_config(config_file)
    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING"))
    setup_logging(level=level, log_file=config.get("paths.log_file") or None)
    ctx.obj = config


# Register subcommands
from .add_cmd import add
from .create_cmd import create
from .hide_cmd import hide, unhide
from .list_cmd import list_, search
from .verify_cmd import verify

main.add_command(create)
main.add_command(add)
main.add_command(list_)
main.add_command(search)
main.add_command(hide)
main.add_command(unhide)
main.add_command(verify)
