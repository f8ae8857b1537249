"""sctags CLI - generate vim tag files for Scala sources."""

import click

from sctags import __version__
from sctags.cli.generate import generate_command
from sctags.cli.show import show_command
from sctags.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="sctags")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """sctags - tag file generator for Scala."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(verbose=verbose)


cli.add_command(generate_command, name="generate")
cli.add_command(show_command, name="show")


if __name__ == "__main__":
    cli()
