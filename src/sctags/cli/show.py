"""sctags show command - print the tag lines of a single file."""

from pathlib import Path

import click

from sctags.cli.utils import load_cli_config, report_failure
from sctags.core.errors import GrammarUnavailableError
from sctags.tags._internal.serializer import render_tag_lines
from sctags.tags.ops import generate_tags_for_file


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--language", default=None, help="Value of the language: field")
@click.pass_context
def show_command(ctx: click.Context, path: Path, language: str | None) -> None:
    """Print the sorted tag lines for PATH to stdout."""
    config = load_cli_config(ctx, tags={"language": language})
    try:
        result = generate_tags_for_file(path, emit_qualified=config.tags.emit_qualified)
    except GrammarUnavailableError as e:
        raise click.ClickException(str(e)) from e

    if result.error is not None:
        report_failure(result.error)
        ctx.exit(1)

    for line in render_tag_lines(result.tag_lines, language=config.tags.language):
        click.echo(line)
