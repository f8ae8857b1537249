"""sctags generate command - write a tag file for files and directories."""

import json
from pathlib import Path

import click

from sctags.cli.utils import load_cli_config, report_failure
from sctags.core.errors import GrammarUnavailableError
from sctags.core.logging import start_run
from sctags.core.progress import pluralize, status
from sctags.tags._internal.discovery import discover_sources
from sctags.tags.ops import generate_tags_for_files, write_tags_file


@click.command()
@click.argument(
    "paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Tag file to write (default: tags)",
)
@click.option(
    "--relative/--absolute",
    "relative",
    default=None,
    help="Write file names relative to the tag file's directory",
)
@click.option(
    "--qualified/--no-qualified",
    "qualified",
    default=None,
    help="Also write Parent.member tags (default: on)",
)
@click.option("--language", default=None, help="Value of the language: field")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of .sctags.yaml",
)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON summary")
@click.pass_context
def generate_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    output: Path | None,
    relative: bool | None,
    qualified: bool | None,
    language: str | None,
    config_path: Path | None,
    as_json: bool,
) -> None:
    """Generate a tag file for PATHS.

    Directories are searched recursively for Scala sources. Files that fail
    to parse are reported and skipped; the tag file is still written for the
    rest, and the command exits with status 1.
    """
    config = load_cli_config(
        ctx,
        config_path=config_path,
        tags={
            "output": str(output) if output is not None else None,
            "relative_paths": relative,
            "emit_qualified": qualified,
            "language": language,
        },
    )
    start_run()

    discovery = discover_sources(paths, config.discovery)
    try:
        batch = generate_tags_for_files(
            discovery.files, emit_qualified=config.tags.emit_qualified
        )
    except GrammarUnavailableError as e:
        raise click.ClickException(str(e)) from e

    output_path = Path(config.tags.output)
    written = write_tags_file(
        batch.tag_lines,
        output_path,
        relative_paths=config.tags.relative_paths,
        language=config.tags.language,
    )

    failures = batch.failures
    if as_json:
        summary = {
            "output": str(output_path),
            "files": batch.files_processed,
            "tags": written,
            "skipped_large": [str(p) for p in discovery.skipped_large],
            "failures": [r.error.to_dict() for r in failures if r.error is not None],
        }
        click.echo(json.dumps(summary, indent=2))
    else:
        for result in failures:
            if result.error is not None:
                report_failure(result.error)
        status(
            f"Wrote {pluralize(written, 'tag')} from "
            f"{pluralize(batch.files_processed - len(failures), 'file')} to {output_path}",
            style="warning" if failures else "success",
        )

    if failures:
        ctx.exit(1)
