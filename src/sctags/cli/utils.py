"""CLI utilities."""

from pathlib import Path
from typing import Any

import click

from sctags.config import SctagsConfig, load_config
from sctags.core.errors import ConfigError, ParseFailure, SourceReadError
from sctags.core.logging import configure_logging


def load_cli_config(
    ctx: click.Context,
    *,
    config_path: Path | None = None,
    tags: dict[str, Any] | None = None,
) -> SctagsConfig:
    """Load config with CLI flag overrides and apply its logging section.

    ``-v`` on the group keeps DEBUG console logging on top of the config.

    Raises:
        click.ClickException: If the configuration is invalid.
    """
    overrides = {k: v for k, v in (tags or {}).items() if v is not None}
    try:
        if overrides:
            config = load_config(config_path=config_path, tags=overrides)
        else:
            config = load_config(config_path=config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config.logging, verbose=bool((ctx.obj or {}).get("verbose", False)))
    return config


def report_failure(error: ParseFailure | SourceReadError) -> None:
    """Print one ``path:line:column: reason`` diagnostic to stderr, unstyled."""
    click.echo(error.diagnostic, err=True)
