"""Entry point for ``python -m sctags``."""

from sctags.cli.main import cli

if __name__ == "__main__":
    cli()
