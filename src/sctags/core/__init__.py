"""Core module exports."""

from sctags.core.errors import (
    ConfigError,
    ErrorCode,
    GrammarUnavailableError,
    ParseFailure,
    SctagsError,
    SourceReadError,
)
from sctags.core.logging import configure_logging, get_logger, start_run
from sctags.core.progress import pluralize, progress, status

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "GrammarUnavailableError",
    "ParseFailure",
    "SctagsError",
    "SourceReadError",
    # Logging
    "configure_logging",
    "get_logger",
    "start_run",
    # Progress
    "pluralize",
    "progress",
    "status",
]
