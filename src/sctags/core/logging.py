"""Structured logging for one sctags run.

Records go through structlog into stdlib handlers, one handler per
configured output. Console outputs stay silent unless the run is verbose:
what the user needs to see (parse diagnostics, the summary line) is printed
by the CLI itself. File outputs receive every record at their level.

Every record of an invocation carries the same ``run_id``.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from sctags.config.models import LoggingConfig, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)

_CONSOLE_DESTINATIONS = ("stderr", "stdout")


def start_run(run_id: str | None = None) -> str:
    """Start a new run; later records carry its id."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := _run_id.get():
        event_dict["run_id"] = rid
    return event_dict


class ConsoleGate(logging.Filter):
    """Console records pass only on verbose runs, and never under a live display."""

    def __init__(self, verbose: bool) -> None:
        super().__init__()
        self.verbose = verbose

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        from sctags.core.progress import is_console_suppressed

        return self.verbose and not is_console_suppressed()


def _open_handler(output: LogOutputConfig, *, verbose: bool) -> logging.Handler:
    handler: logging.Handler
    if output.destination in _CONSOLE_DESTINATIONS:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        handler = logging.StreamHandler(stream)
        handler.addFilter(ConsoleGate(verbose))
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    return handler


def _renderer(output: LogOutputConfig) -> structlog.types.Processor:
    if output.format == "json":
        return structlog.processors.JSONRenderer()
    colors = output.destination == "stderr" and sys.stderr.isatty()
    return structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)


def configure_logging(config: LoggingConfig | None = None, *, verbose: bool = False) -> None:
    """(Re)configure structlog and the root logger for this run.

    ``verbose`` forces DEBUG and lets console outputs through.
    """
    from sctags.config.models import LoggingConfig

    config = config or LoggingConfig()
    if verbose:
        config = config.model_copy(update={"level": "DEBUG"})
    levels = logging.getLevelNamesMapping()
    root_level = levels[config.level]

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_run_id,  # type: ignore[list-item]
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.setLevel(root_level)

    for output in config.outputs:
        handler = _open_handler(output, verbose=verbose)
        handler.setLevel(levels[output.level or config.level])
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=_renderer(output),
                foreign_pre_chain=pre_chain,
            )
        )
        root.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger  # type: ignore[no-any-return]
