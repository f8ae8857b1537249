"""Terminal feedback for the sctags CLI.

Everything here writes to stderr, so stdout stays clean for ``sctags show``
and ``--json``. A progress bar is only drawn for large batches on a TTY;
while it is live, console log records are held back.

Usage::

    for path in progress(paths, desc="Tagging"):
        ...
    status(f"Wrote {pluralize(n, 'tag')} to tags", style="success")
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

_BAR_MIN_ITEMS = 50

_console = Console(stderr=True, highlight=False)

_MARKERS = {
    "success": "[green]✓[/green]",
    "error": "[red]✗[/red]",
    "warning": "[yellow]![/yellow]",
}

_live = threading.local()


def is_console_suppressed() -> bool:
    return getattr(_live, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Hold back console log records while a live display owns the terminal."""
    previous = is_console_suppressed()
    _live.active = True
    try:
        yield
    finally:
        _live.active = previous


def status(message: str, *, style: str = "info") -> None:
    """Print one status line to stderr. Lines are never wrapped."""
    marker = _MARKERS.get(style)
    _console.print(f"{marker} {message}" if marker else message, soft_wrap=True)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """``1 file`` / ``3 files``."""
    word = singular if count == 1 else (plural or singular + "s")
    return f"{count} {word}"


def progress[T](iterable: Iterable[T], *, desc: str, unit: str = "files") -> Iterator[T]:
    """Yield from ``iterable``, with a transient bar for big batches on a TTY."""
    items = list(iterable)
    if len(items) <= _BAR_MIN_ITEMS or not sys.stderr.isatty():
        yield from items
        return

    columns = (
        TextColumn("{task.description}"),
        BarColumn(bar_width=30),
        MofNCompleteColumn(),
        TextColumn(unit),
    )
    with suppress_console_logs(), Progress(*columns, console=_console, transient=True) as bar:
        task_id = bar.add_task(desc, total=len(items))
        for item in items:
            yield item
            bar.advance(task_id)
