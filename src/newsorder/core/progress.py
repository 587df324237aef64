"""Terminal feedback for ``newsorder check``.

Status lines and the progress bar are drawn by rich on stderr, so stdout
stays free for diagnostics and JSON. While the bar is live, log records
bound for the console are held back; file outputs still receive them.

Usage::

    for path in progress(files, desc="Checking"):
        check(path)

    status("3 files checked, no violations", style="success")
"""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

# Below this many files a run is quick enough to go without a bar
_PROGRESS_THRESHOLD = 100

_console = Console(stderr=True)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
}

_live = threading.local()

T = TypeVar("T")


def is_console_suppressed() -> bool:
    return getattr(_live, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Hold back console log records while a live display owns the terminal."""
    _live.active = True
    try:
        yield
    finally:
        _live.active = False


class ConsoleSuppressingFilter(logging.Filter):
    """Drops console records while a progress bar is drawn."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        return not is_console_suppressed()


def _is_tty() -> bool:
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def status(message: str, *, style: str = "info") -> None:
    """Print one styled summary line to stderr."""
    _console.print(f"{_STYLES.get(style, '')}{message}", highlight=False)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """``pluralize(1, "file")`` -> ``"1 file"``, ``pluralize(3, "file")`` -> ``"3 files"``."""
    word = singular if count == 1 else (plural or singular + "s")
    return f"{count} {word}"


def progress(iterable: Iterable[T], *, desc: str = "Checking") -> Iterator[T]:
    """Yield from ``iterable``, with a bar on a TTY once it holds enough items."""
    try:
        total: int | None = len(iterable)  # type: ignore[arg-type]
    except TypeError:
        total = None

    if not _is_tty() or total is None or total <= _PROGRESS_THRESHOLD:
        yield from iterable
        return

    with (
        suppress_console_logs(),
        Progress(
            TextColumn("    {task.description}:"),
            BarColumn(bar_width=25, style="cyan", complete_style="cyan"),
            TaskProgressColumn(),
            TextColumn("{task.completed}/{task.total} files"),
            console=_console,
            transient=True,
        ) as bar,
    ):
        task_id = bar.add_task(desc, total=total)
        for item in iterable:
            yield item
            bar.advance(task_id)
