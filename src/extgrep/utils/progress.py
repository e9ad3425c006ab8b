"""
Optional progress reporting for the matching phase.

The search engine takes any object implementing ProgressReporter. NullProgress
is the default and does nothing; RichProgress draws a bar on stderr with rich.
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn


class ProgressReporter(Protocol):
    def start(self, total: int, description: str = "Searching") -> None: ...

    def advance(self, step: int = 1) -> None: ...

    def stop(self) -> None: ...


class NullProgress:
    """Progress reporter that ignores all updates."""

    def start(self, total: int, description: str = "Searching") -> None:
        pass

    def advance(self, step: int = 1) -> None:
        pass

    def stop(self) -> None:
        pass


class RichProgress:
    """Progress bar rendered with rich, written to stderr by default."""

    def __init__(self, console: Console | None = None, transient: bool = True) -> None:
        self.console = console or Console(stderr=True)
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=self.console,
            transient=transient,
        )
        self._task: TaskID | None = None

    def start(self, total: int, description: str = "Searching") -> None:
        self._task = self._progress.add_task(description, total=total)
        self._progress.start()

    def advance(self, step: int = 1) -> None:
        if self._task is not None:
            self._progress.advance(self._task, step)

    def stop(self) -> None:
        self._progress.stop()
        self._task = None
