"""Rich progress display for the gotomarkdown CLI.

The CLI and the file pipeline report progress as ``(event, payload)`` pairs.
``ProgressReporter.emit`` maps those events onto rich progress tasks:

- ``files:start`` {count}: create the "files" bar
- ``file:converted`` {file}: advance it
- ``media:start`` {count}: create a "media" bar for one file's copy step
- ``media:copied`` {path}: advance it
- ``files:done``: close all remaining tasks
"""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class ProgressReporter:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=self.console,
            transient=True,
        )
        self._tasks: dict[str, TaskID] = {}
        self._totals: dict[str, int] = {}

    def __enter__(self) -> ProgressReporter:
        self.progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.progress.stop()

    def add_step(self, key: str, description: str, total: int | None) -> TaskID:
        task_id = self.progress.add_task(description, total=total)
        self._tasks[key] = task_id
        if total is not None:
            self._totals[key] = total
        return task_id

    def finish_task(self, key: str) -> None:
        task_id = self._tasks.pop(key, None)
        self._totals.pop(key, None)
        if task_id is not None:
            self.progress.remove_task(task_id)

    def _advance(self, key: str, description: str | None = None) -> None:
        task_id = self._tasks.get(key)
        if task_id is None:
            return
        self.progress.advance(task_id)
        if description:
            self.progress.update(task_id, description=description)

    def emit(self, event: str, payload: dict[str, int | str]) -> None:
        if event == "files:start":
            self.add_step("files", "Converting", int(payload.get("count", 0)))
        elif event == "file:converted":
            self._advance("files", f"Converted {payload.get('file', '')}")
        elif event == "media:start":
            self.finish_task("media")
            self.add_step("media", "Copying media", int(payload.get("count", 0)))
        elif event == "media:copied":
            self._advance("media")
        elif event == "files:done":
            for key in list(self._tasks):
                self.finish_task(key)


__all__ = ["ProgressReporter"]
