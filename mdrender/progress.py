"""console reporting for batch rendering: spinner, file bar and summary."""

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    TaskID,
    TextColumn,
)

DESCRIPTION_COLUMN = "[progress.description]{task.description}"


@dataclass
class RenderTally:
    """per-file outcomes of one batch run."""

    rendered: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.rendered) + len(self.failed)

    def summary(self) -> str:
        return (
            f"Processed {self.total} file(s): "
            f"{len(self.rendered)} rendered, {len(self.failed)} failed"
        )


class ProgressHandler:
    """
    reports batch progress on stderr.

    A spinner covers file discovery, then a bar advances once per file,
    whether the file rendered or failed. Outcomes are tallied here so the
    summary and the exit code come from the same counts.
    """

    def __init__(self, quiet: bool = False, show_progress: bool = False) -> None:
        self.quiet = quiet
        self.show_progress = show_progress
        self.tally = RenderTally()
        self._console = Console(stderr=True)
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None

    def __enter__(self) -> "ProgressHandler":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self._stop()

    @property
    def exit_code(self) -> int:
        """1 if any file failed, else 0."""
        return 1 if self.tally.failed else 0

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task_id = None

    def _start(
        self,
        description: str,
        total: Optional[int],
        *extra_columns: ProgressColumn,
    ) -> None:
        """replaces any running display with a new transient one."""
        self._stop()
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn(DESCRIPTION_COLUMN),
            *extra_columns,
            console=self._console,
            transient=True,
        )
        self._progress.start()
        self._task_id = self._progress.add_task(description, total=total, name="")

    def start_discovery(self) -> None:
        """shows a spinner while source files are collected."""
        if self.show_progress:
            self._start("Discovering markdown files...", None)

    def set_total(self, total: int) -> None:
        """switches to a bar counting rendered files."""
        if self.show_progress:
            self._start(
                "Rendering",
                total,
                BarColumn(),
                MofNCompleteColumn(),
                TextColumn("- {task.fields[name]}"),
            )

    def _advance(self, name: str) -> None:
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, advance=1, name=name)

    def record_success(self, name: str) -> None:
        """counts a rendered file and advances the bar."""
        self.tally.rendered.append(name)
        self._advance(name)

    def record_failure(self, name: str, error: Exception) -> None:
        """counts a failed file, reports it and advances the bar."""
        self.tally.failed.append(name)
        self.log_error(f"Failed to render {name}: {error}")
        self._advance(name)

    def log_error(self, message: str) -> None:
        """prints an error, even in quiet mode."""
        self._console.print(f"[red]ERROR:[/red] {message}")

    def log_info(self, message: str) -> None:
        """prints a status line unless quiet or a progress display owns the terminal."""
        if not (self.quiet or self.show_progress):
            self._console.print(message)

    def finish(self) -> int:
        """
        stops the display and prints the summary unless quiet.

        Returns:
            exit code (0 if every file rendered, 1 otherwise)
        """
        self._stop()
        if not self.quiet:
            self._console.print(self.tally.summary())
        return self.exit_code
