"""Console reporting and progress bars for diagnostic passes."""

from __future__ import annotations

import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from cheveretokit.models.probe import DiagnosticReport


@final
class DiagnosticReporter:
    """Writes probe progress, errors and summaries to a Rich console."""

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        """Initialize the reporter.

        Args:
            console: Rich console instance. If None, creates a new one.
            verbose: Print exception tracebacks along with error messages
        """
        self.console = console or Console()
        self.verbose = verbose

    @contextmanager
    def track_probes(self, total_endpoints: int) -> Iterator[ProbeProgressContext]:
        """Context manager for tracking a diagnostic pass.

        Args:
            total_endpoints: Number of endpoints that will be probed

        Yields:
            Context for advancing the progress bar
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Probing endpoints...", total=total_endpoints)
            yield ProbeProgressContext(progress, task_id)

    def display_report(self, report: DiagnosticReport) -> None:
        """Display a diagnostic report as a table.

        Args:
            report: Report to render
        """
        table = Table(title="Endpoint Diagnostics")
        table.add_column("Endpoint", style="cyan")
        table.add_column("Status")
        table.add_column("Upload time", justify="right", style="green")

        for outcome in report.successful:
            table.add_row(outcome.label, "[green]OK[/green]", f"{outcome.elapsed_ms}ms")
        for outcome in report.failed:
            table.add_row(outcome.label, "[red]FAILED[/red]", "-")

        self.console.print(table)
        self.console.print(
            f"[green]{len(report.successful)}[/green] working, "
            + f"[red]{len(report.failed)}[/red] failing"
        )

    def display_error(self, message: str, exception: BaseException | None = None) -> None:
        """Display an error message with optional exception details.

        Args:
            message: Error message to display
            exception: Optional exception for additional context
        """
        self.console.print(f"[red]Error: {escape(message)}[/red]")
        if exception:
            self.console.print(f"[dim]Details: {escape(str(exception))}[/dim]")
            if self.verbose:
                details = "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )
                self.console.print(f"[dim]{escape(details)}[/dim]")

    def display_warning(self, message: str) -> None:
        self.console.print(f"[yellow]Warning: {escape(message)}[/yellow]")

    def display_success(self, message: str) -> None:
        self.console.print(f"[green]Success: {escape(message)}[/green]")

    def display_info(self, message: str) -> None:
        self.console.print(f"[blue]Info: {escape(message)}[/blue]")


@final
class ProbeProgressContext:
    """Context for tracking per-endpoint probe progress."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        self.progress = progress
        self.task_id = task_id

    def set_description(self, description: str) -> None:
        self.progress.update(self.task_id, description=description)

    def update(self, advance: int = 1) -> None:
        self.progress.update(self.task_id, advance=advance)
