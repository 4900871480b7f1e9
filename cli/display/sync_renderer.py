"""Sync renderer for pull/push/init operations."""

from cli.display.console import console
from cli.display.formatters import first_line
from flowergit.git.git_client import RawCommandResult


class SyncRenderer:
    """Render remote operations with step-by-step progress.

    Provides output for pull, push, sync and init including:
    - Header with the operation name
    - Step start and done/failed markers
    - First line of each git message
    - Final success/failure summary
    """

    def render_header(self, title: str) -> None:
        """Render operation header.

        Args:
            title: Operation being run.
        """
        console.print()
        console.print("━" * 40)
        console.print(f"[bold]  {title}[/bold]")
        console.print("━" * 40)

    def render_step_start(self, message: str) -> None:
        """Render start of a step (without newline).

        Args:
            message: Step description.
        """
        console.print(f"  {message}...", end=" ")

    def render_step_result(self, result: RawCommandResult) -> None:
        """Render step outcome followed by the first line of git's message.

        Args:
            result: Result of the step.
        """
        if result.failed:
            console.print("[red]failed[/red]")
        else:
            console.print("[green]done[/green]")
        message = first_line(result.text)
        if message:
            console.print(f"    {message}", style="dim", markup=False, highlight=False)

    def render_summary(self, failed: bool, last_update: str | None = None) -> None:
        """Render overall result.

        Args:
            failed: Whether any step failed.
            last_update: Formatted time of the last fetch, if known.
        """
        if failed:
            console.print("\n[bold red]✗[/bold red] Finished with errors")
            return
        console.print("\n[bold green]✓[/bold green] Synchronized successfully")
        if last_update:
            console.print(f"  Last update: {last_update}")
