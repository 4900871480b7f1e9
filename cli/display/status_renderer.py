"""Status renderer for the repository snapshot."""

from rich.table import Table
from rich.text import Text

from cli.display.console import console
from cli.display.formatters import format_label
from flowergit.models import ClassifiedStatus, CommitLogRecord, RepositorySnapshot


class StatusRenderer:
    """Render the sections of the panel.

    Sections, top to bottom:
    - Recent commits on the remote-tracking branch
    - Local commits not yet pushed
    - Staged files
    - Working files
    """

    def render_branch(self, remote_branch: str, current_branch: str | None) -> None:
        console.print(f"Branch: {remote_branch}  {current_branch or '-'}")

    def render_commit_log(self, title: str, logs: tuple[CommitLogRecord, ...]) -> None:
        """Render a commit log section.

        Args:
            title: Section heading.
            logs: Commits to list, newest first.
        """
        console.print(f"\n[bold]{title}[/bold]")
        if not logs:
            console.print("  [dim](none)[/dim]")
            return

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("HASH", style="yellow")
        table.add_column("MESSAGE")
        for log in logs:
            table.add_row(log.hash, Text(log.message))
        console.print(table)

    def render_file_list(self, title: str, entries: tuple[ClassifiedStatus, ...]) -> None:
        """Render staged or working files with their labels.

        Args:
            title: Section heading.
            entries: Classified statuses for one stage.
        """
        console.print(f"\n[bold]{title}[/bold]")
        if not entries:
            console.print("  [dim](no changes)[/dim]")
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("STATE")
        table.add_column("PATH", style="cyan")
        for entry in entries:
            table.add_row(format_label(entry.label), Text(entry.path))
        console.print(table)

    def render_snapshot(self, snapshot: RepositorySnapshot) -> None:
        """Render every section of a snapshot."""
        self.render_commit_log("Recent commits", snapshot.recent_logs)
        self.render_commit_log("Unpushed commits", snapshot.commit_logs)
        self.render_file_list("Staged", snapshot.staged)
        self.render_file_list("Working", snapshot.working)
