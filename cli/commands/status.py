"""Show the repository panel: logs, staged and working files."""

import logging

import typer

from cli.context import get_context
from cli.display.console import console
from cli.display.status_renderer import StatusRenderer
from cli.utils import git_errors

logger = logging.getLogger(__name__)


def status_command() -> None:
    """Show recent commits, unpushed commits, and staged/working files."""
    ctx = get_context()
    repository = ctx.repository
    renderer = StatusRenderer()

    with git_errors():
        if not repository.is_repository():
            console.print(
                f"[bold yellow]⚠[/bold yellow] {repository.repo_root.resolve()} is not a git repository"
            )
            console.print("  Run 'flowergit init <url>' to set one up.")
            raise typer.Exit(1)

        snapshot = repository.refresh()
        renderer.render_branch(ctx.config.remote_branch, repository.current_branch())
        renderer.render_snapshot(snapshot)
