"""List commits on the remote-tracking branch or commits not yet pushed."""

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display.status_renderer import StatusRenderer
from cli.utils import git_errors


def log_command(
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            min=1,
            help="Number of commits to show (default: from FLOWERGIT_RECENT_LOG_LIMIT config)",
        ),
    ] = None,
    outgoing: Annotated[
        bool,
        typer.Option("--outgoing", help="Show local commits not yet pushed"),
    ] = False,
    remote: Annotated[
        str | None,
        typer.Option("--remote", help="Remote-tracking branch (default: remote/branch from config)"),
    ] = None,
) -> None:
    """List recent commits, or unpushed commits with --outgoing."""
    ctx = get_context()
    repository = ctx.repository
    renderer = StatusRenderer()
    remote_branch = remote or ctx.config.remote_branch

    with git_errors():
        if outgoing:
            logs = repository.outgoing_log(remote_branch)
            renderer.render_commit_log(f"Unpushed commits ({remote_branch}..HEAD)", logs)
        else:
            logs = repository.recent_log(remote_branch, limit)
            renderer.render_commit_log(f"Recent commits on {remote_branch}", logs)
