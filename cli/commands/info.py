"""Display remote, branch and last update information."""

import asyncio

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display.console import console
from cli.utils import git_errors, last_update_or_none


def info_command(
    check_remote: Annotated[
        bool,
        typer.Option(
            "--check-remote",
            help="Ask the remote which branch it reports as HEAD (network access)",
        ),
    ] = False,
) -> None:
    """Show the remote URL, tracked branch, current branch and last update time."""
    ctx = get_context()
    repository = ctx.repository

    with git_errors():
        if not repository.is_repository():
            console.print(
                f"[bold yellow]⚠[/bold yellow] {repository.repo_root.resolve()} is not a git repository"
            )
            raise typer.Exit(1)

        remote_url = repository.remote_url()
        current_branch = repository.current_branch()
        last_update = last_update_or_none(repository)

        console.print(f"Repository:    {repository.repo_root.resolve()}")
        console.print(f"Remote URL:    {remote_url or '-'}", highlight=False)
        console.print(f"Remote branch: {ctx.config.remote_branch}")
        console.print(f"Branch:        {current_branch or '-'}")
        console.print(f"Last update:   {last_update or 'never'}")

        if check_remote:
            head = asyncio.run(repository.remote_head_branch())
            console.print(f"Remote HEAD:   {head or 'unknown'}")
