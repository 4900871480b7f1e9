"""Initialize the working directory from a remote, or remove its git metadata."""

import asyncio
import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display.console import console
from cli.display.sync_renderer import SyncRenderer
from cli.utils import git_errors, last_update_or_none

logger = logging.getLogger(__name__)

_STEP_DESCRIPTIONS = [
    "Initializing repository",
    "Renaming default branch",
    "Adding remote",
    "Fetching",
    "Checking out branch",
]


def init_command(
    url: Annotated[
        str,
        typer.Argument(help="Remote repository URL ending in .git"),
    ],
) -> None:
    """Initialize a git repository here and check out the remote's branch."""
    ctx = get_context()
    repository = ctx.repository
    repo_root = repository.repo_root.resolve()
    url = url.strip()

    if repository.git_dir.exists():
        typer.echo(f"Git repository already exists in {repo_root}")
        with git_errors():
            remote_url = repository.remote_url()
        if remote_url:
            typer.echo(f"Remote URL: {remote_url}")
        return

    if not url.endswith(".git"):
        console.print(
            f"[bold red]✗[/bold red] Remote URL must end with .git (got '{url}')"
        )
        raise typer.Exit(1)

    renderer = SyncRenderer()
    renderer.render_header(f"Initializing from {url}")

    with git_errors():
        result = asyncio.run(repository.init_remote(url))

    for description, step in zip(_STEP_DESCRIPTIONS, result.steps):
        renderer.render_step_start(description)
        renderer.render_step_result(step)

    last_update = None if result.failed else last_update_or_none(repository)
    renderer.render_summary(result.failed, last_update)
    if result.failed:
        raise typer.Exit(1)


def deinit_command(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete the local .git directory (the remote is left untouched)."""
    repository = get_context().repository
    git_dir = repository.git_dir

    if not git_dir.exists():
        typer.echo(f"No git repository found in {repository.repo_root.resolve()}")
        return

    typer.echo("This will delete:")
    typer.echo(f"  - Local git repository: {git_dir.resolve()}")
    typer.echo("  Uncommitted history that was never pushed will be lost.")

    if not force:
        typer.echo()
        if not typer.confirm("Are you sure you want to delete the git repository?"):
            typer.echo("Deletion cancelled.")
            return

    with git_errors():
        repository.delete_repository_metadata()
    console.print("[bold green]✓[/bold green] Local git repository deleted")
