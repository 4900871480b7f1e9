"""Stage and unstage files."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.utils import git_errors, report_result
from flowergit.git.repository import RestoreMode

logger = logging.getLogger(__name__)


def add_command(
    path: Annotated[str, typer.Argument(help="Path to stage")],
) -> None:
    """Stage a file for the next commit."""
    repository = get_context().repository
    with git_errors():
        result = repository.add(path)
    report_result(result, f"Staged {path}")


def restore_command(
    path: Annotated[str, typer.Argument(help="Path to restore")],
    staged: Annotated[
        bool,
        typer.Option(
            "--staged",
            help="Unstage the file instead of discarding working-tree changes",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Unstage a file, or discard its working-tree changes."""
    repository = get_context().repository
    mode = RestoreMode.STAGED if staged else RestoreMode.WORKTREE

    if mode is RestoreMode.WORKTREE and not force:
        if not typer.confirm(f"Discard working-tree changes to {path}?"):
            typer.echo("Restore cancelled.")
            return

    with git_errors():
        result = repository.restore(path, mode)
    report_result(result, f"Unstaged {path}" if staged else f"Restored {path}")
