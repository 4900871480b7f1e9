"""Commit staged changes."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display.console import console
from cli.utils import git_errors, report_result

logger = logging.getLogger(__name__)


def commit_command(
    message: Annotated[
        str,
        typer.Option("--message", "-m", help="Commit message (required)"),
    ],
) -> None:
    """
    Commit the staged files.

    The commit is local only. Use 'push' or 'sync' to send it to the remote.
    """
    repository = get_context().repository

    if not message.strip():
        console.print("[bold red]✗[/bold red] Commit message is required")
        raise typer.Exit(1)

    with git_errors():
        result = repository.commit(message)
    report_result(result, "Committed staged changes")
    logger.info("Committed staged changes")
