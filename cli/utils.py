"""CLI utilities for reporting git results and errors."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.markup import escape

from cli.display.console import console
from flowergit.exceptions import FlowerGitError, MissingMetadataFileError
from flowergit.git.git_client import RawCommandResult
from flowergit.git.repository import GitRepository

logger = logging.getLogger(__name__)


@contextmanager
def git_errors() -> Iterator[None]:
    """Turn hard git failures into a red message and exit code 1."""
    try:
        yield
    except FlowerGitError as e:
        logger.debug(f"Command failed: {e}")
        console.print(f"[bold red]✗[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


def report_result(result: RawCommandResult, success_message: str) -> None:
    """Print a green tick and git's output, or git's error and exit 1.

    Args:
        result: Result of a git command.
        success_message: Shown when git exited zero.
    """
    if result.failed:
        console.print(f"[bold red]✗[/bold red] {escape(result.text)}")
        raise typer.Exit(1)
    console.print(f"[bold green]✓[/bold green] {escape(success_message)}")
    if result.text:
        console.print(result.text, markup=False, highlight=False)


def last_update_or_none(repository: GitRepository) -> str | None:
    """Get the last fetch time, or None if the repository was never fetched."""
    try:
        return repository.last_sync_timestamp()
    except MissingMetadataFileError as e:
        logger.debug(f"No last update: {e}")
        return None
