"""Resolve a merge conflict by keeping one side."""

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display.console import console
from cli.utils import git_errors, report_result
from flowergit.git.repository import ConflictSide


def resolve_command(
    path: Annotated[str, typer.Argument(help="Conflicted path")],
    theirs: Annotated[
        bool,
        typer.Option("--theirs", help="Apply the remote's version"),
    ] = False,
    ours: Annotated[
        bool,
        typer.Option("--ours", help="Keep your version"),
    ] = False,
) -> None:
    """Keep either the remote's or your version of a conflicted file and commit it."""
    if theirs == ours:
        console.print("[bold red]✗[/bold red] Choose exactly one of --theirs or --ours")
        raise typer.Exit(1)

    side = ConflictSide.THEIRS if theirs else ConflictSide.OURS
    repository = get_context().repository

    with git_errors():
        result = repository.resolve_conflict(side, path)
    report_result(result, f"Resolved {path} using {side.value} version")
