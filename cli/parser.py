"""CLI application and command routing."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    add_command,
    commit_command,
    deinit_command,
    info_command,
    init_command,
    log_command,
    pull_command,
    push_command,
    resolve_command,
    restore_command,
    status_command,
    sync_command,
)
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Drive a git working directory: status, stage, commit, sync and resolve conflicts.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show informational log messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
    repo: Annotated[
        Path | None,
        typer.Option(
            "--repo",
            help="Repository root (default: FLOWERGIT_REPO_ROOT or current directory)",
        ),
    ] = None,
) -> None:
    """Set up shared context and logging before any command runs."""
    ctx = CLIContext(verbose=verbose, quiet=quiet, repo_root=repo)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("status")(status_command)
app.command("log")(log_command)
app.command("add")(add_command)
app.command("restore")(restore_command)
app.command("commit")(commit_command)
app.command("resolve")(resolve_command)
app.command("sync")(sync_command)
app.command("pull")(pull_command)
app.command("push")(push_command)
app.command("init")(init_command)
app.command("deinit")(deinit_command)
app.command("info")(info_command)
