"""Synchronize with the remote: pull, push, or both."""

import asyncio
import logging

import typer

from cli.context import get_context
from cli.display.sync_renderer import SyncRenderer
from cli.utils import git_errors, last_update_or_none
from flowergit.git.git_client import RawCommandResult

logger = logging.getLogger(__name__)


def sync_command() -> None:
    """Pull from the remote, then push local commits."""
    repository = get_context().repository
    renderer = SyncRenderer()

    renderer.render_header("Synchronizing with remote")

    def on_pull(result: RawCommandResult) -> None:
        renderer.render_step_result(result)
        renderer.render_step_start("Pushing")

    renderer.render_step_start("Pulling")
    with git_errors():
        result = asyncio.run(
            repository.sync_both_ways(
                on_pull=on_pull, on_push=renderer.render_step_result
            )
        )

    last_update = None if result.failed else last_update_or_none(repository)
    renderer.render_summary(result.failed, last_update)
    if result.failed:
        raise typer.Exit(1)


def pull_command() -> None:
    """Pull from the remote (merge, no editor)."""
    repository = get_context().repository
    renderer = SyncRenderer()

    renderer.render_header("Pulling from remote")
    renderer.render_step_start("Pulling")
    with git_errors():
        result = asyncio.run(repository.pull())
    renderer.render_step_result(result)

    last_update = None if result.failed else last_update_or_none(repository)
    renderer.render_summary(result.failed, last_update)
    if result.failed:
        raise typer.Exit(1)


def push_command() -> None:
    """Push local commits to the remote."""
    repository = get_context().repository
    renderer = SyncRenderer()

    renderer.render_header("Pushing to remote")
    renderer.render_step_start("Pushing")
    with git_errors():
        result = asyncio.run(repository.push())
    renderer.render_step_result(result)

    renderer.render_summary(result.failed)
    if result.failed:
        raise typer.Exit(1)
