"""CLI commands package."""

from cli.commands.commit import commit_command
from cli.commands.info import info_command
from cli.commands.init import deinit_command, init_command
from cli.commands.log import log_command
from cli.commands.resolve import resolve_command
from cli.commands.stage import add_command, restore_command
from cli.commands.status import status_command
from cli.commands.sync import pull_command, push_command, sync_command

__all__ = [
    "add_command",
    "commit_command",
    "deinit_command",
    "info_command",
    "init_command",
    "log_command",
    "pull_command",
    "push_command",
    "resolve_command",
    "restore_command",
    "status_command",
    "sync_command",
]
