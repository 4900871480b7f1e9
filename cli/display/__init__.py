"""Display module for rendering panel output.

This module provides renderers for the panel sections:
- StatusRenderer: commit logs and staged/working file tables
- SyncRenderer: step-by-step pull/push/init progress

It also provides:
- console: Shared Rich console instance
- Formatting functions for git messages and status labels
"""

from cli.display.console import console
from cli.display.formatters import first_line, format_label
from cli.display.status_renderer import StatusRenderer
from cli.display.sync_renderer import SyncRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "StatusRenderer",
    "SyncRenderer",
    # Formatters
    "first_line",
    "format_label",
]
