"""Shared Rich console instance for panel output."""

from rich.console import Console

# Shared console instance used by all renderers
console = Console()
