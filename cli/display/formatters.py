"""Pure formatting functions for display output."""

from flowergit.git.parsers import split_lines
from flowergit.models import StatusLabel

LABEL_STYLES = {
    StatusLabel.CONFLICT: "bold red",
    StatusLabel.ADDED: "cyan",
    StatusLabel.MODIFIED: "dark_orange",
    StatusLabel.DELETED: "magenta",
}


def first_line(text: str) -> str:
    """Return the first non-empty line of a git message, or "" if there is none.

    Args:
        text: Multi-line git output.
    """
    lines = split_lines(text)
    return lines[0] if lines else ""


def format_label(label: StatusLabel) -> str:
    """Wrap a status label in its Rich style markup.

    Args:
        label: Classified status label.

    Returns:
        Markup string such as "[cyan]added[/cyan]".
    """
    style = LABEL_STYLES.get(label, "")
    if not style:
        return label.value
    return f"[{style}]{label.value}[/{style}]"
