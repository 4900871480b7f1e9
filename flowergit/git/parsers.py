"""Parsers for git's line-oriented output.

Every assumption about git's textual formats lives here:

- ``status --short``: ``XY path`` or ``XY old -> new`` for renames,
  paths optionally wrapped in double quotes.
- ``log --oneline``: ``<hash> <subject>``.
- ``remote show``: a ``HEAD branch: <name>`` line.

Parsers are pure. Lines that do not fit the expected shape are logged and
skipped so a single odd line cannot blank the whole view.
"""

import logging
import posixpath
import re

from flowergit.models import CommitLogRecord, FileStatusRecord

logger = logging.getLogger(__name__)

RENAME_MARKER = "-> "
_LINE_SPLIT = re.compile(r"\r\n|\n|\r")
_REMOTE_HEAD = re.compile(r"HEAD branch: (.*)")


def split_lines(raw: str) -> list[str]:
    """Split on any newline variant and drop empty lines."""
    return [line for line in _LINE_SPLIT.split(raw) if line]


def _file_extension(name: str) -> str:
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def parse_status_line(line: str) -> FileStatusRecord | None:
    """
    Parse one line of short-format status output.

    Args:
        line: e.g. ``"M  src/Foo.cs"`` or ``"R  old.txt -> new.txt"``

    Returns:
        FileStatusRecord, or None if the line is malformed
    """
    if len(line) < 4 or line[2] != " ":
        return None

    status_code = line[:2]
    remainder = line[3:]

    if "R" in status_code:
        marker = remainder.find(RENAME_MARKER)
        if marker < 0:
            return None
        remainder = remainder[marker + len(RENAME_MARKER) :]

    path = remainder.strip('"')
    if not path:
        return None

    name = posixpath.basename(path.rstrip("/")) or path
    return FileStatusRecord(
        status_code=status_code,
        path=path,
        name=name,
        extension=_file_extension(name),
    )


def parse_status_lines(raw: str) -> list[FileStatusRecord]:
    """Parse ``git status --short`` output into FileStatusRecords."""
    records = []
    for line in split_lines(raw):
        record = parse_status_line(line)
        if record is None:
            logger.warning(f"Skipping malformed status line: {line!r}")
            continue
        records.append(record)
    return records


def parse_commit_line(line: str) -> CommitLogRecord | None:
    """Split a one-line log entry at its first space."""
    commit_hash, separator, message = line.partition(" ")
    if not separator or not commit_hash:
        return None
    return CommitLogRecord(hash=commit_hash, message=message)


def parse_commit_lines(raw: str) -> list[CommitLogRecord]:
    """Parse ``git log --oneline`` output into CommitLogRecords."""
    records = []
    for line in split_lines(raw):
        record = parse_commit_line(line)
        if record is None:
            logger.warning(f"Skipping malformed log line: {line!r}")
            continue
        records.append(record)
    return records


def parse_remote_head(raw: str) -> str | None:
    """Extract the branch name from ``git remote show <remote>`` output."""
    match = _REMOTE_HEAD.search(raw)
    if match is None:
        return None
    branch = match.group(1).strip()
    return branch or None
