"""Tests for git output parsers."""

import pytest

from flowergit.git.parsers import (
    parse_commit_line,
    parse_commit_lines,
    parse_remote_head,
    parse_status_line,
    parse_status_lines,
    split_lines,
)
from flowergit.models import ChangeState, CommitLogRecord, FileStatusRecord


def test_parse_status_line_staged_modification():
    """Test a staged modification line."""
    record = parse_status_line("M  src/Foo.cs")
    assert record == FileStatusRecord(
        status_code="M ", path="src/Foo.cs", name="Foo.cs", extension=".cs"
    )


def test_parse_status_line_working_modification_keeps_leading_blank():
    record = parse_status_line(" M Assets/Scenes/Main.unity")
    assert record.status_code == " M"
    assert record.path == "Assets/Scenes/Main.unity"
    assert record.name == "Main.unity"
    assert record.extension == ".unity"


def test_parse_status_line_untracked():
    record = parse_status_line("?? notes/todo.txt")
    assert record.status_code == "??"
    assert record.index_state is ChangeState.UNTRACKED
    assert record.worktree_state is ChangeState.UNTRACKED


def test_parse_status_line_rename_uses_destination():
    """Test rename lines resolve to the destination path."""
    record = parse_status_line("R  old.txt -> new.txt")
    assert record.status_code == "R "
    assert record.path == "new.txt"
    assert record.name == "new.txt"


def test_parse_status_line_quoted_paths():
    record = parse_status_line('?? "dir with space/file name.txt"')
    assert record.path == "dir with space/file name.txt"
    assert record.name == "file name.txt"

    renamed = parse_status_line('R  "old name.txt" -> "new name.txt"')
    assert renamed.path == "new name.txt"


def test_parse_status_line_extension_edge_cases():
    assert parse_status_line("A  Makefile").extension == ""
    assert parse_status_line("A  .gitignore").extension == ".gitignore"
    assert parse_status_line("A  archive.tar.gz").extension == ".gz"
    assert parse_status_line("A  Assets/Foo.prefab.meta").extension == ".meta"


@pytest.mark.parametrize(
    "line",
    [
        "M",
        "MM",
        "M  ",
        "MMfoo.txt",
        "R  old.txt new.txt",
    ],
)
def test_parse_status_line_malformed(line):
    assert parse_status_line(line) is None


def test_parse_status_lines_golden_output():
    """Test a full status output with every newline variant."""
    raw = "M  src/Foo.cs\r\n M README.md\n?? new/file.txt\rUU conflict.txt\nR  a.txt -> b.txt"
    records = parse_status_lines(raw)

    assert [r.status_code for r in records] == ["M ", " M", "??", "UU", "R "]
    assert [r.path for r in records] == [
        "src/Foo.cs",
        "README.md",
        "new/file.txt",
        "conflict.txt",
        "b.txt",
    ]


def test_parse_status_lines_skips_malformed(caplog):
    """Test a malformed line is skipped without losing the others."""
    raw = "M  good.txt\nwarning: something odd\n?? other.txt"
    records = parse_status_lines(raw)

    assert [r.path for r in records] == ["good.txt", "other.txt"]
    assert "Skipping malformed status line" in caplog.text


def test_parse_status_lines_empty():
    assert parse_status_lines("") == []
    assert parse_status_lines("\n\r\n") == []


def test_parse_status_lines_is_pure():
    raw = "M  a.txt\n?? b.txt"
    assert parse_status_lines(raw) == parse_status_lines(raw)


def test_parse_commit_line():
    record = parse_commit_line("a1b2c3d Fix bug in parser")
    assert record == CommitLogRecord(hash="a1b2c3d", message="Fix bug in parser")


def test_parse_commit_line_empty_message():
    record = parse_commit_line("a1b2c3d ")
    assert record.hash == "a1b2c3d"
    assert record.message == ""


def test_parse_commit_line_malformed():
    assert parse_commit_line("a1b2c3d") is None
    assert parse_commit_line(" leading space") is None


def test_parse_commit_lines_golden_output():
    raw = "a1b2c3d Fix bug in parser\r\n9f8e7d6 Merge branch 'main' of origin\n0011223 Initial commit"
    records = parse_commit_lines(raw)

    assert [r.hash for r in records] == ["a1b2c3d", "9f8e7d6", "0011223"]
    assert records[1].message == "Merge branch 'main' of origin"


def test_parse_remote_head():
    raw = (
        "* remote origin\n"
        "  Fetch URL: https://example.com/repo.git\n"
        "  Push  URL: https://example.com/repo.git\n"
        "  HEAD branch: main\n"
        "  Remote branch:\n"
        "    main tracked\n"
    )
    assert parse_remote_head(raw) == "main"


def test_parse_remote_head_missing():
    assert parse_remote_head("fatal: 'origin' does not appear to be a git repository") is None
    assert parse_remote_head("  HEAD branch: \n") is None


def test_split_lines():
    assert split_lines("a\r\nb\rc\n\nd\n") == ["a", "b", "c", "d"]
