"""Typed records parsed from git output."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ChangeState(str, Enum):
    """One axis (index or working tree) of a short-format status code."""

    UNMODIFIED = " "
    MODIFIED = "M"
    TYPE_CHANGED = "T"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    UNTRACKED = "?"
    IGNORED = "!"
    UNKNOWN = "*"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str) and not value.strip():
            return cls.UNMODIFIED
        return cls.UNKNOWN

    @property
    def is_blank(self) -> bool:
        return self is ChangeState.UNMODIFIED


class Stage(str, Enum):
    """Which side of the index/working-tree pair a status refers to."""

    STAGED = "staged"
    WORKING = "working"

    @property
    def position(self) -> int:
        """Character position of this stage in a two-character status code."""
        return 0 if self is Stage.STAGED else 1


class Condition(str, Enum):
    """Overall condition of a changed file."""

    DETECTED = "detected"
    UNTRACKED = "untracked"
    CONFLICT = "conflict"


class StatusLabel(str, Enum):
    """Label shown next to a file in the panel."""

    CONFLICT = "conflict"
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


class FileStatusRecord(BaseModel):
    """One line of ``git status --short`` output."""

    model_config = ConfigDict(frozen=True)

    status_code: str
    path: str
    name: str
    extension: str

    @property
    def index_state(self) -> ChangeState:
        return ChangeState(self.status_code[0])

    @property
    def worktree_state(self) -> ChangeState:
        return ChangeState(self.status_code[1])


class CommitLogRecord(BaseModel):
    """One line of ``git log --oneline`` output."""

    model_config = ConfigDict(frozen=True)

    hash: str
    message: str


class ClassifiedStatus(BaseModel):
    """A file status annotated for one stage."""

    model_config = ConfigDict(frozen=True)

    status_code: str
    path: str
    name: str
    stage: Stage
    condition: Condition
    label: StatusLabel
