"""Models package."""

from flowergit.models.snapshot import RepositorySnapshot
from flowergit.models.status import (
    ChangeState,
    ClassifiedStatus,
    CommitLogRecord,
    Condition,
    FileStatusRecord,
    Stage,
    StatusLabel,
)

__all__ = [
    "ChangeState",
    "ClassifiedStatus",
    "CommitLogRecord",
    "Condition",
    "FileStatusRecord",
    "RepositorySnapshot",
    "Stage",
    "StatusLabel",
]
