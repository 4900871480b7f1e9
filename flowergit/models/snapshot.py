"""Aggregate repository state held by the facade."""

from pydantic import BaseModel, ConfigDict

from flowergit.models.status import ClassifiedStatus, CommitLogRecord, FileStatusRecord


class RepositorySnapshot(BaseModel):
    """Immutable view of the last refresh.

    A new snapshot replaces the previous one wholesale; fields are tuples so
    callers can hold on to them without seeing later updates.
    """

    model_config = ConfigDict(frozen=True)

    staged: tuple[ClassifiedStatus, ...] = ()
    working: tuple[ClassifiedStatus, ...] = ()
    recent_logs: tuple[CommitLogRecord, ...] = ()
    commit_logs: tuple[CommitLogRecord, ...] = ()
    status_records: tuple[FileStatusRecord, ...] = ()
