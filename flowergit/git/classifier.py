"""Classification of two-character status codes into stage/condition/label."""

from collections.abc import Iterable

from flowergit.models import (
    ChangeState,
    ClassifiedStatus,
    Condition,
    FileStatusRecord,
    Stage,
    StatusLabel,
)

UNTRACKED_CODE = "??"
CONFLICT_CODE = "UU"


def is_staged(status_code: str) -> bool:
    """True if the code has an index-side change worth listing as staged."""
    if status_code in (UNTRACKED_CODE, CONFLICT_CODE):
        return False
    return not ChangeState(status_code[0]).is_blank


def is_working(status_code: str) -> bool:
    """True if the code has a working-tree-side change."""
    return not ChangeState(status_code[1]).is_blank


def condition_for(status_code: str) -> Condition:
    if status_code == CONFLICT_CODE:
        return Condition.CONFLICT
    if status_code == UNTRACKED_CODE:
        return Condition.UNTRACKED
    return Condition.DETECTED


def label_for(status_code: str, stage: Stage) -> StatusLabel:
    """
    Derive the display label for one stage of a status code.

    Conflicts and untracked files have fixed labels; otherwise the state on
    the stage's own axis decides.
    """
    condition = condition_for(status_code)
    if condition is Condition.CONFLICT:
        return StatusLabel.CONFLICT
    if condition is Condition.UNTRACKED:
        return StatusLabel.ADDED

    state = ChangeState(status_code[stage.position])
    if state is ChangeState.ADDED:
        return StatusLabel.ADDED
    if state is ChangeState.DELETED:
        return StatusLabel.DELETED
    return StatusLabel.MODIFIED


def classify_stage(record: FileStatusRecord, stage: Stage) -> ClassifiedStatus:
    return ClassifiedStatus(
        status_code=record.status_code,
        path=record.path,
        name=record.name,
        stage=stage,
        condition=condition_for(record.status_code),
        label=label_for(record.status_code, stage),
    )


def classify(record: FileStatusRecord) -> list[ClassifiedStatus]:
    """Produce zero, one or two ClassifiedStatus entries for a record."""
    entries = []
    if is_staged(record.status_code):
        entries.append(classify_stage(record, Stage.STAGED))
    if is_working(record.status_code):
        entries.append(classify_stage(record, Stage.WORKING))
    return entries


def classify_all(
    records: Iterable[FileStatusRecord],
) -> tuple[list[ClassifiedStatus], list[ClassifiedStatus]]:
    """
    Split records into staged and working lists.

    Returns:
        Tuple of (staged, working), each in input order
    """
    staged = []
    working = []
    for record in records:
        for entry in classify(record):
            if entry.stage is Stage.STAGED:
                staged.append(entry)
            else:
                working.append(entry)
    return staged, working
