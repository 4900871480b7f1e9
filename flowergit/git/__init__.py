"""Git execution, parsing, caching and classification."""

from flowergit.git.cache import QueryKind, ResultCache
from flowergit.git.git_client import GitClient, RawCommandResult, SubprocessGitClient
from flowergit.git.repository import (
    ConflictSide,
    GitRepository,
    RestoreMode,
    SequenceResult,
    SyncResult,
)

__all__ = [
    "ConflictSide",
    "GitClient",
    "GitRepository",
    "QueryKind",
    "RawCommandResult",
    "RestoreMode",
    "ResultCache",
    "SequenceResult",
    "SubprocessGitClient",
    "SyncResult",
]
