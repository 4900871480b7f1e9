"""Exception hierarchy for repository operations."""

from collections.abc import Sequence


class FlowerGitError(Exception):
    """Base exception for repository operations."""

    pass


class GitError(FlowerGitError):
    """Base exception for git operations."""

    pass


class ProcessLaunchError(GitError):
    """Git executable could not be started."""

    def __init__(self, args: Sequence[str], reason: str) -> None:
        self.args_vector = list(args)
        self.reason = reason
        super().__init__(f"Failed to start git {' '.join(self.args_vector)}: {reason}")


class ProcessTimeoutError(GitError):
    """Git process exceeded the timeout and was terminated."""

    def __init__(self, args: Sequence[str], timeout: float) -> None:
        self.args_vector = list(args)
        self.timeout = timeout
        super().__init__(
            f"git {' '.join(self.args_vector)} timed out after {timeout:g}s"
        )


class GitRepositoryNotFoundError(GitError):
    """Git repository not found."""

    pass


class MissingMetadataFileError(GitError):
    """A file inside the git metadata directory does not exist."""

    pass


class RepositoryBusyError(GitError):
    """Another git command is already running against the repository."""

    pass
