"""Repository facade combining git execution, parsing, caching and classification."""

import asyncio
import logging
import os
import shutil
import stat
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from flowergit.config import GitPanelConfig
from flowergit.exceptions import (
    GitRepositoryNotFoundError,
    MissingMetadataFileError,
    RepositoryBusyError,
)
from flowergit.git.cache import QueryKind, ResultCache
from flowergit.git.classifier import classify_all
from flowergit.git.git_client import GitClient, RawCommandResult, SubprocessGitClient
from flowergit.git.parsers import (
    parse_commit_lines,
    parse_remote_head,
    parse_status_lines,
)
from flowergit.models import (
    ClassifiedStatus,
    CommitLogRecord,
    FileStatusRecord,
    RepositorySnapshot,
)

logger = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"
FETCH_HEAD_NAME = "FETCH_HEAD"


class RestoreMode(str, Enum):
    """What ``git restore`` resets."""

    WORKTREE = "worktree"
    STAGED = "staged"


class ConflictSide(str, Enum):
    """Which version of a conflicted file to keep."""

    THEIRS = "theirs"
    OURS = "ours"


@dataclass
class SequenceResult:
    """Outcome of a multi-step git sequence."""

    steps: list[RawCommandResult]
    text: str

    @property
    def failed(self) -> bool:
        """True if any step exited non-zero."""
        return any(step.failed for step in self.steps)


@dataclass
class SyncResult:
    """Outcome of pull followed by push."""

    pull: RawCommandResult
    push: RawCommandResult

    @property
    def failed(self) -> bool:
        return self.pull.failed or self.push.failed


def format_timestamp(moment: datetime, pattern: str) -> str:
    """Apply a str.format template (contains "{") or else a strftime pattern."""
    if "{" in pattern:
        return pattern.format(moment)
    return moment.strftime(pattern)


StepCallback = Callable[[RawCommandResult], None]


class GitRepository:
    """Public surface of the git core for a single working directory.

    Owns the result cache and the current snapshot. Every mutation of either
    happens after a git process has exited and replaces the previous value
    wholesale.
    """

    def __init__(
        self,
        config: GitPanelConfig | None = None,
        client: GitClient | None = None,
        cache: ResultCache | None = None,
        on_change: Callable[[RepositorySnapshot], None] | None = None,
    ):
        """
        Initialize GitRepository.

        Args:
            config: Panel configuration (defaults to GitPanelConfig())
            client: GitClient implementation (defaults to SubprocessGitClient)
            cache: ResultCache instance (a fresh one per repository by default)
            on_change: Called with the new snapshot whenever it changes
        """
        self.config = config or GitPanelConfig()
        self.repo_root = self.config.repo_root
        self.client = client or SubprocessGitClient(
            self.repo_root,
            git_binary=self.config.git_binary,
            timeout=self.config.command_timeout,
        )
        self.cache = cache or ResultCache()
        self.on_change = on_change
        self._snapshot = RepositorySnapshot()
        self._lock = asyncio.Lock()
        self._callback_depth = 0

    @property
    def git_dir(self) -> Path:
        return self.repo_root / GIT_DIR_NAME

    @property
    def snapshot(self) -> RepositorySnapshot:
        """The current snapshot. Immutable; replaced on every change."""
        return self._snapshot

    @property
    def busy(self) -> bool:
        """True while an asynchronous sequence is running git."""
        return self._lock.locked()

    def _run(self, args: Sequence[str]) -> RawCommandResult:
        # Callbacks run between steps of a sequence, when no git process is alive
        if self.busy and not self._callback_depth:
            raise RepositoryBusyError(
                f"Cannot run git {' '.join(args)} while another git operation is in progress"
            )
        return self.client.run(args)

    def _notify(self, callback: Callable | None, result) -> None:
        if callback is None:
            return
        self._callback_depth += 1
        try:
            callback(result)
        finally:
            self._callback_depth -= 1

    def _replace_snapshot(self, snapshot: RepositorySnapshot) -> None:
        self._snapshot = snapshot
        if self.on_change is not None:
            self.on_change(snapshot)

    # Repository information

    def is_repository(self) -> bool:
        """Check if repo_root is inside a git working tree."""
        result = self._run(["rev-parse", "--is-inside-work-tree"])
        return not result.failed and result.text.strip() == "true"

    def current_branch(self) -> str | None:
        """Get the short name of the checked-out branch."""
        result = self._run(["symbolic-ref", "--short", "HEAD"])
        if result.failed:
            return None
        return result.text.strip() or None

    def remote_url(self) -> str | None:
        """Get the configured remote's URL from the local git config."""
        result = self._run(
            ["config", "--local", "--get", f"remote.{self.config.remote_name}.url"]
        )
        if result.failed:
            return None
        return result.text.strip() or None

    async def remote_head_branch(self) -> str | None:
        """
        Resolve the remote-tracking branch the remote advertises as HEAD.

        Returns:
            e.g. ``"origin/main"``, or None if the remote did not report one
        """
        async with self._lock:
            origin = await self.client.run_async(
                [
                    "config",
                    "--local",
                    "--get",
                    f"branch.{self.config.default_branch}.remote",
                ]
            )
            remote = await self.client.run_async(
                ["remote", "show", self.config.remote_name]
            )

        if remote.failed:
            return None
        branch = parse_remote_head(remote.text)
        if branch is None:
            return None

        remote_name = origin.text.strip() if not origin.failed else ""
        return f"{remote_name or self.config.remote_name}/{branch}"

    def last_sync_timestamp(self, format: str | None = None) -> str:
        """
        Format the time of the last fetch.

        Args:
            format: ``strftime`` pattern such as ``"%Y/%m/%d %H:%M"``, or a
                ``str.format`` template with the datetime as field 0
                (defaults to config.timestamp_format)

        Returns:
            Formatted modification time of ``.git/FETCH_HEAD``

        Raises:
            MissingMetadataFileError: If FETCH_HEAD does not exist
        """
        fetch_head = self.git_dir / FETCH_HEAD_NAME
        try:
            modified = fetch_head.stat().st_mtime
        except FileNotFoundError as e:
            raise MissingMetadataFileError(f"{fetch_head} not found") from e

        return format_timestamp(
            datetime.fromtimestamp(modified), format or self.config.timestamp_format
        )

    # Queries

    def _status_records(self) -> tuple[FileStatusRecord, ...]:
        result = self._run(["status", "--short", "--untracked-files=all"])
        # A failing status (e.g. not a repository) lists nothing
        raw = "" if result.failed else result.text
        return self.cache.get_or_parse(QueryKind.STATUS, raw, parse_status_lines)

    def _classified(
        self, records: tuple[FileStatusRecord, ...]
    ) -> tuple[tuple[ClassifiedStatus, ...], tuple[ClassifiedStatus, ...]]:
        if records == self._snapshot.status_records:
            return self._snapshot.staged, self._snapshot.working
        staged, working = classify_all(records)
        return tuple(staged), tuple(working)

    def status(
        self,
    ) -> tuple[tuple[ClassifiedStatus, ...], tuple[ClassifiedStatus, ...]]:
        """
        Get staged and working file lists.

        Unchanged git output returns the previous lists and does not fire
        on_change.

        Returns:
            Tuple of (staged, working)
        """
        records = self._status_records()
        if records == self._snapshot.status_records:
            return self._snapshot.staged, self._snapshot.working

        staged, working = classify_all(records)
        staged, working = tuple(staged), tuple(working)
        self._replace_snapshot(
            self._snapshot.model_copy(
                update={
                    "staged": staged,
                    "working": working,
                    "status_records": records,
                }
            )
        )
        logger.debug(f"Status changed: {len(staged)} staged, {len(working)} working")
        return staged, working

    def recent_log(
        self, remote: str | None = None, max_count: int | None = None
    ) -> tuple[CommitLogRecord, ...]:
        """
        Get the most recent commits on a remote-tracking branch.

        Args:
            remote: Branch to read (defaults to config.remote_branch)
            max_count: Maximum commits (defaults to config.recent_log_limit)

        Raises:
            ValueError: If max_count is below 1
        """
        remote = remote or self.config.remote_branch
        if max_count is None:
            max_count = self.config.recent_log_limit
        elif max_count < 1:
            raise ValueError(f"max_count must be at least 1, got {max_count}")
        result = self._run(["log", "--oneline", "--max-count", str(max_count), remote])
        raw = "" if result.failed else result.text
        return self.cache.get_or_parse(
            QueryKind.RECENT_LOG, raw, parse_commit_lines, signature=(remote, max_count)
        )

    def outgoing_log(self, remote: str | None = None) -> tuple[CommitLogRecord, ...]:
        """Get commits on HEAD that are not yet in ``remote``."""
        remote = remote or self.config.remote_branch
        result = self._run(["log", "--oneline", f"{remote}..HEAD"])
        raw = "" if result.failed else result.text
        return self.cache.get_or_parse(
            QueryKind.COMMIT_LOG, raw, parse_commit_lines, signature=(remote,)
        )

    def refresh(self) -> RepositorySnapshot:
        """
        Re-read logs and status into a new snapshot.

        on_change fires only if something differs from the current snapshot.

        Returns:
            The current snapshot after the refresh
        """
        recent_logs = self.recent_log()
        commit_logs = self.outgoing_log()
        records = self._status_records()
        staged, working = self._classified(records)

        snapshot = RepositorySnapshot(
            staged=staged,
            working=working,
            recent_logs=recent_logs,
            commit_logs=commit_logs,
            status_records=records,
        )
        if snapshot != self._snapshot:
            self._replace_snapshot(snapshot)
        return self._snapshot

    def clear(self) -> None:
        """Drop the snapshot and every cached result."""
        self._snapshot = RepositorySnapshot()
        self.cache.clear()

    # Index and working tree

    def add(self, path: str) -> RawCommandResult:
        """Stage a path. Call status() afterwards to see the effect."""
        logger.info(f"Staging {path}")
        return self._run(["add", "--", path])

    def restore(
        self, path: str, mode: RestoreMode = RestoreMode.WORKTREE
    ) -> RawCommandResult:
        """Unstage a path (STAGED) or discard its working-tree changes (WORKTREE)."""
        args = ["restore"]
        if mode is RestoreMode.STAGED:
            args.append("--staged")
        logger.info(f"Restoring {path} ({mode.value})")
        return self._run([*args, "--", path])

    def commit(self, message: str) -> RawCommandResult:
        """
        Commit the index.

        Raises:
            ValueError: If message is empty
        """
        if not message.strip():
            raise ValueError("Commit message is required")
        logger.info("Committing staged changes")
        return self._run(["commit", "-m", message])

    def resolve_conflict(self, side: ConflictSide, path: str) -> RawCommandResult:
        """
        Keep one side of a conflicted file and commit the resolution.

        The checkout and the commit are separate steps. If the checkout fails
        nothing is committed; if the commit fails the checked-out version is
        left in place and the commit's message is returned.

        Args:
            side: Version to keep
            path: Conflicted path

        Returns:
            Result of the failed checkout, or of the commit
        """
        checkout = self._run(["checkout", f"--{side.value}", "--", path])
        if checkout.failed:
            return checkout

        commit = self._run(["commit", "-am", self.config.conflict_commit_message])
        if commit.failed:
            logger.warning(
                f"Checked out {side.value} version of {path} but commit failed"
            )
        return commit

    # Remote synchronisation

    async def pull(self) -> RawCommandResult:
        """Merge from the upstream without opening an editor."""
        async with self._lock:
            return await self.client.run_async(["pull", "--no-edit"])

    async def push(self) -> RawCommandResult:
        async with self._lock:
            return await self.client.run_async(["push"])

    async def sync_both_ways(
        self,
        on_pull: StepCallback | None = None,
        on_push: StepCallback | None = None,
        on_complete: Callable[[SyncResult], None] | None = None,
    ) -> SyncResult:
        """
        Pull, then push.

        Push runs even when pull fails. on_pull and on_push are called as
        each step finishes, on_complete once with the combined result.

        Returns:
            SyncResult with both step results
        """
        async with self._lock:
            pull = await self.client.run_async(["pull", "--no-edit"])
            self._notify(on_pull, pull)

            push = await self.client.run_async(["push"])
            self._notify(on_push, push)

        result = SyncResult(pull=pull, push=push)
        if result.failed:
            logger.warning("Sync finished with errors")
        else:
            logger.info("Sync complete")
        if on_complete is not None:
            on_complete(result)
        return result

    async def init_remote(
        self,
        url: str,
        on_complete: Callable[[SequenceResult], None] | None = None,
    ) -> SequenceResult:
        """
        Turn repo_root into a clone of ``url``.

        Runs init, branch rename, remote add, fetch and checkout in order.
        Every step runs even if an earlier one failed; the result reports the
        combined failure.

        Args:
            url: Remote repository URL
            on_complete: Called once with the SequenceResult

        Returns:
            SequenceResult whose text is the first failure's message, or the
            fetch output when all steps succeeded
        """
        branch = self.config.default_branch
        remote = self.config.remote_name
        sequence = [
            ["init"],
            ["branch", "-m", branch],
            ["remote", "add", remote, url],
            ["fetch"],
            ["checkout", branch],
        ]

        logger.info(f"Initializing repository in {self.repo_root} from {url}")
        steps = []
        async with self._lock:
            for args in sequence:
                steps.append(await self.client.run_async(args))

        failed_steps = [step for step in steps if step.failed]
        text = failed_steps[0].text if failed_steps else steps[3].text
        result = SequenceResult(steps=steps, text=text)
        self.clear()

        if on_complete is not None:
            on_complete(result)
        return result

    # Metadata

    def delete_repository_metadata(self) -> None:
        """
        Remove the .git directory, making repo_root a plain directory again.

        Irreversible. Read-only files (git marks pack files read-only) are
        made writable before removal.

        Raises:
            GitRepositoryNotFoundError: If there is no .git directory
        """
        if self.busy:
            raise RepositoryBusyError(
                "Cannot delete repository metadata while a git operation is in progress"
            )
        git_dir = self.git_dir
        if not git_dir.is_dir():
            raise GitRepositoryNotFoundError(f"No git repository found in {self.repo_root}")

        for root, dirs, files in os.walk(git_dir):
            for name in dirs + files:
                entry = Path(root) / name
                if entry.is_symlink():
                    continue
                entry.chmod(entry.stat().st_mode | stat.S_IWRITE)

        shutil.rmtree(git_dir)
        self.clear()
        logger.info(f"Deleted {git_dir}")
