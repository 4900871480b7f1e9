"""Git client abstraction for subprocess operations."""

import asyncio
import contextlib
import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from flowergit.exceptions import ProcessLaunchError, ProcessTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120.0
_READ_CHUNK_SIZE = 4096
_LINE_TERMINATORS = "\r\n"


@dataclass
class RawCommandResult:
    """Result of a git command execution.

    ``text`` is what callers display: stdout normally, stderr when git
    exited non-zero with an error message.
    """

    text: str
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    args: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """True if git exited non-zero."""
        return self.exit_code != 0


class GitClient(Protocol):
    """Protocol for git command execution."""

    def run(self, args: Sequence[str]) -> RawCommandResult:
        """
        Execute git and block until it exits.

        Args:
            args: Git arguments without the binary (e.g., ["status", "--short"])

        Returns:
            RawCommandResult with text and exit code
        """
        ...

    async def run_async(self, args: Sequence[str]) -> RawCommandResult:
        """
        Execute git without blocking the event loop.

        Args:
            args: Git arguments without the binary

        Returns:
            RawCommandResult with text and exit code
        """
        ...


def build_result(
    args: Sequence[str], exit_code: int, stdout: str, stderr: str
) -> RawCommandResult:
    """
    Combine captured streams into a RawCommandResult.

    Non-zero exit with stderr content is reported through the log and
    returned as text rather than raised.
    """
    stdout = stdout.rstrip(_LINE_TERMINATORS)
    stderr = stderr.rstrip(_LINE_TERMINATORS)

    if exit_code != 0 and stderr:
        logger.error(stderr)
        text = stderr
    elif not stdout and stderr and not stderr.startswith("warning:"):
        # pull/push write their summary to stderr even on success
        text = stderr
    else:
        text = stdout

    return RawCommandResult(
        text=text,
        exit_code=exit_code,
        stdout=stdout,
        stderr=stderr,
        args=list(args),
    )


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


async def _read_stream(stream: asyncio.StreamReader | None) -> bytes:
    """Drain a pipe fragment by fragment until EOF."""
    if stream is None:
        return b""
    fragments = []
    while True:
        chunk = await stream.read(_READ_CHUNK_SIZE)
        if not chunk:
            break
        fragments.append(chunk)
    return b"".join(fragments)


class SubprocessGitClient:
    """Git client implementation using subprocess."""

    def __init__(
        self,
        repo_root: Path,
        git_binary: str = "git",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize SubprocessGitClient.

        Args:
            repo_root: Working directory for every git invocation
            git_binary: Executable to run
            timeout: Seconds before a running command is killed
        """
        self.repo_root = Path(repo_root)
        self.git_binary = git_binary
        self.timeout = timeout

    def _command(self, args: Sequence[str]) -> list[str]:
        return [self.git_binary, *args]

    def run(self, args: Sequence[str]) -> RawCommandResult:
        """
        Execute git using subprocess.Popen.

        Args:
            args: Git arguments without the binary

        Returns:
            RawCommandResult with text and exit code

        Raises:
            ProcessLaunchError: If git could not be started
            ProcessTimeoutError: If git did not finish within the timeout
        """
        command = self._command(args)
        logger.debug(f"Running: {' '.join(command)}")

        try:
            process = subprocess.Popen(
                command,
                cwd=self.repo_root,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise ProcessLaunchError(args, str(e)) from e

        with process:
            try:
                stdout, stderr = process.communicate(timeout=self.timeout)
            except subprocess.TimeoutExpired as e:
                process.kill()
                process.communicate()
                logger.error(f"Killed git {' '.join(args)} after {self.timeout:g}s")
                raise ProcessTimeoutError(args, self.timeout) from e

        return build_result(args, process.returncode, _decode(stdout), _decode(stderr))

    async def run_async(self, args: Sequence[str]) -> RawCommandResult:
        """
        Execute git using asyncio subprocesses.

        stdout and stderr are drained by separate readers so neither pipe can
        fill up and stall the child.

        Args:
            args: Git arguments without the binary

        Returns:
            RawCommandResult with text and exit code

        Raises:
            ProcessLaunchError: If git could not be started
            ProcessTimeoutError: If git did not finish within the timeout
        """
        command = self._command(args)
        logger.debug(f"Running async: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=self.repo_root,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ProcessLaunchError(args, str(e)) from e

        try:
            stdout, stderr, exit_code = await asyncio.wait_for(
                asyncio.gather(
                    _read_stream(process.stdout),
                    _read_stream(process.stderr),
                    process.wait(),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            logger.error(f"Killed git {' '.join(args)} after {self.timeout:g}s")
            raise ProcessTimeoutError(args, self.timeout) from e

        return build_result(args, exit_code, _decode(stdout), _decode(stderr))
