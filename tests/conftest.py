import shutil
import subprocess
from collections import deque
from pathlib import Path

import pytest

from flowergit.config import GitPanelConfig
from flowergit.git.git_client import RawCommandResult
from flowergit.git.repository import GitRepository

requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git executable not available"
)


def make_result(text: str = "", exit_code: int = 0) -> RawCommandResult:
    """Build a RawCommandResult the way SubprocessGitClient would."""
    if exit_code != 0:
        return RawCommandResult(text=text, exit_code=exit_code, stderr=text)
    return RawCommandResult(text=text, exit_code=exit_code, stdout=text)


class FakeGitClient:
    """Scripted GitClient that records every argument vector.

    Responses are registered per argument prefix. A prefix with several
    queued results returns them in order and then keeps returning the last.
    Unmatched commands succeed with empty output.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self._responses: list[tuple[tuple[str, ...], deque]] = []

    def respond(self, prefix, *results: RawCommandResult) -> None:
        self._responses.insert(0, (tuple(prefix), deque(results)))

    def _lookup(self, args) -> RawCommandResult:
        args = list(args)
        self.calls.append(args)
        for prefix, queue in self._responses:
            if tuple(args[: len(prefix)]) == prefix:
                if len(queue) > 1:
                    return queue.popleft()
                return queue[0]
        return make_result()

    def run(self, args) -> RawCommandResult:
        return self._lookup(args)

    async def run_async(self, args) -> RawCommandResult:
        return self._lookup(args)

    def commands(self) -> list[str]:
        return [args[0] for args in self.calls]


@pytest.fixture
def fake_client():
    return FakeGitClient()


@pytest.fixture
def config(tmp_path):
    return GitPanelConfig(repo_root=tmp_path, log_dir=tmp_path / "logs")


@pytest.fixture
def repository(config, fake_client):
    return GitRepository(config, client=fake_client)


@pytest.fixture
def git_repo(tmp_path) -> Path:
    """Create a real git repository with one commit on main."""
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "checkout", "-b", "main"], cwd=repo_dir, check=True, capture_output=True
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"], cwd=repo_dir, check=True
    )
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"], cwd=repo_dir, check=True
    )
    subprocess.run(
        ["git", "config", "commit.gpgsign", "false"], cwd=repo_dir, check=True
    )
    (repo_dir / "README.md").write_text("# Test\n")
    subprocess.run(["git", "add", "README.md"], cwd=repo_dir, check=True)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"],
        cwd=repo_dir,
        check=True,
        capture_output=True,
    )
    return repo_dir
