"""Tests for configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from flowergit.config import DEFAULT_TIMESTAMP_FORMAT, GitPanelConfig

ENV_VARS = [
    "FLOWERGIT_REPO_ROOT",
    "FLOWERGIT_GIT_BINARY",
    "FLOWERGIT_COMMAND_TIMEOUT",
    "FLOWERGIT_REMOTE",
    "FLOWERGIT_BRANCH",
    "FLOWERGIT_RECENT_LOG_LIMIT",
    "FLOWERGIT_TIMESTAMP_FORMAT",
    "LOG_DIR",
    "LOG_FILENAME",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_git_panel_config_defaults():
    """Test GitPanelConfig default values."""
    config = GitPanelConfig()
    assert config.repo_root == Path(".")
    assert config.git_binary == "git"
    assert config.command_timeout == 120.0
    assert config.remote_name == "origin"
    assert config.default_branch == "main"
    assert config.recent_log_limit == 10
    assert config.conflict_commit_message == "Fixed Conflict"
    assert config.timestamp_format == DEFAULT_TIMESTAMP_FORMAT


def test_remote_branch():
    config = GitPanelConfig(remote_name="upstream", default_branch="develop")
    assert config.remote_branch == "upstream/develop"


def test_git_panel_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("FLOWERGIT_REPO_ROOT", "/projects/game")
    monkeypatch.setenv("FLOWERGIT_GIT_BINARY", "/usr/local/bin/git")
    monkeypatch.setenv("FLOWERGIT_COMMAND_TIMEOUT", "30")
    monkeypatch.setenv("FLOWERGIT_REMOTE", "upstream")
    monkeypatch.setenv("FLOWERGIT_BRANCH", "develop")
    monkeypatch.setenv("FLOWERGIT_RECENT_LOG_LIMIT", "25")
    monkeypatch.setenv("FLOWERGIT_TIMESTAMP_FORMAT", "{0:%Y-%m-%d}")
    monkeypatch.setenv("LOG_DIR", "/var/log/flowergit")
    monkeypatch.setenv("LOG_FILENAME", "git.log")

    config = GitPanelConfig.from_env()
    assert config.repo_root == Path("/projects/game")
    assert config.git_binary == "/usr/local/bin/git"
    assert config.command_timeout == 30.0
    assert config.remote_branch == "upstream/develop"
    assert config.recent_log_limit == 25
    assert config.timestamp_format == "{0:%Y-%m-%d}"
    assert config.log_dir == Path("/var/log/flowergit")
    assert config.log_filename == "git.log"


def test_git_panel_config_invalid_numbers_keep_defaults(monkeypatch):
    """Test handling invalid numeric environment values."""
    monkeypatch.setenv("FLOWERGIT_COMMAND_TIMEOUT", "soon")
    monkeypatch.setenv("FLOWERGIT_RECENT_LOG_LIMIT", "invalid")

    config = GitPanelConfig.from_env()
    assert config.command_timeout == 120.0
    assert config.recent_log_limit == 10


def test_git_panel_config_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        GitPanelConfig(command_timeout=0)


def test_git_panel_config_rejects_zero_log_limit():
    with pytest.raises(ValidationError):
        GitPanelConfig(recent_log_limit=0)
