"""Configuration for the git panel."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_TIMESTAMP_FORMAT = "{0.year}/{0.month}/{0.day} {0:%H:%M}"


class GitPanelConfig(BaseModel):
    """Git panel configuration with Pydantic validation."""

    # Repository
    repo_root: Path = Field(default=Path("."))
    git_binary: str = Field(default="git")
    command_timeout: float = Field(default=120.0, gt=0)

    # Upstream pair
    remote_name: str = Field(default="origin")
    default_branch: str = Field(default="main")

    # Queries
    recent_log_limit: int = Field(default=10, ge=1)
    conflict_commit_message: str = Field(default="Fixed Conflict")
    timestamp_format: str = Field(default=DEFAULT_TIMESTAMP_FORMAT)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="flowergit.log")

    @property
    def remote_branch(self) -> str:
        """Remote-tracking branch compared against, e.g. ``origin/main``."""
        return f"{self.remote_name}/{self.default_branch}"

    @classmethod
    def from_env(cls) -> "GitPanelConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Repository
        if "FLOWERGIT_REPO_ROOT" in os.environ:
            config_dict["repo_root"] = Path(os.environ["FLOWERGIT_REPO_ROOT"])
        if "FLOWERGIT_GIT_BINARY" in os.environ:
            config_dict["git_binary"] = os.environ["FLOWERGIT_GIT_BINARY"]
        if "FLOWERGIT_COMMAND_TIMEOUT" in os.environ:
            try:
                config_dict["command_timeout"] = float(
                    os.environ["FLOWERGIT_COMMAND_TIMEOUT"]
                )
            except ValueError:
                pass  # Keep default if invalid

        # Upstream pair
        if "FLOWERGIT_REMOTE" in os.environ:
            config_dict["remote_name"] = os.environ["FLOWERGIT_REMOTE"]
        if "FLOWERGIT_BRANCH" in os.environ:
            config_dict["default_branch"] = os.environ["FLOWERGIT_BRANCH"]

        # Queries
        if "FLOWERGIT_RECENT_LOG_LIMIT" in os.environ:
            try:
                config_dict["recent_log_limit"] = int(
                    os.environ["FLOWERGIT_RECENT_LOG_LIMIT"]
                )
            except ValueError:
                pass  # Keep default if invalid
        if "FLOWERGIT_TIMESTAMP_FORMAT" in os.environ:
            config_dict["timestamp_format"] = os.environ["FLOWERGIT_TIMESTAMP_FORMAT"]

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        return cls(**config_dict)
