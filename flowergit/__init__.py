"""Git core for the FlowerGit panel: run git, parse its output, classify status."""

from flowergit.config import GitPanelConfig
from flowergit.git.repository import GitRepository

__all__ = ["GitPanelConfig", "GitRepository"]
