"""Shared CLI context with lazy-initialized dependencies."""

from pathlib import Path

from flowergit.config import GitPanelConfig
from flowergit.git.repository import GitRepository


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        staged, working = ctx.repository.status()
    """

    def __init__(
        self, verbose: bool = False, quiet: bool = False, repo_root: Path | None = None
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            repo_root: Overrides the configured repository root
        """
        self.verbose = verbose
        self.quiet = quiet
        self.repo_root = repo_root

        # Lazy-loaded dependencies
        self._config: GitPanelConfig | None = None
        self._repository: GitRepository | None = None

    @property
    def config(self) -> GitPanelConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            config = GitPanelConfig.from_env()
            if self.repo_root is not None:
                config = config.model_copy(update={"repo_root": self.repo_root})
            self._config = config
        return self._config

    @property
    def repository(self) -> GitRepository:
        """Get git repository facade (lazy-loaded)."""
        if self._repository is None:
            self._repository = GitRepository(self.config)
        return self._repository


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
