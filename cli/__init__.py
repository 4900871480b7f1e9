"""CLI package for the FlowerGit panel."""

import logging
import sys

from flowergit.config import GitPanelConfig

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    # git stderr on a failed command is logged as ERROR, skipped lines as WARNING
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: GitPanelConfig | None = None
) -> None:
    """Send every record to the log file and the important ones to stderr.

    Args:
        verbose: If True, show INFO records on the console
        quiet: If True, show only ERROR records on the console
        config: GitPanelConfig providing log_dir and log_filename
    """
    if config is None:
        config = GitPanelConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Event loop debug chatter is not useful in the panel log
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
