"""Logging setup for the calpick command line."""

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV = "CALPICK_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    """Route calpick logs through rich.

    Args:
        verbose: Log at DEBUG instead of WARNING.

    Environment Variables:
        CALPICK_LOG_LEVEL: Overrides the level (DEBUG, INFO, WARNING, ERROR).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    env_level = os.getenv(LOG_LEVEL_ENV, "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = getattr(logging, env_level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
