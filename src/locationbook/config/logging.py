"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Configure the root logger for CLI runs.

    Quiet by default so command output stays readable; ``--verbose`` passes DEBUG.
    ``force=True`` replaces handlers installed by an earlier call.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    # keep request logs out of --verbose output
    logging.getLogger("httpx").setLevel(max(level, logging.INFO))
