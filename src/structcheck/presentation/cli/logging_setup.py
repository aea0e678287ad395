"""CLI logging: `structcheck.*` loggers rendered by rich on stderr."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "STRUCTCHECK_LOG_LEVEL"
ROOT_LOGGER = "structcheck"


def resolve_level(*, verbose: int = 0, quiet: bool = False) -> int:
    """Pick log level. Flags override STRUCTCHECK_LOG_LEVEL, default WARNING."""
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO

    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if raw:
        level = logging.getLevelName(raw)
        if isinstance(level, int):
            return level
    return logging.WARNING


def configure_logging(*, verbose: int = 0, quiet: bool = False) -> logging.Logger:
    """Attach a RichHandler to the `structcheck` logger (once).

    Report output goes to stdout, log records to stderr, so piping
    `--format json` stays machine-readable.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolve_level(verbose=verbose, quiet=quiet))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
