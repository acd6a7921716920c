"""Console logging for statement runs.

Everything logs under the ``account_statements`` logger tree; library modules
only call :func:`get_logger` and never attach handlers. The CLI calls
:func:`configure_logging` once, which sends records to stderr as
``LEVEL logger: message`` lines.

What shows at which level:

- INFO: run progress through :func:`progress` (accounts and transactions
  loaded, statements written).
- WARNING: transactions that match no ledger account (a count).
- DEBUG: per-line detail (dropped ledger lines, blank or unknown log entries).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER = "account_statements"
PROGRESS_LOGGER = f"{PACKAGE_LOGGER}.progress"
LOG_LEVEL_ENV = "ACCOUNT_STATEMENTS_LOG_LEVEL"

_FORMAT = "%(levelname)s %(name)s: %(message)s"
_CONFIGURED = False


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    # Unrecognized names fall through to the env var, then INFO.
    names = logging.getLevelNamesMapping()
    for candidate in (level, os.getenv(LOG_LEVEL_ENV)):
        if candidate and candidate.strip().upper() in names:
            return names[candidate.strip().upper()]
    return logging.INFO


def configure_logging(level: int | str | None = None, *, stream: IO[str] | None = None) -> int:
    """Attach the console handler to the package logger and return the level in effect.

    Only the first call per process has an effect; later calls return the
    already configured level.
    """

    global _CONFIGURED
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _CONFIGURED:
        return logger.level

    for h in list(logger.handlers):
        logger.removeHandler(h)

    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False

    _CONFIGURED = True
    return resolved


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a package module (pass ``__name__``)."""

    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


def progress(message: str, *args: object) -> None:
    """Log one run-progress line at INFO."""

    get_logger(PROGRESS_LOGGER).info(message, *args)


__all__ = ["configure_logging", "get_logger", "progress"]
