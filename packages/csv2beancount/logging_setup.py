"""Logging for ``csv2beancount``.

Modules log through ``get_logger("csv2beancount.<module>")`` and never attach
handlers. The CLI calls ``configure_logging`` once, which sends the
``csv2beancount`` logger to stderr; stdout is reserved for rendered entries.

``TRACE`` (5) sits below ``DEBUG`` and carries per-pattern rule checks and
skipped CSV records.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_LEVEL_ENV = "CSV2BEANCOUNT_LOG_LEVEL"

_PKG_LOGGER_NAME = "csv2beancount"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        if name == "TRACE":
            return TRACE
        numeric = getattr(logging, name, None)
        if isinstance(numeric, int):
            return numeric
    env_val = os.getenv(LOG_LEVEL_ENV)
    if env_val:
        return _parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Attach one stream handler to the package logger; later calls are no-ops.

    ``level`` accepts a number or a level name including ``"TRACE"``. Without
    one, ``CSV2BEANCOUNT_LOG_LEVEL`` is consulted, then WARNING is used.
    ``stream`` defaults to ``sys.stderr``.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``.

    Until ``configure_logging`` runs, the package logger holds a
    ``NullHandler`` so library use stays quiet.
    """

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["LOG_LEVEL_ENV", "TRACE", "configure_logging", "get_logger"]
