"""Log routing for the ``rollcore`` package and the runner scripts.

Library modules only create ``logging.getLogger(__name__)`` loggers. The
scripts call :func:`setup_logging` once to decide where records go.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

PACKAGE_LOGGER = "rollcore"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: Union[int, str]) -> int:
    """Accept ``logging.DEBUG`` or a name such as ``"debug"``."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Send simulation records to ``stream`` (stdout) and, if given, ``log_file``.

    A second call replaces the handlers of the first, so a runner that is
    restarted in the same process prints every record once.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(level))

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers = [logging.StreamHandler(stream if stream is not None else sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Routing %s logs to %d handler(s)", PACKAGE_LOGGER, len(handlers))
    return logger
