# === FILE: spiderseek/logger.py ===
"""Logging for **spiderseek**.

One project logger, ``"Spiderseek"``, importable as::

    from spiderseek.logger import logger
    logger.info("Injection started")

Console output always; a rotating log file when ``log_file`` is given.
The CLI calls :func:`setup_logging` with ``--log-level`` / ``--log-file`` /
``--log-format``.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "Spiderseek"

_LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_FILE_BACKUPS: Final[int] = 3


def _build_handlers(log_file: str | Path | None) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=_LOG_FILE_MAX_BYTES,
                backupCount=_LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    return handlers


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Close the current handlers of the project logger and install fresh ones.

    Handlers bind to ``sys.stdout`` at call time, so calling this again after
    stdout was swapped (click's ``CliRunner``) points output at the new stream.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()

    formatter = logging.Formatter(log_format)
    for handler in _build_handlers(log_file):
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    lg.propagate = False
    return lg


logger: logging.Logger = setup_logging()

__all__ = ["logger", "setup_logging", "DEFAULT_FORMAT", "LOGGER_NAME"]
