"""Logging helpers shared by the devreport pipeline.

Every module logs through ``get_logger("<component>")`` so records land under
the ``devreport`` hierarchy. Degraded collectors log at WARNING, fatal steps at
ERROR and per-file scan decisions at DEBUG.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "devreport"

CONSOLE_FORMAT = "[devreport] %(levelname)s %(message)s"
VERBOSE_CONSOLE_FORMAT = "[devreport:%(component)s] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _ComponentFilter(logging.Filter):
    """Expose the logger name without the ``devreport.`` prefix as ``component``."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        prefix = f"{_LOGGER_NAME}."
        record.component = name[len(prefix):] if name.startswith(prefix) else "main"
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route devreport records to stderr and, optionally, to ``log_file``.

    Verbose mode lowers the threshold to DEBUG and tags console lines with the
    emitting component (``scanner``, ``collectors.lint``...). Calling this again
    replaces the previously installed handlers.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.addFilter(_ComponentFilter())
    console.setFormatter(logging.Formatter(VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
