"""
Logging configuration — console and optional file output for go-updater.

Called once at startup by main.py.  Modules log through
``logging.getLogger(__name__)``, i.e. below the ``goupdater`` logger,
which is the only logger configured here.

Console lines follow the CLI's own output so that log records and
``click.echo`` messages read alike:

    WARNING   [go-updater][WARN] system-wide PATH update failed: ...
    INFO      12:01:02 [go-updater] execution.download: Downloaded ...
    DEBUG     12:01:02 DEBUG [go-updater] execution.download:97 Downloaded ...

Level precedence:  CLI flag  >  GOUP_LOG_LEVEL  >  WARNING.
GOUP_LOG_FILE / GOUP_LOG_FILE_LEVEL add a detailed file log.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "goupdater"

_PREFIX = "[go-updater]"
_LEVEL_TAGS = {logging.WARNING: "[WARN]", logging.ERROR: "[ERROR]", logging.CRITICAL: "[ERROR]"}

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


class LogFileError(OSError):
    """The requested log file cannot be opened."""


class ConsoleFormatter(logging.Formatter):
    """``[go-updater]``-prefixed console lines; detail grows with verbosity."""

    def __init__(self, verbosity: int = logging.WARNING) -> None:
        super().__init__(datefmt="%H:%M:%S")
        self.verbosity = verbosity

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        if self.verbosity > logging.INFO:
            tag = _LEVEL_TAGS.get(record.levelno, "")
            return f"{_PREFIX}{tag} {message}"

        source = _short_name(record.name)
        stamp = self.formatTime(record, self.datefmt)
        if self.verbosity <= logging.DEBUG:
            return f"{stamp} {record.levelname} {_PREFIX} {source}:{record.lineno} {message}"
        return f"{stamp} {_PREFIX} {source}: {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Configure the ``goupdater`` logger for this process.

    Safe to call more than once; handlers from a previous call are
    replaced.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional log file path (``~`` is expanded).
        log_file_level: File level; defaults to ``level``.

    Returns:
        The configured package logger.

    Raises:
        LogFileError: ``log_file`` cannot be opened for appending.
    """
    console_level = _parse_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(ConsoleFormatter(console_level))
    logger.addHandler(console)

    effective_level = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        path = Path(log_file).expanduser()
        try:
            fh = logging.FileHandler(path, encoding="utf-8")
        except OSError as e:
            raise LogFileError(f"cannot open log file {path}: {e.strerror or e}") from e
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        logger.addHandler(fh)
        effective_level = min(effective_level, file_level)

    logger.setLevel(effective_level)
    logging.raiseExceptions = False
    return logger


def _short_name(name: str) -> str:
    """``goupdater.core.services.go_install.execution.download`` → ``execution.download``."""
    parts = name.split(".")
    return ".".join(parts[-2:]) if len(parts) > 2 else name


def _parse_level(level: str | None) -> int:
    """Level name → numeric level; unknown names fall back to WARNING."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.strip().upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
