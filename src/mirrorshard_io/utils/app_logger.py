"""Application logging for MirrorShard document I/O.

Everything logs under the ``mirrorshard_io`` package logger. The CLI attaches a
stderr handler for the user and a rotating file handler in the configuration
directory; library callers that never call :func:`setup_logging` get plain
propagation to the root logger.
"""

import logging
import sys
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path

from mirrorshard_io.constants import LOG_BACKUP_COUNT, LOG_MAX_BYTES, LOG_RETENTION_DAYS

PACKAGE_LOGGER = "mirrorshard_io"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_loggers: dict[str, logging.Logger] = {}
_configured: bool = False


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    from mirrorshard_io.utils.file_utils import ensure_directory

    ensure_directory(log_file.parent)
    handler = RotatingFileHandler(
        filename=log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(
    log_file: Path | None = None,
    *,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """Attach console and file handlers to the package logger.

    Calling it again replaces the previous handlers, so each CLI invocation
    starts from a clean state.

    Args:
        log_file: Rotating log file, or None for console output only
        console_level: Minimum level shown on stderr
        file_level: Minimum level written to the log file
    """
    global _configured

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    package_logger.handlers.clear()
    package_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        package_logger.addHandler(_file_handler(log_file, file_level))

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the (cached) logger for a module, usually ``__name__``."""
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def is_configured() -> bool:
    return _configured


def _log_files(log_file: Path) -> Iterator[Path]:
    """The active log file followed by its rotated backups (app.log.1, ...)."""
    yield log_file
    yield from sorted(log_file.parent.glob(f"{log_file.name}.*"))


def cleanup_old_logs(log_file: Path, retention_days: int = LOG_RETENTION_DAYS) -> None:
    """Delete the log file and rotated backups last modified before the cutoff.

    Args:
        log_file: Path to the active log file
        retention_days: Age in days after which a log file is removed
    """
    if not log_file.exists():
        return

    cutoff = datetime.now(UTC) - timedelta(days=retention_days)
    logger = get_logger(__name__)

    for candidate in _log_files(log_file):
        try:
            if not candidate.is_file():
                continue
            modified = datetime.fromtimestamp(candidate.stat().st_mtime, tz=UTC)
            if modified < cutoff:
                candidate.unlink()
                logger.info(f"Removed expired log file {candidate.name}")
        except OSError as e:
            logger.error(f"Could not expire log file {candidate}: {e}")
