"""Core utilities for MirrorShard document I/O."""

from mirrorshard_io.utils.app_logger import get_logger, setup_logging
from mirrorshard_io.utils.file_utils import (
    ensure_directory,
    list_directory,
    write_json_file,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "ensure_directory",
    "list_directory",
    "write_json_file",
]
