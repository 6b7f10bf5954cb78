"""File utility functions for configuration storage and directory browsing."""

import json
import sys
from pathlib import Path
from typing import Any, NoReturn

from mirrorshard_io.constants import EXIT_FILE_ERROR, EXIT_PERMISSION_ERROR
from mirrorshard_io.core.errors import DocumentIOError, ReadFailureError
from mirrorshard_io.models.document import FileEntry


def _exit_with(code: int, message: str) -> NoReturn:
    # Imported lazily: app_logger depends on this module for ensure_directory
    from mirrorshard_io.utils.app_logger import get_logger

    get_logger(__name__).error(message)
    sys.exit(code)


def ensure_directory(path: Path, *, mode: int = 0o700) -> None:
    """Create ``path`` and its parents if needed.

    Used for the configuration directory and the log directory, which hold
    per-user state and are created owner-only.

    Raises:
        SystemExit: EXIT_PERMISSION_ERROR or EXIT_FILE_ERROR if creation fails
    """
    try:
        path.mkdir(mode=mode, parents=True, exist_ok=True)
    except PermissionError as e:
        _exit_with(EXIT_PERMISSION_ERROR, f"Permission denied creating directory {path}: {e}")
    except OSError as e:
        _exit_with(EXIT_FILE_ERROR, f"Failed to create directory {path}: {e}")


def write_json_file(path: Path, data: dict[str, Any]) -> None:
    """Write data to a JSON file atomically.

    The file is written through the atomic writer, so an interrupted save
    leaves the previous file in place. Non-ASCII values (Japanese font names,
    recent-file paths) are written as-is.

    Args:
        path: Path to the JSON file to write
        data: Data to serialize to JSON

    Raises:
        SystemExit: If file cannot be written
    """
    from mirrorshard_io.core.writer import atomic_write_bytes

    ensure_directory(path.parent)
    payload = json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")

    try:
        atomic_write_bytes(path, payload)
    except DocumentIOError as e:
        if isinstance(e.__cause__, PermissionError):
            _exit_with(EXIT_PERMISSION_ERROR, f"Permission denied writing {path}: {e}")
        _exit_with(EXIT_FILE_ERROR, f"Failed to write {path}: {e}")


def list_directory(dir_path: str | Path, *, include_hidden: bool = False) -> list[FileEntry]:
    """List the entries of a directory for the file browser.

    Entries whose names start with a dot (.git, .vscode, ...) are skipped
    unless ``include_hidden`` is set. Directories sort before files, then
    entries sort case-insensitively by name.

    Args:
        dir_path: Directory to list
        include_hidden: Include dot-entries

    Returns:
        Directory entries

    Raises:
        ReadFailureError: If the directory cannot be read
    """
    directory = Path(dir_path)
    try:
        children = list(directory.iterdir())
    except OSError as e:
        raise ReadFailureError(str(e), path=directory) from e

    entries = [
        FileEntry(name=child.name, path=child, is_dir=child.is_dir())
        for child in children
        if include_hidden or not child.name.startswith(".")
    ]
    entries.sort(key=lambda entry: (not entry.is_dir, entry.name.lower()))
    return entries
