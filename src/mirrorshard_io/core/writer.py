"""
Atomic writer for edited documents.

Content is encoded, written in full to a sibling temporary file and then
renamed over the target, so the target path only ever holds the old bytes or
the complete new bytes.
"""

import os
from pathlib import Path

from mirrorshard_io.constants import DEFAULT_TEMP_SUFFIX, SHIFT_JIS_ENCODE_ERRORS
from mirrorshard_io.core.errors import RenameFailureError, WriteFailureError
from mirrorshard_io.models.document import TextEncoding
from mirrorshard_io.utils.app_logger import get_logger

logger = get_logger(__name__)


def encode_content(content: str, encoding: TextEncoding) -> bytes:
    """
    Encode document text for writing.

    UTF-8 is lossless and written without a byte-order mark. Shift_JIS is
    best-effort: characters with no Shift_JIS mapping are written as numeric
    character references (``&#12345;``) instead of raising.

    Args:
        content: Text to encode
        encoding: Target encoding

    Returns:
        Encoded bytes
    """
    if encoding is TextEncoding.SHIFT_JIS:
        try:
            return content.encode(encoding.codec)
        except UnicodeEncodeError as e:
            logger.warning(
                f"Text contains characters not representable in Shift_JIS "
                f"(first at offset {e.start}); substituting character references"
            )
            return content.encode(encoding.codec, errors=SHIFT_JIS_ENCODE_ERRORS)
    return content.encode(encoding.codec)


def temp_path_for(path: Path, suffix: str = DEFAULT_TEMP_SUFFIX) -> Path:
    """
    Derive the sibling temporary path used while writing ``path``.

    The suffix is appended to the full file name (``notes.md`` ->
    ``notes.md.tmp``), so targets that differ only in extension never share a
    temporary file and a save never touches another document's ``.tmp`` twin.

    Args:
        path: Target file path
        suffix: Temporary suffix including the leading dot

    Returns:
        Temporary file path in the same directory as ``path``
    """
    return path.with_name(path.name + suffix)


def _discard(temp_path: Path) -> None:
    """Best-effort removal of a leftover temporary file."""
    try:
        temp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug(f"Could not remove temporary file {temp_path}: {e}")


def atomic_write_bytes(
    path: str | Path, data: bytes, *, temp_suffix: str = DEFAULT_TEMP_SUFFIX
) -> None:
    """
    Atomically replace the contents of ``path`` with ``data``.

    Args:
        path: Target file path
        data: Complete new file contents
        temp_suffix: Suffix of the sibling temporary file

    Raises:
        WriteFailureError: If the temporary file cannot be written
        RenameFailureError: If the temporary file cannot be moved onto the target
    """
    path = Path(path)
    temp_path = temp_path_for(path, temp_suffix)

    try:
        with temp_path.open("wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        logger.error(f"Failed to write temporary file {temp_path}: {e}")
        _discard(temp_path)
        raise WriteFailureError(str(e), path=path) from e

    try:
        os.replace(temp_path, path)
    except OSError as e:
        logger.error(f"Failed to replace {path}: {e}")
        _discard(temp_path)
        raise RenameFailureError(str(e), path=path) from e


def write_document(
    path: str | Path,
    content: str,
    encoding: TextEncoding,
    *,
    temp_suffix: str = DEFAULT_TEMP_SUFFIX,
) -> None:
    """
    Encode ``content`` and persist it to ``path`` atomically.

    The encoding is taken as given and is not re-detected; callers pass the
    encoding the file was opened with unless the user chose another.

    Args:
        path: Target file path
        content: Document text
        encoding: Encoding to write with
        temp_suffix: Suffix of the sibling temporary file

    Raises:
        WriteFailureError: If the temporary file cannot be written
        RenameFailureError: If the temporary file cannot be moved onto the target
    """
    data = encode_content(content, encoding)
    atomic_write_bytes(path, data, temp_suffix=temp_suffix)
    logger.info(f"Saved {path} ({encoding.value}, {len(data)} bytes)")
