"""
Decoder for text files of unknown byte encoding.

Classifies raw bytes as UTF-8 with a byte-order mark, UTF-8 without one, or
Shift_JIS, and rejects anything else rather than force-decoding with
replacement characters.
"""

import re
from pathlib import Path

from mirrorshard_io.constants import UTF8_BOM
from mirrorshard_io.core.errors import ReadFailureError, UnsupportedEncodingError
from mirrorshard_io.models.document import DecodedDocument, LineEnding, TextEncoding
from mirrorshard_io.utils.app_logger import get_logger

logger = get_logger(__name__)

UNSUPPORTED_ENCODING_MESSAGE = (
    "Unsupported encoding detected. Only UTF-8 and Shift_JIS are supported."
)

# cp932 maps the undefined single bytes 0xA0 and 0xFD-0xFF to U+F8F0-U+F8F3
# instead of failing; such input is not valid Shift_JIS.
CP932_UNDEFINED_BYTES = re.compile("[\uf8f0-\uf8f3]")


def detect_line_ending(text: str) -> LineEnding:
    """
    Classify the line-ending convention of decoded text.

    Any occurrence of CRLF marks the whole text as CRLF, even when most lines
    end in a bare LF. Mixed endings are reported, never rewritten.

    Args:
        text: Decoded text

    Returns:
        LineEnding.CRLF if the text contains "\\r\\n", LineEnding.LF otherwise
    """
    return LineEnding.CRLF if "\r\n" in text else LineEnding.LF


def _strict_decode(data: bytes, encoding: TextEncoding) -> str | None:
    """Decode without substitution; None when any byte sequence is invalid."""
    try:
        text = data.decode(encoding.codec, errors="strict")
    except UnicodeDecodeError:
        return None
    if encoding is TextEncoding.SHIFT_JIS and CP932_UNDEFINED_BYTES.search(text):
        return None
    return text


def _build(content: str, encoding: TextEncoding) -> DecodedDocument:
    return DecodedDocument(
        content=content,
        encoding=encoding,
        line_ending=detect_line_ending(content),
    )


def decode(data: bytes) -> DecodedDocument:
    """
    Decode raw file bytes into a document.

    Detection order:
    1. UTF-8 byte-order mark: the remainder must be valid UTF-8 (no fallback)
    2. Strict UTF-8 over the whole input
    3. Strict Shift_JIS over the whole input

    Args:
        data: Raw file contents

    Returns:
        DecodedDocument with the BOM stripped and line ending detected

    Raises:
        UnsupportedEncodingError: If no strict decode succeeds
    """
    if data.startswith(UTF8_BOM):
        content = _strict_decode(data[len(UTF8_BOM) :], TextEncoding.UTF8)
        if content is None:
            logger.warning("Byte-order-marked input is not valid UTF-8")
            raise UnsupportedEncodingError(UNSUPPORTED_ENCODING_MESSAGE)
        logger.debug(f"Decoded {len(data)} bytes as UTF-8 with BOM")
        return _build(content, TextEncoding.UTF8)

    for encoding in (TextEncoding.UTF8, TextEncoding.SHIFT_JIS):
        content = _strict_decode(data, encoding)
        if content is not None:
            logger.debug(f"Decoded {len(data)} bytes as {encoding.value}")
            return _build(content, encoding)

    logger.warning(f"Rejected {len(data)} bytes: neither UTF-8 nor Shift_JIS")
    raise UnsupportedEncodingError(UNSUPPORTED_ENCODING_MESSAGE)


def read_binary(path: str | Path) -> bytes:
    """
    Read the raw bytes of a file.

    Args:
        path: File to read

    Returns:
        File contents

    Raises:
        ReadFailureError: If the file cannot be read
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise ReadFailureError(str(e), path=path) from e


def read_document(path: str | Path) -> DecodedDocument:
    """
    Read a file from disk and decode it.

    Args:
        path: File to open

    Returns:
        Decoded document

    Raises:
        ReadFailureError: If the file cannot be read
        UnsupportedEncodingError: If the contents are not UTF-8 or Shift_JIS
    """
    path = Path(path)
    data = read_binary(path)
    try:
        document = decode(data)
    except UnsupportedEncodingError as e:
        raise UnsupportedEncodingError(f"{path}: {e}", path=path) from e
    logger.info(
        f"Opened {path} ({document.encoding.value}, {document.line_ending.value})"
    )
    return document
