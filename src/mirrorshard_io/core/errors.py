"""Exceptions raised by document decoding and persistence."""

from pathlib import Path


class DocumentIOError(Exception):
    """Base class for document read/write failures.

    Attributes:
        path: File the failed operation targeted, when known
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnsupportedEncodingError(DocumentIOError):
    """Bytes are neither valid UTF-8 nor strictly decodable Shift_JIS."""


class ReadFailureError(DocumentIOError):
    """The file could not be read from disk."""


class WriteFailureError(DocumentIOError):
    """The temporary file could not be written; the target is untouched."""


class RenameFailureError(DocumentIOError):
    """The temporary file could not be renamed onto the target; the target is untouched."""
