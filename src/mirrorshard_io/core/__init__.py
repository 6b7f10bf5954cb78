"""Core components for MirrorShard document I/O."""

from mirrorshard_io.core.decoder import decode, detect_line_ending, read_binary, read_document
from mirrorshard_io.core.errors import (
    DocumentIOError,
    ReadFailureError,
    RenameFailureError,
    UnsupportedEncodingError,
    WriteFailureError,
)
from mirrorshard_io.core.writer import (
    atomic_write_bytes,
    encode_content,
    temp_path_for,
    write_document,
)

__all__ = [
    "decode",
    "detect_line_ending",
    "read_binary",
    "read_document",
    "DocumentIOError",
    "ReadFailureError",
    "RenameFailureError",
    "UnsupportedEncodingError",
    "WriteFailureError",
    "atomic_write_bytes",
    "encode_content",
    "temp_path_for",
    "write_document",
]
