"""Data models for MirrorShard document I/O."""

from mirrorshard_io.models.config import AppConfig
from mirrorshard_io.models.document import DecodedDocument, FileEntry, LineEnding, TextEncoding

__all__ = [
    "AppConfig",
    "DecodedDocument",
    "FileEntry",
    "LineEnding",
    "TextEncoding",
]
