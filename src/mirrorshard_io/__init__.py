"""MirrorShard document I/O.

Persistence layer for the MirrorShard text editor: detects the byte encoding
and line-ending convention of text files (UTF-8 with or without BOM, or
Shift_JIS) and writes edits back to disk atomically.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
