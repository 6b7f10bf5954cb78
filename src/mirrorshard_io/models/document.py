"""Document data models."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from mirrorshard_io.constants import SHIFT_JIS_CODEC, UTF8_CODEC


class TextEncoding(str, Enum):
    """Byte encodings a document can be decoded from and written back to."""

    UTF8 = "UTF-8"
    SHIFT_JIS = "Shift_JIS"

    @property
    def codec(self) -> str:
        """Python codec name used to transcode this encoding."""
        if self is TextEncoding.SHIFT_JIS:
            return SHIFT_JIS_CODEC
        return UTF8_CODEC

    @classmethod
    def parse(cls, tag: str) -> "TextEncoding":
        """Resolve a user-facing encoding tag.

        Matching ignores case, hyphens and underscores, so ``utf8``, ``UTF-8``,
        ``shift-jis`` and ``Shift_JIS`` are all accepted.

        Args:
            tag: Encoding tag to resolve

        Returns:
            Matching TextEncoding member

        Raises:
            ValueError: If the tag names an unsupported encoding
        """
        key = tag.strip().lower().replace("-", "").replace("_", "")
        aliases = {
            "utf8": cls.UTF8,
            "shiftjis": cls.SHIFT_JIS,
            "sjis": cls.SHIFT_JIS,
            "cp932": cls.SHIFT_JIS,
        }
        if key not in aliases:
            supported = ", ".join(member.value for member in cls)
            raise ValueError(f"Unsupported encoding '{tag}'. Supported encodings: {supported}")
        return aliases[key]


class LineEnding(str, Enum):
    """Line-ending convention detected in decoded text."""

    LF = "LF"
    CRLF = "CRLF"

    @property
    def sequence(self) -> str:
        """Literal newline sequence for this convention."""
        return "\r\n" if self is LineEnding.CRLF else "\n"


class DecodedDocument(BaseModel):
    """Text recovered from a file together with what was detected about it.

    Attributes:
        content: Decoded text with any byte-order mark stripped
        encoding: Encoding the bytes were decoded with
        line_ending: Line-ending convention present in the content
    """

    content: str = Field(..., description="Decoded text content")
    encoding: TextEncoding = Field(..., description="Detected source encoding")
    line_ending: LineEnding = Field(..., description="Detected line-ending convention")

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase shape exchanged with the editor front end."""
        return {
            "content": self.content,
            "encoding": self.encoding.value,
            "lineEnding": self.line_ending.value,
        }

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "content": "hello",
                    "encoding": "UTF-8",
                    "line_ending": "LF",
                }
            ]
        }
    }


class FileEntry(BaseModel):
    """A single directory-listing entry.

    Attributes:
        name: Entry file name
        path: Full path to the entry
        is_dir: Whether the entry is a directory
    """

    name: str = Field(..., min_length=1, description="Entry file name")
    path: Path = Field(..., description="Full path to the entry")
    is_dir: bool = Field(default=False, description="Whether the entry is a directory")
