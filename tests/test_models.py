"""Unit tests for Pydantic data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mirrorshard_io.models.config import AppConfig
from mirrorshard_io.models.document import DecodedDocument, FileEntry, LineEnding, TextEncoding


class TestTextEncoding:
    """Tests for the closed encoding enumeration."""

    @pytest.mark.parametrize("tag", ["UTF-8", "utf-8", "utf8", "UTF_8", " Utf-8 "])
    def test_parse_utf8(self, tag: str) -> None:
        assert TextEncoding.parse(tag) is TextEncoding.UTF8

    @pytest.mark.parametrize("tag", ["Shift_JIS", "shift-jis", "SHIFTJIS", "sjis", "cp932"])
    def test_parse_shift_jis(self, tag: str) -> None:
        assert TextEncoding.parse(tag) is TextEncoding.SHIFT_JIS

    @pytest.mark.parametrize("tag", ["latin-1", "utf-16", "EUC-JP", ""])
    def test_parse_rejects_unsupported(self, tag: str) -> None:
        """There is no implicit fallback to UTF-8."""
        with pytest.raises(ValueError, match="Unsupported encoding"):
            TextEncoding.parse(tag)

    def test_wire_values(self) -> None:
        assert TextEncoding.UTF8.value == "UTF-8"
        assert TextEncoding.SHIFT_JIS.value == "Shift_JIS"

    def test_codecs(self) -> None:
        assert TextEncoding.UTF8.codec == "utf-8"
        assert TextEncoding.SHIFT_JIS.codec == "cp932"

    def test_exactly_two_members(self) -> None:
        assert len(list(TextEncoding)) == 2


class TestLineEnding:
    """Tests for LineEnding."""

    def test_sequences(self) -> None:
        assert LineEnding.LF.sequence == "\n"
        assert LineEnding.CRLF.sequence == "\r\n"


class TestDecodedDocument:
    """Tests for DecodedDocument model."""

    def test_payload_uses_camel_case(self) -> None:
        document = DecodedDocument(
            content="a\r\nb", encoding=TextEncoding.SHIFT_JIS, line_ending=LineEnding.CRLF
        )

        assert document.to_payload() == {
            "content": "a\r\nb",
            "encoding": "Shift_JIS",
            "lineEnding": "CRLF",
        }

    def test_accepts_wire_values(self) -> None:
        document = DecodedDocument(content="x", encoding="UTF-8", line_ending="LF")

        assert document.encoding is TextEncoding.UTF8
        assert document.line_ending is LineEnding.LF

    def test_rejects_unknown_encoding(self) -> None:
        with pytest.raises(ValidationError):
            DecodedDocument(content="x", encoding="latin-1", line_ending="LF")

    def test_content_is_mutable(self) -> None:
        document = DecodedDocument(content="draft", encoding="UTF-8", line_ending="LF")
        document.content = "final"

        assert document.content == "final"


class TestFileEntry:
    """Tests for FileEntry model."""

    def test_defaults(self) -> None:
        entry = FileEntry(name="a.txt", path=Path("/tmp/a.txt"))

        assert entry.is_dir is False

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FileEntry(name="", path=Path("/tmp"))


class TestAppConfig:
    """Tests for AppConfig model."""

    def test_defaults(self, tmp_config_dir: Path) -> None:
        config = AppConfig(config_dir=tmp_config_dir)

        assert config.default_encoding is TextEncoding.UTF8
        assert config.temp_suffix == ".tmp"
        assert config.max_workers == 4
        assert config.include_hidden is False
        assert config.log_path == tmp_config_dir / "app.log"

    def test_sample_config(self, sample_app_config: AppConfig) -> None:
        assert sample_app_config.default_encoding is TextEncoding.SHIFT_JIS
        assert sample_app_config.log_path.name == "test.log"

    def test_loose_encoding_tag(self, tmp_config_dir: Path) -> None:
        config = AppConfig(config_dir=tmp_config_dir, default_encoding="sjis")

        assert config.default_encoding is TextEncoding.SHIFT_JIS

    def test_unsupported_encoding_rejected(self, tmp_config_dir: Path) -> None:
        with pytest.raises(ValidationError):
            AppConfig(config_dir=tmp_config_dir, default_encoding="latin-1")

    @pytest.mark.parametrize("workers", [0, 33])
    def test_worker_bounds(self, tmp_config_dir: Path, workers: int) -> None:
        with pytest.raises(ValidationError):
            AppConfig(config_dir=tmp_config_dir, max_workers=workers)

    @pytest.mark.parametrize("suffix", ["tmp", ".", "./x", ""])
    def test_invalid_temp_suffix(self, tmp_config_dir: Path, suffix: str) -> None:
        with pytest.raises(ValidationError):
            AppConfig(config_dir=tmp_config_dir, temp_suffix=suffix)
