"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from mirrorshard_io.models.config import AppConfig
from mirrorshard_io.models.document import TextEncoding

KONNICHIWA = "こんにちは"


@pytest.fixture
def tmp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary configuration directory for testing.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to temporary config directory
    """
    config_dir = tmp_path / ".mirrorshard-test"
    config_dir.mkdir(mode=0o700)
    return config_dir


@pytest.fixture
def sample_app_config(tmp_config_dir: Path) -> AppConfig:
    """Create a sample application configuration for testing."""
    return AppConfig(
        config_dir=tmp_config_dir,
        log_file="test.log",
        default_encoding=TextEncoding.SHIFT_JIS,
        max_workers=2,
    )


@pytest.fixture
def sjis_bytes() -> bytes:
    """Shift_JIS bytes for "こんにちは"; not valid UTF-8."""
    return b"\x82\xb1\x82\xf1\x82\xc9\x82\xbf\x82\xcd"


@pytest.fixture
def docs_dir(tmp_path: Path, sjis_bytes: bytes) -> Path:
    """Directory holding one file of each supported encoding plus one undecodable file."""
    directory = tmp_path / "docs"
    directory.mkdir()
    (directory / "bom.txt").write_bytes(b"\xef\xbb\xbfhello")
    (directory / "plain.txt").write_bytes("日本語\r\nテキスト".encode("utf-8"))
    (directory / "legacy.txt").write_bytes(sjis_bytes)
    (directory / "broken.bin").write_bytes(b"\x81\x20\xff")
    (directory / ".hidden").write_bytes(b"secret")
    (directory / "chapters").mkdir()
    return directory


@pytest.fixture
def mock_logger(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str]]:
    """Mock logger to capture log messages during tests.

    Args:
        monkeypatch: Pytest monkeypatch fixture

    Returns:
        List that accumulates (level, message) tuples
    """
    log_messages: list[tuple[str, str]] = []

    class MockLogger:
        def debug(self, msg: str) -> None:
            log_messages.append(("DEBUG", msg))

        def info(self, msg: str) -> None:
            log_messages.append(("INFO", msg))

        def warning(self, msg: str) -> None:
            log_messages.append(("WARNING", msg))

        def error(self, msg: str) -> None:
            log_messages.append(("ERROR", msg))

    def mock_get_logger(name: str) -> MockLogger:
        return MockLogger()

    monkeypatch.setattr("mirrorshard_io.utils.app_logger.get_logger", mock_get_logger)

    return log_messages


@pytest.fixture
def cleanup_loggers() -> Generator[None, None, None]:
    """Clean up logger state after tests.

    Yields:
        None (runs test, then cleans up)
    """
    yield

    import logging

    from mirrorshard_io.utils import app_logger

    app_logger._loggers.clear()
    app_logger._configured = False

    logger = logging.getLogger(app_logger.PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
