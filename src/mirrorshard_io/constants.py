"""Application-wide constants and configuration values."""

from pathlib import Path
from typing import Final

# Exit Codes (0-49 reserved for application use)
EXIT_SUCCESS: Final[int] = 0
EXIT_GENERAL_ERROR: Final[int] = 1
EXIT_INVALID_ARGS: Final[int] = 2
EXIT_CONFIG_ERROR: Final[int] = 3
EXIT_FILE_ERROR: Final[int] = 10
EXIT_PERMISSION_ERROR: Final[int] = 11
EXIT_UNSUPPORTED_ENCODING: Final[int] = 14

# Default Paths
DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".mirrorshard"
DEFAULT_CONFIG_FILE: Final[str] = "config.json"
DEFAULT_LOG_FILE: Final[str] = "app.log"

# Byte encoding
UTF8_BOM: Final[bytes] = b"\xef\xbb\xbf"
UTF8_CODEC: Final[str] = "utf-8"
# Windows-31J; matches what editors and browsers label "Shift_JIS"
SHIFT_JIS_CODEC: Final[str] = "cp932"
SHIFT_JIS_ENCODE_ERRORS: Final[str] = "xmlcharrefreplace"

# Atomic write
DEFAULT_TEMP_SUFFIX: Final[str] = ".tmp"

# Concurrency Limits
DEFAULT_MAX_WORKERS: Final[int] = 4
MAX_WORKER_POOL_SIZE: Final[int] = 32

# Logging Configuration
LOG_MAX_BYTES: Final[int] = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT: Final[int] = 5
LOG_RETENTION_DAYS: Final[int] = 30
