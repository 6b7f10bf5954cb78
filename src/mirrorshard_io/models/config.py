"""Configuration data models."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from mirrorshard_io.constants import (
    DEFAULT_LOG_FILE,
    DEFAULT_MAX_WORKERS,
    DEFAULT_TEMP_SUFFIX,
    LOG_RETENTION_DAYS,
    MAX_WORKER_POOL_SIZE,
)
from mirrorshard_io.models.document import TextEncoding


class AppConfig(BaseModel):
    """Application-wide configuration.

    Attributes:
        config_dir: Directory for configuration files
        log_file: Filename for application logs
        default_encoding: Encoding used when saving a file that has no prior encoding
        temp_suffix: Suffix of the sibling temporary file used by atomic writes
        max_workers: Worker pool size for batch document loading
        include_hidden: Whether directory listings include dot-entries
        log_retention_days: Days to keep application logs
    """

    config_dir: Path = Field(..., description="Directory for configuration files")
    log_file: str = Field(default=DEFAULT_LOG_FILE, description="Filename for application logs")
    default_encoding: TextEncoding = Field(
        default=TextEncoding.UTF8, description="Encoding for files without a detected encoding"
    )
    temp_suffix: str = Field(
        default=DEFAULT_TEMP_SUFFIX, description="Suffix of temporary files used by atomic writes"
    )
    max_workers: int = Field(
        default=DEFAULT_MAX_WORKERS,
        ge=1,
        le=MAX_WORKER_POOL_SIZE,
        description="Worker pool size for batch loading",
    )
    include_hidden: bool = Field(default=False, description="List dot-entries in directories")
    log_retention_days: int = Field(
        default=LOG_RETENTION_DAYS, ge=1, description="Days to keep application logs"
    )

    @field_validator("default_encoding", mode="before")
    @classmethod
    def parse_encoding(cls, v: object) -> object:
        """Accept loose encoding tags such as 'utf8' or 'shift-jis'."""
        if isinstance(v, str) and not isinstance(v, TextEncoding):
            return TextEncoding.parse(v)
        return v

    @field_validator("temp_suffix")
    @classmethod
    def validate_temp_suffix(cls, v: str) -> str:
        """Temp suffix must be a single dotted extension."""
        if not v.startswith(".") or len(v) < 2 or "/" in v or "\\" in v:
            raise ValueError("temp_suffix must look like '.tmp'")
        return v

    @property
    def log_path(self) -> Path:
        """Get full path to log file."""
        return self.config_dir / self.log_file

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "config_dir": "/home/user/.mirrorshard",
                    "log_file": "app.log",
                    "default_encoding": "UTF-8",
                    "temp_suffix": ".tmp",
                    "max_workers": 4,
                    "include_hidden": False,
                    "log_retention_days": 30,
                }
            ]
        }
    }
