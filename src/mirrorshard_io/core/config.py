"""
Configuration manager for loading and saving application settings.

Handles config file I/O, value coercion, and default config creation.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mirrorshard_io.constants import DEFAULT_CONFIG_FILE
from mirrorshard_io.models.config import AppConfig
from mirrorshard_io.models.document import TextEncoding
from mirrorshard_io.utils.file_utils import write_json_file

BOOLEAN_KEYS = {"include_hidden"}
INTEGER_KEYS = {"max_workers", "log_retention_days"}


class ConfigManager:
    """Manages application configuration file."""

    def __init__(self, config_path: Path) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Path to config.json file or a directory containing it
        """
        if config_path.suffix != ".json":
            self.config_path = config_path / DEFAULT_CONFIG_FILE
        else:
            self.config_path = config_path
        self._config: AppConfig | None = None
        self._extras: dict[str, Any] = {}

    def load(self) -> AppConfig:
        """
        Load configuration from file, creating default if missing.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ValueError: If config file is unreadable, contains invalid JSON or
                invalid values
        """
        if not self.config_path.exists():
            return self._create_default_config()

        try:
            config_data = json.loads(self.config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {self.config_path}: {e}") from e
        if not isinstance(config_data, dict):
            raise ValueError("Invalid configuration: top-level JSON value must be an object")

        config_data["config_dir"] = str(self.config_path.parent)

        known_fields = set(AppConfig.model_fields.keys())
        self._extras = {k: v for k, v in config_data.items() if k not in known_fields}
        try:
            app_config = AppConfig(**{k: v for k, v in config_data.items() if k in known_fields})
        except ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}") from e
        self._config = app_config
        return app_config

    def save(self, config: AppConfig | None = None) -> None:
        """
        Save configuration to file.

        Args:
            config: Configuration object to save (uses last loaded if None)
        """
        if config is None:
            if self._config is None:
                self._config = self.load()
            config = self._config

        # config_dir is derived from the file location, never persisted
        config_dict = config.model_dump(mode="json", exclude={"config_dir"})
        write_json_file(self.config_path, {**config_dict, **self._extras})

    def _create_default_config(self) -> AppConfig:
        """
        Create default configuration file.

        Returns:
            AppConfig: Default configuration object
        """
        default_config = AppConfig(config_dir=self.config_path.parent)
        self.save(default_config)
        self._config = default_config
        return default_config

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value.

        Known keys are validated against AppConfig; unknown keys are kept as
        extras and persisted verbatim.

        Raises:
            ValueError: If the value is invalid for a known key
        """
        if self._config is None:
            self._config = self.load()

        if key not in AppConfig.model_fields or key == "config_dir":
            self._extras[key] = value
            return

        if key in BOOLEAN_KEYS:
            value = _coerce_bool(value)
        elif key in INTEGER_KEYS:
            value = int(value)
        elif key == "default_encoding" and isinstance(value, str):
            value = TextEncoding.parse(value)

        updated = {**self._config.model_dump(), key: value}
        try:
            self._config = AppConfig(**updated)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by key."""
        if self._config is None:
            self._config = self.load()

        if key in AppConfig.model_fields:
            value = getattr(self._config, key)
            return value.value if isinstance(value, TextEncoding) else value
        return self._extras.get(key)

    def to_dict(self) -> dict[str, Any]:
        """Get all configuration as a dictionary."""
        if self._config is None:
            self._config = self.load()

        result = self._config.model_dump(mode="json", exclude={"config_dir"})
        result.update(self._extras)
        return result

    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self._config = AppConfig(config_dir=self.config_path.parent)
        self._extras.clear()

    def reset_key(self, key: str) -> None:
        """Reset a specific key to its default value."""
        if self._config is None:
            self._config = self.load()

        if key in AppConfig.model_fields and key != "config_dir":
            default = AppConfig.model_fields[key].default
            setattr(self._config, key, default)
        elif key in self._extras:
            del self._extras[key]


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Expected a boolean value, got {value!r}")
