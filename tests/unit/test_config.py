"""
Unit tests for ConfigManager.

Tests config file loading, default creation, value coercion, and persistence.
"""

import json
from pathlib import Path

import pytest

from mirrorshard_io.core.config import ConfigManager
from mirrorshard_io.models.config import AppConfig
from mirrorshard_io.models.document import TextEncoding


class TestConfigLoad:
    """Test ConfigManager.load() behavior."""

    def test_load_creates_default_config_if_missing(self, tmp_path: Path) -> None:
        """Should create default config if file missing."""
        config_dir = tmp_path / "config"
        config_path = config_dir / "config.json"
        manager = ConfigManager(config_path)

        config = manager.load()

        assert config_path.exists()
        assert isinstance(config, AppConfig)
        assert config.config_dir == config_dir
        assert config.default_encoding is TextEncoding.UTF8
        assert config.max_workers == 4

    def test_accepts_directory(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path / "cfg")

        assert manager.config_path == tmp_path / "cfg" / "config.json"

    def test_load_reads_existing_config(self, tmp_path: Path) -> None:
        """Should load config from existing file."""
        config_dir = tmp_path / "config"
        config_path = config_dir / "config.json"
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(
            json.dumps({"default_encoding": "Shift_JIS", "max_workers": 8}), encoding="utf-8"
        )

        config = ConfigManager(config_path).load()

        assert config.config_dir == config_dir
        assert config.default_encoding is TextEncoding.SHIFT_JIS
        assert config.max_workers == 8

    def test_load_rejects_invalid_json(self, tmp_path: Path) -> None:
        """Should raise ValueError for invalid JSON."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{ invalid json }", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            ConfigManager(config_path).load()

    def test_load_rejects_invalid_values(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"default_encoding": "latin-1"}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(config_path).load()

    def test_load_rejects_non_object(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(config_path).load()

    def test_load_unreadable_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Filesystem errors surface as ValueError, like malformed content."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{}", encoding="utf-8")

        def _raise_read(self: Path, *args: object, **kwargs: object) -> str:
            raise PermissionError("locked by another process")

        monkeypatch.setattr(Path, "read_text", _raise_read)

        with pytest.raises(ValueError, match="Cannot read config file") as exc_info:
            ConfigManager(config_path).load()

        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_unknown_keys_preserved(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"editor.font": "Noto Serif JP"}), encoding="utf-8")

        manager = ConfigManager(config_path)
        manager.load()
        manager.save()

        saved = json.loads(config_path.read_text(encoding="utf-8"))
        assert saved["editor.font"] == "Noto Serif JP"


class TestConfigSave:
    """Test ConfigManager.save() behavior."""

    def test_save_writes_config(self, tmp_path: Path) -> None:
        """Should write config to file."""
        config_dir = tmp_path / "config"
        config_path = config_dir / "config.json"
        manager = ConfigManager(config_path)

        manager.save(
            AppConfig(config_dir=config_dir, default_encoding=TextEncoding.SHIFT_JIS, max_workers=2)
        )

        saved_data = json.loads(config_path.read_text(encoding="utf-8"))
        assert saved_data["default_encoding"] == "Shift_JIS"
        assert saved_data["max_workers"] == 2
        assert "config_dir" not in saved_data

    def test_save_overwrites_existing_config(self, tmp_path: Path) -> None:
        """Should overwrite existing config file."""
        config_dir = tmp_path / "config"
        config_path = config_dir / "config.json"
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text('{"old": "data"}', encoding="utf-8")

        ConfigManager(config_path).save(AppConfig(config_dir=config_dir))

        saved_data = json.loads(config_path.read_text(encoding="utf-8"))
        assert "old" not in saved_data
        assert not (config_dir / "config.json.tmp").exists()


class TestConfigKeys:
    """Test get/set/reset."""

    def test_set_and_get_encoding(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path)

        manager.set("default_encoding", "sjis")

        assert manager.get("default_encoding") == "Shift_JIS"

    def test_set_coerces_types(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path)

        manager.set("max_workers", "6")
        manager.set("include_hidden", "yes")

        assert manager.get("max_workers") == 6
        assert manager.get("include_hidden") is True

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("max_workers", "0"),
            ("max_workers", "many"),
            ("include_hidden", "maybe"),
            ("temp_suffix", "tmp"),
            ("default_encoding", "utf-16"),
        ],
    )
    def test_set_rejects_invalid_values(self, tmp_path: Path, key: str, value: str) -> None:
        manager = ConfigManager(tmp_path)

        with pytest.raises(ValueError):
            manager.set(key, value)

    def test_set_unknown_key_is_extra(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path)

        manager.set("theme", "dark")

        assert manager.get("theme") == "dark"
        assert manager.to_dict()["theme"] == "dark"

    def test_get_missing_key(self, tmp_path: Path) -> None:
        assert ConfigManager(tmp_path).get("nope") is None

    def test_set_persists_after_save(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path)
        manager.set("default_encoding", "Shift_JIS")
        manager.save()

        assert ConfigManager(tmp_path).get("default_encoding") == "Shift_JIS"

    def test_reset_key(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path)
        manager.set("max_workers", 10)

        manager.reset_key("max_workers")

        assert manager.get("max_workers") == 4

    def test_reset_to_defaults_clears_extras(self, tmp_path: Path) -> None:
        manager = ConfigManager(tmp_path)
        manager.set("theme", "dark")
        manager.set("default_encoding", "Shift_JIS")

        manager.reset_to_defaults()

        assert manager.get("theme") is None
        assert manager.get("default_encoding") == "UTF-8"

    def test_to_dict_excludes_config_dir(self, tmp_path: Path) -> None:
        result = ConfigManager(tmp_path).to_dict()

        assert "config_dir" not in result
        assert result["temp_suffix"] == ".tmp"
