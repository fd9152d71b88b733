"""Tests for the configuration manager."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from locize_sync.config.manager import API_KEY_ENV_VAR, ConfigManager
from locize_sync.config.schema import LocizeSyncConfig
from locize_sync.utils.core.exceptions import ConfigurationError


def _write(path: Path, content: str) -> Path:
    _ = path.write_text(content, encoding="utf-8")
    return path


class TestLoadConfig:
    """Test cases for ConfigManager.load_config."""

    def test_loads_valid_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "locize-sync.yml",
            """
locize:
  project_id: proj-123
  version: production
find_keys:
  functions: [t, i18n.t]
""",
        )

        config = ConfigManager.load_config(path, environ={})

        assert config.locize.project_id == "proj-123"
        assert config.locize.version == "production"
        assert config.find_keys.functions == ["t", "i18n.t"]

    def test_environment_api_key_overrides_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "c.yml", "locize:\n  project_id: p\n  api_key: from-file\n"
        )

        config = ConfigManager.load_config(path, environ={API_KEY_ENV_VAR: "from-env"})

        assert config.locize.api_key == "from-env"

    def test_file_api_key_used_without_environment(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "c.yml", "locize:\n  project_id: p\n  api_key: from-file\n"
        )

        assert ConfigManager.load_config(path, environ={}).locize.api_key == "from-file"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            _ = ConfigManager.load_config(tmp_path / "missing.yml", environ={})

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.yml", "locize: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            _ = ConfigManager.load_config(path, environ={})

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.yml", "- a\n- b\n")

        with pytest.raises(ConfigurationError, match="YAML dictionary"):
            _ = ConfigManager.load_config(path, environ={})

    @pytest.mark.parametrize("content", ["", "locize:\n  version: latest\n"])
    def test_validation_failure(self, tmp_path: Path, content: str) -> None:
        path = _write(tmp_path / "c.yml", content)

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            _ = ConfigManager.load_config(path, environ={})


class TestSaveConfig:
    """Test cases for ConfigManager.save_config."""

    def test_round_trip_without_api_key(self, tmp_path: Path, base_config: LocizeSyncConfig) -> None:
        path = tmp_path / "saved.yml"

        ConfigManager.save_config(base_config, path)

        raw = yaml.safe_load(path.read_text(encoding="utf-8"))  # pyright: ignore[reportAny]
        assert "api_key" not in raw["locize"]
        reloaded = ConfigManager.load_config(path, environ={})
        assert reloaded.locize.project_id == base_config.locize.project_id
        assert reloaded.find_keys == base_config.find_keys

    def test_no_temporary_files_left_behind(self, tmp_path: Path, base_config: LocizeSyncConfig) -> None:
        ConfigManager.save_config(base_config, tmp_path / "saved.yml")

        assert [p.name for p in tmp_path.iterdir()] == ["saved.yml"]

    def test_starter_config(self) -> None:
        config = ConfigManager.create_starter_config("demo")

        assert config.locize.project_id == "demo"
        assert config.locize.api_key is None
