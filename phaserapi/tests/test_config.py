"""Tests for settings loading."""

from pathlib import Path

import pytest
from phaserapi.core.config import config_loader
from phaserapi.core.config.config_loader import load_settings
from phaserapi.core.constants import DEFAULT_IGNORE_TYPES, DEFAULT_RESOURCES_PROJECT
from phaserapi.core.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("PHASERAPI_CONFIG", "PHASERAPI_WORKSPACE", "PHASERAPI_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.setattr(config_loader, "load_dotenv", lambda *args, **kwargs: False)


class TestDefaults:
    def test_missing_file_uses_defaults(self, tmp_path, monkeypatch):
        work = tmp_path / "plugin"
        work.mkdir()
        monkeypatch.chdir(work)

        settings = load_settings(tmp_path / "missing.yaml")

        assert settings.workspace == tmp_path.resolve()
        assert settings.resources_project == DEFAULT_RESOURCES_PROJECT
        assert settings.ignore_types == DEFAULT_IGNORE_TYPES
        assert settings.log_level == "INFO"
        assert settings.output_path == (
            tmp_path.resolve() / DEFAULT_RESOURCES_PROJECT / "phaser-custom" / "api" / "phaser-api.js"
        )
        assert settings.supplemental_path.name == "phaser-api-concat.js"
        assert settings.docs_json_path.name == "docs.json"
        assert settings.src_path.parts[-2:] == ("phaser-master", "src")


class TestYamlOverrides:
    def test_paths_and_generator(self, tmp_path):
        config = tmp_path / "phaserapi.yaml"
        config.write_text(
            f"workspace: {tmp_path}\n"
            "resources_project: res\n"
            "paths:\n"
            "  output: out/api.js\n"
            "generator:\n"
            "  ignore_types: []\n"
            "logging:\n"
            "  level: DEBUG\n",
            encoding="utf-8",
        )

        settings = load_settings(config)

        assert settings.output_path == tmp_path / "res" / "out" / "api.js"
        assert settings.ignore_types == []
        assert settings.log_level == "DEBUG"

    def test_invalid_yaml(self, tmp_path):
        config = tmp_path / "phaserapi.yaml"
        config.write_text("paths: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(config)

    def test_non_mapping_yaml(self, tmp_path):
        config = tmp_path / "phaserapi.yaml"
        config.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(config)


class TestEnvironment:
    def test_workspace_env_overrides_yaml(self, tmp_path, monkeypatch):
        config = tmp_path / "phaserapi.yaml"
        config.write_text("workspace: /somewhere/else\n", encoding="utf-8")
        monkeypatch.setenv("PHASERAPI_WORKSPACE", str(tmp_path / "ws"))

        assert load_settings(config).workspace == tmp_path / "ws"

    def test_explicit_workspace_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PHASERAPI_WORKSPACE", str(tmp_path / "env"))
        settings = load_settings(tmp_path / "missing.yaml", workspace=tmp_path / "cli")
        assert settings.workspace == tmp_path / "cli"

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        config = tmp_path / "custom.yaml"
        config.write_text("resources_project: custom\n", encoding="utf-8")
        monkeypatch.setenv("PHASERAPI_CONFIG", str(config))

        assert load_settings().resources_project == "custom"

    def test_log_level_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PHASERAPI_LOG_LEVEL", "WARNING")
        assert load_settings(tmp_path / "missing.yaml").log_level == "WARNING"


class TestCache:
    def test_reload_clears_cache(self, tmp_path, monkeypatch):
        config = tmp_path / "custom.yaml"
        config.write_text("resources_project: first\n", encoding="utf-8")
        monkeypatch.setenv("PHASERAPI_CONFIG", str(config))
        monkeypatch.setattr(config_loader, "_settings_cache", None)

        assert config_loader.get_settings().resources_project == "first"
        config.write_text("resources_project: second\n", encoding="utf-8")
        assert config_loader.get_settings().resources_project == "first"
        assert config_loader.reload_settings().resources_project == "second"
        assert isinstance(config_loader.get_settings().workspace, Path)
