"""Configuration loading for the Phaser API generator.

Settings come from config/phaserapi.yaml, with environment overrides
(a .env file is honoured via python-dotenv).

Resolution order for the config file:
  1. explicit path passed to load_settings()
  2. PHASERAPI_CONFIG env var
  3. config/phaserapi.yaml at the repository root

The workspace defaults to the parent of the current directory, so running
from inside a plugin project finds its sibling resources project.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from ..constants import (
    DEFAULT_DOCS_JSON_PATH,
    DEFAULT_IGNORE_TYPES,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_RESOURCES_PROJECT,
    DEFAULT_SRC_PATH,
    DEFAULT_SUPPLEMENTAL_PATH,
)
from ..errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "phaserapi.yaml"


def get_config_path() -> Path:
    """Directory holding the default config file (repo-root config/)."""
    return Path(__file__).parents[3] / "config"


@dataclass
class Settings:
    """Resolved generator settings."""

    workspace: Path
    resources_project: str = DEFAULT_RESOURCES_PROJECT
    src: str = DEFAULT_SRC_PATH
    docs_json: str = DEFAULT_DOCS_JSON_PATH
    supplemental: str = DEFAULT_SUPPLEMENTAL_PATH
    output: str = DEFAULT_OUTPUT_PATH
    ignore_types: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_TYPES))
    log_level: str = "INFO"

    @property
    def project_path(self) -> Path:
        return self.workspace / self.resources_project

    @property
    def src_path(self) -> Path:
        return self.project_path / self.src

    @property
    def docs_json_path(self) -> Path:
        return self.project_path / self.docs_json

    @property
    def supplemental_path(self) -> Path:
        return self.project_path / self.supplemental

    @property
    def output_path(self) -> Path:
        return self.project_path / self.output


def _default_workspace() -> Path:
    return Path.cwd().resolve().parent


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    if not config_file.exists():
        logger.warning(f"{config_file} not found, using default settings")
        return {}
    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_file}: {e}") from e
    if not isinstance(config, dict):
        raise ConfigError(f"{config_file} must contain a mapping, got {type(config).__name__}")
    return config


def load_settings(config_file: Optional[Path] = None, workspace: Optional[Path] = None) -> Settings:
    """Load settings from YAML and the environment.

    Args:
        config_file: Explicit config file; falls back to PHASERAPI_CONFIG
            and then config/phaserapi.yaml
        workspace: Explicit workspace; takes precedence over PHASERAPI_WORKSPACE

    Returns:
        Settings with all paths resolved

    Raises:
        ConfigError: If the config file exists but cannot be parsed
    """
    load_dotenv()

    if config_file is None:
        env_config = os.getenv("PHASERAPI_CONFIG")
        config_file = Path(env_config) if env_config else get_config_path() / CONFIG_FILE_NAME

    config = _read_yaml(Path(config_file))
    paths = config.get("paths") or {}
    generator = config.get("generator") or {}
    logging_cfg = config.get("logging") or {}

    if workspace is None:
        workspace_value = os.getenv("PHASERAPI_WORKSPACE") or config.get("workspace")
        workspace = Path(workspace_value).expanduser() if workspace_value else _default_workspace()

    ignore_types = generator.get("ignore_types")
    if ignore_types is None:
        ignore_types = list(DEFAULT_IGNORE_TYPES)

    settings = Settings(
        workspace=workspace,
        resources_project=config.get("resources_project") or DEFAULT_RESOURCES_PROJECT,
        src=paths.get("src") or DEFAULT_SRC_PATH,
        docs_json=paths.get("docs_json") or DEFAULT_DOCS_JSON_PATH,
        supplemental=paths.get("supplemental") or DEFAULT_SUPPLEMENTAL_PATH,
        output=paths.get("output") or DEFAULT_OUTPUT_PATH,
        ignore_types=list(ignore_types),
        log_level=os.getenv("PHASERAPI_LOG_LEVEL") or logging_cfg.get("level") or "INFO",
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings


_settings_cache: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the cached settings, loading them on first use."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def reload_settings() -> Settings:
    """Drop the cache and load settings again."""
    global _settings_cache
    _settings_cache = None
    return get_settings()
