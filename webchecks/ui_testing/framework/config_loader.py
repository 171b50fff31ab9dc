"""
================================================================================
Configuration Loader
================================================================================

Runtime settings for the checks: target site, browser, timeouts, viewport
presets, translation directory, geolocation service and response aliases.
Read from config/config.yaml, optionally overlaid by config/<ENVIRONMENT>.yaml,
with any key overridable from the environment (UI_BASE_URL for ui.base_url).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """
    Process-wide configuration, one instance per process.

    Lookup order: environment variable, overlay file, config.yaml, default.

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.viewports")[2]["name"]
        'mobile'
        >>> intercepts = config.get_section("intercepts")["search_home"]
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Load once per process; later calls reuse the first configuration."""
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file {path}: {e}"
            ) from e

    def _load_config(self) -> None:
        """Load configuration from YAML file plus the optional environment overlay."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        self._config = self._read_yaml(self._config_path)
        logger.debug(f"Loaded configuration from: {self._config_path}")

        env = os.getenv("ENVIRONMENT")
        if env:
            overlay_path = self._config_path.parent / f"{env}.yaml"
            if overlay_path.exists():
                self._config = _deep_merge(self._config, self._read_yaml(overlay_path))
                logger.debug(f"Merged environment config: {overlay_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Value at a dot-notation path (``ui.browser``), environment first.

        Environment strings are converted to the type of ``default``, so
        ``UI_HEADLESS=false`` with a bool default gives False.
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Whole top-level section (e.g. ``intercepts``), empty when absent."""
        return self._config.get(section) or {}

    def reload(self) -> None:
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded configuration; the next ConfigLoader() reads it again."""
        cls._instance = None
        cls._config = {}


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "PROJECT_ROOT",
]
