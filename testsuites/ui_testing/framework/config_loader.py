"""
================================================================================
Configuration Loader
================================================================================

YAML-based run configuration with environment variable override support.

Features:
    - Built-in defaults merged under the YAML file
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access
    - Typed UI settings consumed by the browser lifecycle

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "ui": {
        "base_url": "https://xaltsocnportal.web.app",
        "browser": "chromium",
        "headless": True,
        "slow_mo": 0,
        "viewport": {"width": 1280, "height": 720},
        "default_command_timeout": 10000,
        "page_load_timeout": 30000,
        "video": False,
        "screenshot_on_failure": True,
        "screenshots_folder": "reports/screenshots",
        "videos_folder": "reports/videos",
        "trash_assets_before_runs": True,
        "skip_if_unreachable": True,
    },
    "fixtures": {
        "directory": "testsuites/ui_testing/fixtures",
    },
    "logging": {
        "level": "INFO",
    },
}

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def _deep_merge(base: Dict, override: Dict) -> Dict:
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
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BASE_URL)
        2. YAML configuration file
        3. Built-in defaults (DEFAULT_CONFIG)
        4. Default passed to get()

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url")
        'https://xaltsocnportal.web.app'

        >>> config.get("ui.page_load_timeout", 30000)
        30000

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.viewport.width -> UI_VIEWPORT_WIDTH
        - logging.level -> LOGGING_LEVEL (LOG_LEVEL also accepted, see logging_options)
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton - configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file on top of the built-in defaults."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = _deep_merge({}, DEFAULT_CONFIG)
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self._config_path}"
            )

        self._config = _deep_merge(DEFAULT_CONFIG, file_config)
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.base_url")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            reference = default if default is not None else self._lookup(key)
            return self._convert_type(env_value, reference)

        value = self._lookup(key)
        return default if value is None else value

    def _lookup(self, key: str) -> Any:
        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                return None
            if value is None:
                return None
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get entire configuration section.

        Args:
            section: Section name (e.g., "ui", "logging")

        Returns:
            Section dictionary or empty dict if not found
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
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
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class UiSettings:
    """
    Settings consumed by the browser runtime.

    Scenario code never branches on these; they only shape the browser,
    its timeouts and the artifacts captured around a run.
    """
    base_url: str
    browser: str = "chromium"
    headless: bool = True
    slow_mo: int = 0
    viewport_width: int = 1280
    viewport_height: int = 720
    default_command_timeout: int = 10000
    page_load_timeout: int = 30000
    video: bool = False
    screenshot_on_failure: bool = True
    screenshots_folder: Path = Path("reports/screenshots")
    videos_folder: Path = Path("reports/videos")
    trash_assets_before_runs: bool = True
    skip_if_unreachable: bool = True

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}

    @classmethod
    def from_config(
        cls,
        config: ConfigLoader,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "UiSettings":
        """
        Build settings from the loader, applying non-None command-line overrides.

        Raises:
            ConfigurationError: Unsupported browser or empty base URL
        """
        defaults = DEFAULT_CONFIG["ui"]
        values: Dict[str, Any] = {
            "base_url": config.get("ui.base_url", defaults["base_url"]),
            "browser": config.get("ui.browser", defaults["browser"]),
            "headless": config.get("ui.headless", defaults["headless"]),
            "slow_mo": config.get("ui.slow_mo", defaults["slow_mo"]),
            "viewport_width": config.get("ui.viewport.width", defaults["viewport"]["width"]),
            "viewport_height": config.get("ui.viewport.height", defaults["viewport"]["height"]),
            "default_command_timeout": config.get(
                "ui.default_command_timeout", defaults["default_command_timeout"]
            ),
            "page_load_timeout": config.get("ui.page_load_timeout", defaults["page_load_timeout"]),
            "video": config.get("ui.video", defaults["video"]),
            "screenshot_on_failure": config.get(
                "ui.screenshot_on_failure", defaults["screenshot_on_failure"]
            ),
            "screenshots_folder": Path(
                config.get("ui.screenshots_folder", defaults["screenshots_folder"])
            ),
            "videos_folder": Path(config.get("ui.videos_folder", defaults["videos_folder"])),
            "trash_assets_before_runs": config.get(
                "ui.trash_assets_before_runs", defaults["trash_assets_before_runs"]
            ),
            "skip_if_unreachable": config.get(
                "ui.skip_if_unreachable", defaults["skip_if_unreachable"]
            ),
        }
        for key, value in (overrides or {}).items():
            if value is not None:
                values[key] = value

        if not values["base_url"]:
            raise ConfigurationError("ui.base_url must not be empty")
        if values["browser"] not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser '{values['browser']}', "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )

        values["base_url"] = str(values["base_url"]).rstrip("/")
        return cls(**values)


def logging_options(config: ConfigLoader) -> Dict[str, Any]:
    """
    Keyword arguments for `init_logger` from the `logging` section.

    Level precedence: LOG_LEVEL, then logging.level (or LOGGING_LEVEL),
    then INFO.
    """
    return {
        "level": os.environ.get("LOG_LEVEL") or config.get("logging.level", "INFO"),
        "log_file": config.get("logging.file"),
        "rotation": config.get("logging.rotation", "10 MB"),
        "retention": config.get("logging.retention", "7 days"),
    }


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
    "logging_options",
    "DEFAULT_CONFIG",
    "SUPPORTED_BROWSERS",
]
