"""
Configuration manager for pricestats.

Loads TOML configuration files, applies environment variable overrides and
validates the result against PriceStatsConfig.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import tomli_w
from pydantic import ValidationError

from pricestats.exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .models import PriceStatsConfig, PriceStatsSettings


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""

    config_section: Dict[str, Any]
    settings: PriceStatsSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply setting if it's set in environment."""
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply string setting if it's set and non-empty in environment."""
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


def _table(parent: Dict[str, Any], key: str, prefix: str = "") -> Dict[str, Any]:
    """Return the sub-table ``parent[key]``, creating it when absent."""
    section = parent.setdefault(key, {})
    if not isinstance(section, dict):
        raise ConfigurationValidationError(
            [f"{prefix}{key}: expected a table, got {type(section).__name__}"]
        )
    return section


def default_config_file() -> Path:
    return Path.home() / ".config" / "pricestats" / "config.toml"


class ConfigManager:
    """Loads, validates, caches and saves pricestats configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses the default location.
        """
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[PriceStatsConfig] = None

    def load_config(self) -> PriceStatsConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = PriceStatsConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [
                    f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                    for error in e.errors()
                ]
            ) from e

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file {self.config_file}: {e}",
                help_text="Check that the file exists and is readable",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        settings = PriceStatsSettings()

        general = _table(config_data, "general")
        logging_section = _table(general, "logging", "general.")
        display = _table(config_data, "display")

        EnvironmentOverride(general, settings).apply_string_if_set(
            "pricestats_date_format", "date_format"
        )

        logging_override = EnvironmentOverride(logging_section, settings)
        logging_override.apply_string_if_set("pricestats_log_level", "level")
        logging_override.apply_string_if_set("pricestats_log_format", "format")
        if "level" in logging_section and isinstance(logging_section["level"], str):
            logging_section["level"] = logging_section["level"].upper()

        display_override = EnvironmentOverride(display, settings)
        display_override.apply_if_set("pricestats_currency_symbol", "currency_symbol")
        display_override.apply_if_set(
            "pricestats_average_precision", "average_precision"
        )

        return config_data

    def save_config(self, config: Optional[PriceStatsConfig] = None) -> Path:
        """Write configuration to the config file as TOML."""
        config = config or self.load_config()
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        data = config.model_dump(mode="json", exclude_none=True)
        try:
            with open(self.config_file, "wb") as f:
                tomli_w.dump(data, f)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to write configuration file {self.config_file}: {e}",
                help_text="Check permissions on the configuration directory",
            ) from e

        self._config = config
        return self.config_file

    def reset_config(self) -> None:
        """Drop the cached configuration so the next load re-reads file and environment."""
        self._config = None
