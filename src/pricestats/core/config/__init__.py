"""
Configuration for pricestats.

Usage:
    from pricestats.core.config import ConfigManager

    config = ConfigManager().load_config()
    date_format = config.general.date_format
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .manager import ConfigManager, default_config_file
from .models import (
    DisplayConfig,
    GeneralConfig,
    LoggingSettings,
    LogLevel,
    PriceStatsConfig,
    PriceStatsSettings,
    check_date_format,
)

__all__ = [
    "PriceStatsConfig",
    "GeneralConfig",
    "LoggingSettings",
    "DisplayConfig",
    "LogLevel",
    "PriceStatsSettings",
    "check_date_format",
    "ConfigManager",
    "default_config_file",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
