"""
pricestats logging package.

- formatters: JSON, console and rich output
- loggers: correlation-aware logger adapter
- manager: handler installation driven by LoggingSettings
"""

from .formatters import StructuredFormatter
from .loggers import PriceStatsLogger
from .manager import configure_logging, get_logger, installed_handlers, reset_logging

__all__ = [
    "PriceStatsLogger",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "installed_handlers",
    "reset_logging",
]
