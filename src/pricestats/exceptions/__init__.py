"""
pricestats exception hierarchy.

Exception Hierarchy:
    PriceStatsError (base)
    ├── InstrumentError
    │   └── InstrumentMismatchError
    └── RecordError
        └── InvalidRecordError
    ConfigurationError
    ├── InvalidConfigurationError
    └── ConfigurationValidationError
"""

from .base import PriceStatsError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .instruments import InstrumentError, InstrumentMismatchError
from .records import InvalidRecordError, RecordError

__all__ = [
    "PriceStatsError",
    # Instruments
    "InstrumentError",
    "InstrumentMismatchError",
    # Records
    "RecordError",
    "InvalidRecordError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
