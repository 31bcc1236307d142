"""
pricestats: price statistics over time-stamped observations of one stock.

Architecture Overview:
- Models: Stock identity, price records and the per-stock collection
- Exceptions: Error hierarchy with actionable context
- Logging: Structured logging setup
- Core: Configuration loading
- CLI: Command-line reporting front end
"""

__version__ = "0.1.0"

from .exceptions import InstrumentMismatchError, PriceStatsError
from .models import CollectionSummary, PriceChange, PriceRecord, Stock, StockCollection

__all__ = [
    "Stock",
    "PriceRecord",
    "PriceChange",
    "StockCollection",
    "CollectionSummary",
    "PriceStatsError",
    "InstrumentMismatchError",
]
