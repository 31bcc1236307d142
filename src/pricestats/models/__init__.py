"""
Domain models for price observations.

This module contains the stock identity, price record and the per-stock
collection that answers aggregate price queries.
"""

from .price_change import PriceChange
from .price_record import PriceRecord
from .stock import Stock
from .stock_collection import (
    DATE_COLUMN,
    PRICE_COLUMN,
    CollectionSummary,
    StockCollection,
)

__all__ = [
    "Stock",
    "PriceRecord",
    "PriceChange",
    "StockCollection",
    "CollectionSummary",
    "DATE_COLUMN",
    "PRICE_COLUMN",
]
