"""
Instrument-related exceptions.

Raised when a price record does not belong to the collection it is added to.
"""

from .base import PriceStatsError


class InstrumentError(PriceStatsError):
    """Base class for instrument-related errors."""
    pass


class InstrumentMismatchError(InstrumentError, ValueError):
    """Raised when a price record's stock differs from the collection's stock."""

    error_code = "INSTRUMENT_MISMATCH"

    def __init__(self, expected, actual):
        super().__init__(
            f"PriceRecord's stock {actual} is not the same as "
            f"the StockCollection's {expected}",
            help_text="Add records only to the collection created for the same stock",
            context={"expected": str(expected), "actual": str(actual)},
        )
        self.expected = expected
        self.actual = actual
