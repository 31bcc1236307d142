"""
Price record exceptions.

Raised when textual price record input cannot be turned into a PriceRecord.
"""

from typing import Optional

from .base import PriceStatsError


class RecordError(PriceStatsError):
    """Base class for price record errors."""
    pass


class InvalidRecordError(RecordError):
    """Raised when a PRICE@DATE specification is malformed."""

    error_code = "INVALID_RECORD"

    def __init__(self, value: str, reason: str, date_format: Optional[str] = None):
        help_text = "Specify records as PRICE@DATE, for example 110@2023-06-29"
        if date_format:
            help_text += f" (dates must match '{date_format}')"
        super().__init__(
            f"Invalid price record '{value}': {reason}",
            help_text=help_text,
            context={"value": value},
        )
        self.value = value
        self.reason = reason
