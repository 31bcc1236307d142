"""
Root of the pricestats exception hierarchy.
"""

import uuid
from typing import Any, Dict, Mapping, Optional


def new_error_id() -> str:
    return uuid.uuid4().hex[:8]


class PriceStatsError(Exception):
    """Base exception for errors raised by pricestats.

    ``help_text`` tells the caller how to recover, ``error_code`` is a stable
    identifier for programmatic handling and ``context`` holds the values that
    triggered the error (stocks, record strings). ``error_id`` ties the
    rendered message to the matching log line.
    """

    error_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        help_text: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.help_text = help_text
        self.context: Dict[str, Any] = dict(context or {})
        self.error_id = new_error_id()

    def __str__(self) -> str:
        parts = [self.message]
        if self.help_text:
            parts.append(f"Help: {self.help_text}")
        details = ", ".join(
            f"{key}={value}" for key, value in self.context.items() if value is not None
        )
        if details:
            parts.append(f"Context: {details}")
        parts.append(f"Error ID: {self.error_id}")
        return "\n\n".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the error into log-friendly fields."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "error_id": self.error_id,
            "message": self.message,
            "context": dict(self.context),
        }
