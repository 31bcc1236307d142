"""
Configuration exceptions.

Kept outside PriceStatsError: a broken config file is an environment problem,
not a problem with the price data being analysed.
"""

from typing import Any, List, Optional

RESET_HINT = "`pricestats config --init --force` writes a fresh default file"


class ConfigurationError(Exception):
    """The config file or an environment override could not be used."""

    def __init__(self, message: str, help_text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.help_text = help_text

    def __str__(self) -> str:
        if not self.help_text:
            return self.message
        return f"{self.message}\n\nHelp: {self.help_text}"


class InvalidConfigurationError(ConfigurationError):
    def __init__(self, field: str, value: Any, expected: str):
        super().__init__(
            f"Invalid configuration for '{field}': got {value!r}, expected {expected}",
            f"Fix '{field}' or start over; {RESET_HINT}",
        )
        self.field = field
        self.value = value
        self.expected = expected


class ConfigurationValidationError(ConfigurationError):
    """Raised with one ``section.key: problem`` line per rejected setting."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        lines = "".join(f"\n  - {error}" for error in self.errors)
        super().__init__(
            f"Configuration validation failed:{lines}",
            f"Correct or remove the settings listed above; {RESET_HINT}",
        )
