"""
Centralized error handling for the CLI.

Provides consistent error display, logging and exit codes across commands.
"""

import functools
import sys

from rich.console import Console

from ..exceptions import (
    ConfigurationError,
    InstrumentError,
    PriceStatsError,
    RecordError,
)
from ..logging import get_logger

console = Console()

EXIT_GENERAL_ERROR = 1
EXIT_CONFIGURATION_ERROR = 3
EXIT_INSTRUMENT_ERROR = 8
EXIT_RECORD_ERROR = 9


def handle_cli_errors(func):
    """Decorator to handle CLI errors with proper formatting and exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            _print_error("\nOperation cancelled by user", "yellow")
            sys.exit(EXIT_GENERAL_ERROR)
        except ConfigurationError as e:
            _handle_configuration_error(e)
        except InstrumentError as e:
            _handle_error("Instrument Error", e, EXIT_INSTRUMENT_ERROR)
        except RecordError as e:
            _handle_error("Record Error", e, EXIT_RECORD_ERROR)
        except PriceStatsError as e:
            _handle_error("Error", e, EXIT_GENERAL_ERROR)

    return wrapper


def _print_error(message: str, style: str = "red"):
    console.print(message, style=style, markup=False, highlight=False)


def _print_help(message: str):
    console.print(f"Help: {message}", style="blue", markup=False, highlight=False)


def _handle_configuration_error(e: ConfigurationError):
    _print_error(f"Configuration Error: {e.message}")
    if e.help_text:
        _print_help(e.help_text)

    get_logger("pricestats.cli.error").error(f"Configuration error: {e.message}")
    sys.exit(EXIT_CONFIGURATION_ERROR)


def _handle_error(title: str, e: PriceStatsError, exit_code: int):
    _print_error(f"{title}: {e.message}")
    if e.help_text:
        _print_help(e.help_text)
    console.print(f"Error ID: {e.error_id}", style="dim", markup=False)

    get_logger("pricestats.cli.error").error(
        f"{type(e).__name__} ({e.error_code}): {e.message}", **e.to_dict()
    )
    sys.exit(exit_code)
