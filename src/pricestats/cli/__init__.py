"""Command-line interface for pricestats."""

from .main import cli, main

__all__ = ["cli", "main"]
