"""CLI commands for pricestats."""

from .config import config
from .report import change, records, summary

__all__ = ["summary", "change", "records", "config"]
