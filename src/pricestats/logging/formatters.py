"""
Formatters and handlers for pricestats log output.
"""

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

# Attributes that StockCollection and the CLI attach through ``extra=``.
DOMAIN_FIELDS = ("stock", "record_stock", "price", "date", "count")

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Besides the usual level/logger/message fields the object carries the
    stock and record fields a collection logs with, the correlation id and
    keyword context added by PriceStatsLogger, and the formatted traceback
    when there is one.
    """

    def __init__(self, service_name: str = "pricestats", version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
        }

        for name in DOMAIN_FIELDS + ("correlation_id",):
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        context = getattr(record, "context", None)
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def create_console_formatter() -> logging.Formatter:
    return logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)


def create_rich_handler() -> RichHandler:
    """Colourised stderr handler; report tables go to stdout and stay clean."""
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
