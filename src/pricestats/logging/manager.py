"""
Installation of pricestats log handlers.

Handlers are attached to the root logger and remembered, so reconfiguring
replaces only what pricestats added and leaves any handlers installed by a
host application alone.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from ..core.config.models import LoggingSettings
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler
from .loggers import PriceStatsLogger

PACKAGE_LOGGER = "pricestats"
DEFAULT_LOG_FILE = Path("logs") / "pricestats.log"

_installed: List[logging.Handler] = []


def _level_number(level) -> int:
    name = getattr(level, "value", level)
    return getattr(logging, str(name).upper())


def _formatter(settings: LoggingSettings, service_name: str, version: str) -> logging.Formatter:
    if settings.format == "json":
        return StructuredFormatter(service_name, version)
    return create_console_formatter()


def _console_handler(settings: LoggingSettings, service_name: str, version: str) -> logging.Handler:
    if settings.format == "rich":
        return create_rich_handler()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(settings, service_name, version))
    return handler


def _file_handler(settings: LoggingSettings, service_name: str, version: str) -> logging.Handler:
    path = Path(settings.file_path or DEFAULT_LOG_FILE)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=settings.max_file_size, backupCount=settings.backup_count
    )
    # "rich" has no file rendering; such files get the plain console layout.
    handler.setFormatter(_formatter(settings, service_name, version))
    return handler


HANDLER_FACTORIES: Dict[str, Callable[[LoggingSettings, str, str], logging.Handler]] = {
    "console": _console_handler,
    "file": _file_handler,
}


def configure_logging(
    settings: LoggingSettings,
    level: Optional[str] = None,
    service_name: str = PACKAGE_LOGGER,
    version: str = "unknown",
) -> Tuple[logging.Handler, ...]:
    """Install one handler per entry of ``settings.output``.

    ``level`` overrides ``settings.level``; the CLI uses it for ``-v``.
    """
    reset_logging()

    threshold = _level_number(level or settings.level)
    root_logger = logging.getLogger()
    root_logger.setLevel(threshold)
    logging.getLogger(PACKAGE_LOGGER).setLevel(threshold)

    for output in settings.output:
        handler = HANDLER_FACTORIES[output](settings, service_name, version)
        handler.setLevel(threshold)
        root_logger.addHandler(handler)
        _installed.append(handler)

    return installed_handlers()


def installed_handlers() -> Tuple[logging.Handler, ...]:
    return tuple(_installed)


def reset_logging() -> None:
    """Detach and close every handler configure_logging installed."""
    root_logger = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root_logger.removeHandler(handler)
        handler.close()


def get_logger(name: str, correlation_id: Optional[str] = None) -> PriceStatsLogger:
    return PriceStatsLogger(name, correlation_id)
