"""
Logger adapter carrying a correlation id and keyword context.
"""

import logging
from typing import Optional
from uuid import uuid4

# Keyword arguments that Logger.log itself understands.
_LOGGER_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


class PriceStatsLogger(logging.LoggerAdapter):
    """Adapter that stamps every record with a correlation id.

    Any keyword argument ``Logger.log`` does not know becomes structured
    context on the record::

        log = get_logger("pricestats.cli")
        log.info("Built collection", stock="AAPL", count=4)
    """

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        super().__init__(logging.getLogger(name), {})
        self.correlation_id = correlation_id or uuid4().hex

    def process(self, msg, kwargs):
        context = {key: kwargs.pop(key) for key in list(kwargs) if key not in _LOGGER_KWARGS}
        extra = dict(kwargs.get("extra") or {})
        extra["correlation_id"] = self.correlation_id
        if context:
            extra["context"] = context
        kwargs["extra"] = extra
        return msg, kwargs
