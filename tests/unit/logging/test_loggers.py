"""
Unit tests for PriceStatsLogger and handler installation.
"""

import json
import logging

from pricestats.core.config import LoggingSettings
from pricestats.logging import (
    PriceStatsLogger,
    StructuredFormatter,
    configure_logging,
    get_logger,
    installed_handlers,
    reset_logging,
)
from pricestats.models import PriceRecord, StockCollection


class TestPriceStatsLogger:
    def test_generates_correlation_id(self):
        logger = PriceStatsLogger("pricestats.test")

        assert logger.correlation_id
        assert PriceStatsLogger("pricestats.test", "fixed").correlation_id == "fixed"

    def test_keywords_become_context(self, caplog):
        logger = PriceStatsLogger("pricestats.test", "corr-1")

        with caplog.at_level(logging.INFO, logger="pricestats.test"):
            logger.info("Computed summary", stock="AAPL", count=4)

        record = caplog.records[-1]
        assert record.getMessage() == "Computed summary"
        assert record.correlation_id == "corr-1"
        assert record.context == {"stock": "AAPL", "count": 4}

    def test_logging_keywords_pass_through(self, caplog):
        logger = PriceStatsLogger("pricestats.test")

        with caplog.at_level(logging.ERROR, logger="pricestats.test"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                logger.error("Failed", exc_info=True, extra={"price": 110})

        record = caplog.records[-1]
        assert record.exc_info is not None
        assert record.price == 110
        assert not hasattr(record, "context")

    def test_get_logger(self):
        logger = get_logger("pricestats.x", "corr-2")

        assert isinstance(logger, PriceStatsLogger)
        assert logger.logger.name == "pricestats.x"
        assert logger.correlation_id == "corr-2"


class TestConfigureLogging:
    def test_console_json(self):
        configure_logging(LoggingSettings(level="DEBUG", format="json"))

        handlers = installed_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, StructuredFormatter)
        assert handlers[0] in logging.getLogger().handlers
        assert logging.getLogger("pricestats").level == logging.DEBUG

    def test_level_override(self):
        configure_logging(LoggingSettings(level="WARNING"), level="INFO")

        assert logging.getLogger("pricestats").level == logging.INFO
        assert installed_handlers()[0].level == logging.INFO

    def test_reconfigure_replaces_own_handlers(self):
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)
        try:
            configure_logging(LoggingSettings(format="console"))
            first = installed_handlers()
            configure_logging(LoggingSettings(format="rich"))

            assert len(installed_handlers()) == 1
            for handler in first:
                assert handler not in logging.getLogger().handlers
            assert foreign in logging.getLogger().handlers
        finally:
            logging.getLogger().removeHandler(foreign)

    def test_reset_removes_handlers(self):
        configure_logging(LoggingSettings())
        handler = installed_handlers()[0]

        reset_logging()

        assert installed_handlers() == ()
        assert handler not in logging.getLogger().handlers

    def test_file_output_carries_record_fields(self, tmp_path, apple):
        log_file = tmp_path / "logs" / "pricestats.log"
        configure_logging(
            LoggingSettings(level="DEBUG", format="json", output=["file"], file_path=log_file)
        )

        StockCollection(apple).add_price_record(PriceRecord(apple, 110, "2023-06-29"))
        for handler in installed_handlers():
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["logger"] == "pricestats.models.stock_collection"
        assert entry["stock"] == "AAPL"
        assert entry["price"] == 110
        assert entry["date"] == "2023-06-29"
        assert entry["count"] == 1
