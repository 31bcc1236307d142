"""
Pytest configuration and shared fixtures for pricestats tests.
"""

import pytest

from pricestats.logging import reset_logging as _reset_logging
from pricestats.models import PriceRecord, Stock, StockCollection

SCENARIO_A = [
    (110, "2023-06-29"),
    (112, "2023-07-01"),
    (90, "2023-06-28"),
    (105, "2023-07-06"),
]

SCENARIO_B = [
    (110, "2023-06-29"),
    (112, "2023-07-01"),
    (90, "2023-06-25"),
    (105, "2023-07-06"),
]


def _build_collection(stock, price_data):
    collection = StockCollection(stock)
    for price, date in price_data:
        collection.add_price_record(PriceRecord(stock, price, date))
    return collection


@pytest.fixture
def make_collection():
    """Factory building a collection from (price, date) pairs."""
    return _build_collection


@pytest.fixture
def apple():
    return Stock("AAPL", "Apple Inc.")


@pytest.fixture
def microsoft():
    return Stock("MSFT", "Microsoft Corporation")


@pytest.fixture
def empty_collection(apple):
    return StockCollection(apple)


@pytest.fixture
def scenario_a(apple):
    return _build_collection(apple, SCENARIO_A)


@pytest.fixture
def scenario_b(apple):
    return _build_collection(apple, SCENARIO_B)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the default config location at a temp home and clear overrides."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    for var in (
        "PRICESTATS_LOG_LEVEL",
        "PRICESTATS_LOG_FORMAT",
        "PRICESTATS_DATE_FORMAT",
        "PRICESTATS_CURRENCY_SYMBOL",
        "PRICESTATS_AVERAGE_PRECISION",
    ):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by configure_logging during a test."""
    yield
    _reset_logging()
