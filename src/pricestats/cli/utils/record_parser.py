"""
Parsing of PRICE@DATE record specifications given on the command line.
"""

import logging
from datetime import datetime
from typing import Iterable

from pricestats.constants import ISO_DATE_FORMAT, RECORD_SEPARATOR
from pricestats.exceptions import InvalidRecordError
from pricestats.models import PriceRecord, Stock, StockCollection

logger = logging.getLogger(__name__)


def normalize_date(value: str, date_format: str = ISO_DATE_FORMAT) -> str:
    """Parse ``value`` with ``date_format`` and return it as ISO ``YYYY-MM-DD``.

    Collections order records by comparing date strings, so anything that is not
    zero-padded ISO has to be converted before it reaches a PriceRecord.
    """
    try:
        parsed = datetime.strptime(value, date_format)
    except ValueError as e:
        raise InvalidRecordError(value, f"date does not match '{date_format}'", date_format) from e
    return parsed.strftime(ISO_DATE_FORMAT)


def parse_record_spec(
    spec: str, stock: Stock, date_format: str = ISO_DATE_FORMAT
) -> PriceRecord:
    """Turn ``PRICE@DATE`` into a PriceRecord for ``stock``."""
    price_text, separator, date_text = spec.strip().partition(RECORD_SEPARATOR)
    if not separator:
        raise InvalidRecordError(spec, f"expected PRICE{RECORD_SEPARATOR}DATE", date_format)

    try:
        price = int(price_text)
    except ValueError as e:
        raise InvalidRecordError(spec, f"price '{price_text}' is not an integer", date_format) from e

    try:
        date = normalize_date(date_text.strip(), date_format)
    except InvalidRecordError as e:
        raise InvalidRecordError(spec, e.reason, date_format) from e

    return PriceRecord(stock, price, date)


def build_collection(
    stock: Stock, specs: Iterable[str], date_format: str = ISO_DATE_FORMAT
) -> StockCollection:
    collection = StockCollection(stock)
    for spec in specs:
        collection.add_price_record(parse_record_spec(spec, stock, date_format))

    logger.info(f"Built collection {collection}")
    return collection
