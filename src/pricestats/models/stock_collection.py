import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import pandas as pd
from pandas import DataFrame

from ..constants import EMPTY_AVERAGE, EMPTY_PRICE, MIN_RECORDS_FOR_CHANGE
from ..exceptions import InstrumentMismatchError
from .price_change import PriceChange
from .price_record import PriceRecord
from .stock import Stock

DATE_COLUMN = "date"
PRICE_COLUMN = "price"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionSummary:
    """Every aggregate of a StockCollection, computed at one point in time.

    Empty collections carry the same sentinels as the individual queries:
    ``EMPTY_PRICE`` for the extremes, ``EMPTY_AVERAGE`` for the mean and
    ``None`` for ``biggest_change`` (also ``None`` with a single record).
    """

    stock: Stock
    count: int
    max_price: int
    min_price: int
    avg_price: float
    biggest_change: Optional[PriceChange]


class StockCollection:
    """Append-only sequence of price records for a single stock.

    Every record must belong to the collection's stock; this is checked when the
    record is added. Aggregate queries never modify the stored records.

    Empty collections answer ``max_price``/``min_price`` with ``EMPTY_PRICE`` and
    ``avg_price`` with ``EMPTY_AVERAGE``. A genuine price of -1 is therefore
    indistinguishable from an empty collection; check ``num_price_records()``
    when that matters.

    No internal locking is done. Callers sharing a collection across threads
    must serialize access themselves.
    """

    def __init__(self, stock: Stock):
        self.stock = stock
        self._price_records: List[PriceRecord] = []

    def __str__(self) -> str:
        return f"{self.stock}, {len(self._price_records)} records"

    def __len__(self) -> int:
        return len(self._price_records)

    def __iter__(self) -> Iterator[PriceRecord]:
        return iter(tuple(self._price_records))

    @property
    def price_records(self) -> Tuple[PriceRecord, ...]:
        return tuple(self._price_records)

    def num_price_records(self) -> int:
        return len(self._price_records)

    def add_price_record(self, price_record: PriceRecord) -> None:
        if price_record.stock != self.stock:
            logger.warning(
                f"Rejected record {price_record}: stock {price_record.stock} "
                f"does not match {self.stock}",
                extra=self._log_fields(price_record),
            )
            raise InstrumentMismatchError(self.stock, price_record.stock)

        self._price_records.append(price_record)
        logger.debug(
            f"Added record {price_record} ({len(self._price_records)} total)",
            extra=self._log_fields(price_record),
        )

    def _log_fields(self, price_record: PriceRecord) -> dict:
        return {
            "stock": self.stock.symbol,
            "record_stock": price_record.stock.symbol,
            "price": price_record.price,
            "date": price_record.date,
            "count": len(self._price_records),
        }

    def max_price(self) -> int:
        if not self._price_records:
            return EMPTY_PRICE
        return max(record.price for record in self._price_records)

    def min_price(self) -> int:
        if not self._price_records:
            return EMPTY_PRICE
        return min(record.price for record in self._price_records)

    def avg_price(self) -> float:
        if not self._price_records:
            return EMPTY_AVERAGE
        total = sum(record.price for record in self._price_records)
        return total / len(self._price_records)

    def biggest_change(self) -> Optional[PriceChange]:
        """Find the largest absolute price move between date-adjacent records.

        Records are sorted by date string (stable, so equal dates keep insertion
        order) and consecutive pairs compared. On ties the earliest pair wins.

        Returns:
            PriceChange with the absolute move and its bounding dates, or None
            when fewer than two records are held.
        """
        if len(self._price_records) < MIN_RECORDS_FOR_CHANGE:
            return None

        ordered = sorted(self._price_records, key=lambda record: record.date)

        best: Optional[PriceChange] = None
        for prev, curr in zip(ordered, ordered[1:]):
            change = abs(curr.price - prev.price)
            if best is None or change > best.amount:
                best = PriceChange(change, prev.date, curr.date)

        return best

    def summary(self) -> CollectionSummary:
        return CollectionSummary(
            stock=self.stock,
            count=self.num_price_records(),
            max_price=self.max_price(),
            min_price=self.min_price(),
            avg_price=self.avg_price(),
            biggest_change=self.biggest_change(),
        )

    def to_dataframe(self) -> DataFrame:
        """Records as a DataFrame with ``date`` and ``price`` columns, sorted by date."""
        df = pd.DataFrame(
            [(record.date, record.price) for record in self._price_records],
            columns=[DATE_COLUMN, PRICE_COLUMN],
        )
        return df.sort_values(DATE_COLUMN, kind="stable").reset_index(drop=True)
