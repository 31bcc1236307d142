from dataclasses import dataclass

from .stock import Stock


@dataclass(frozen=True)
class PriceRecord:
    """A single price observation for a stock on a given date.

    No validation is performed: negative prices and empty dates are kept as given.
    Dates are compared as strings, so they must be zero-padded ISO-8601
    (``YYYY-MM-DD``) for lexicographic order to match chronological order.
    """

    stock: Stock
    price: int
    date: str

    def __str__(self) -> str:
        return f"{self.stock.symbol}|{self.date}|{self.price}"
