from typing import NamedTuple


class PriceChange(NamedTuple):
    """Largest absolute price move between two chronologically adjacent records."""

    amount: int
    start_date: str
    end_date: str

    def __str__(self) -> str:
        return f"{self.amount} ({self.start_date} -> {self.end_date})"
