from dataclasses import dataclass


@dataclass(frozen=True)
class Stock:
    """A tradable instrument, identified by value over symbol and display name."""

    symbol: str
    name: str

    def __str__(self) -> str:
        return f"S|{self.symbol}|{self.name}"
