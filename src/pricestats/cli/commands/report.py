"""Aggregate price report commands."""

from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from pricestats.core.config import PriceStatsConfig, check_date_format
from pricestats.models import PRICE_COLUMN, DATE_COLUMN, PriceChange, Stock, StockCollection

from ..error_handlers import handle_cli_errors
from ..utils.record_parser import build_collection

console = Console()

NOT_AVAILABLE = "n/a"


def _date_format_option(ctx, param, value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return check_date_format(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


def collection_options(func):
    """Arguments shared by every command that builds a StockCollection."""
    func = click.option(
        "--date-format",
        type=str,
        default=None,
        callback=_date_format_option,
        help="strptime format of record dates (default from config, ISO %Y-%m-%d)",
    )(func)
    func = click.option(
        "--record",
        "-r",
        "records",
        multiple=True,
        metavar="PRICE@DATE",
        help="Price record, repeatable (e.g. -r 110@2023-06-29)",
    )(func)
    func = click.argument("name")(func)
    func = click.argument("symbol")(func)
    return func


def _config(ctx: click.Context) -> PriceStatsConfig:
    if ctx.obj and ctx.obj.get("config") is not None:
        return ctx.obj["config"]
    return PriceStatsConfig()


def _collect(
    ctx: click.Context,
    symbol: str,
    name: str,
    records: Tuple[str, ...],
    date_format: Optional[str],
) -> StockCollection:
    config = _config(ctx)
    return build_collection(
        Stock(symbol, name), records, date_format or config.general.date_format
    )


def format_price(value: int, config: PriceStatsConfig) -> str:
    return f"{config.display.currency_symbol}{value}"


def format_average(value: float, config: PriceStatsConfig) -> str:
    precision = config.display.average_precision
    return f"{config.display.currency_symbol}{value:.{precision}f}"


def format_change(change: Optional[PriceChange], config: PriceStatsConfig) -> str:
    if change is None:
        return NOT_AVAILABLE
    return (
        f"{format_price(change.amount, config)} "
        f"({change.start_date} -> {change.end_date})"
    )


@click.command()
@collection_options
@click.pass_context
@handle_cli_errors
def summary(
    ctx: click.Context,
    symbol: str,
    name: str,
    records: Tuple[str, ...],
    date_format: Optional[str],
) -> None:
    """Show count, max, min, average and biggest change for a stock.

    \b
    Examples:
        pricestats summary AAPL "Apple Inc." -r 110@2023-06-29 -r 112@2023-07-01
        pricestats summary AAPL "Apple Inc." --date-format %d-%m-%Y -r 90@25-06-2023
    """
    config = _config(ctx)
    result = _collect(ctx, symbol, name, records, date_format).summary()

    table = Table(title=f"{result.stock.symbol} - {result.stock.name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Records", str(result.count))
    if result.count:
        table.add_row("Max price", format_price(result.max_price, config))
        table.add_row("Min price", format_price(result.min_price, config))
        table.add_row("Average price", format_average(result.avg_price, config))
    else:
        table.add_row("Max price", NOT_AVAILABLE)
        table.add_row("Min price", NOT_AVAILABLE)
        table.add_row("Average price", NOT_AVAILABLE)
    table.add_row("Biggest change", format_change(result.biggest_change, config))

    console.print(table)


@click.command()
@collection_options
@click.pass_context
@handle_cli_errors
def change(
    ctx: click.Context,
    symbol: str,
    name: str,
    records: Tuple[str, ...],
    date_format: Optional[str],
) -> None:
    """Show the biggest price move between date-adjacent records.

    \b
    Examples:
        pricestats change AAPL "Apple Inc." -r 110@2023-06-29 -r 90@2023-06-25
    """
    config = _config(ctx)
    collection = _collect(ctx, symbol, name, records, date_format)
    biggest = collection.biggest_change()

    if biggest is None:
        console.print(
            f"Need at least 2 records to compute a change, got {len(collection)}",
            style="yellow",
        )
        return

    console.print(f"Biggest change: {format_change(biggest, config)}", highlight=False)


@click.command()
@collection_options
@click.pass_context
@handle_cli_errors
def records(
    ctx: click.Context,
    symbol: str,
    name: str,
    records: Tuple[str, ...],
    date_format: Optional[str],
) -> None:
    """List records in date order.

    \b
    Examples:
        pricestats records AAPL "Apple Inc." -r 112@2023-07-01 -r 110@2023-06-29
    """
    config = _config(ctx)
    df = _collect(ctx, symbol, name, records, date_format).to_dataframe()

    table = Table(title=f"{symbol} - {name}")
    table.add_column("Date", style="cyan")
    table.add_column("Price", justify="right")
    for row in df.itertuples(index=False):
        table.add_row(
            getattr(row, DATE_COLUMN), format_price(getattr(row, PRICE_COLUMN), config)
        )

    console.print(table)
