"""pricestats CLI main entry point."""

from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..core.config import ConfigManager, PriceStatsConfig
from ..logging import configure_logging, get_logger
from .commands import change, config, records, summary
from .error_handlers import handle_cli_errors


def setup_logging(config: PriceStatsConfig, verbose: int = 0) -> None:
    """Configure logging from the loaded configuration; -v/-vv override the level."""
    level = None
    if verbose > 1:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"

    configure_logging(
        config.general.logging,
        level=level,
        service_name="pricestats-cli",
        version=__version__,
    )


@click.group()
@click.version_option(version=__version__, prog_name="pricestats")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.pass_context
@handle_cli_errors
def cli(ctx: click.Context, config_file: Optional[Path], verbose: int) -> None:
    """pricestats: price statistics for a single stock.

    Records are given as PRICE@DATE. Dates are ordered as ISO strings after
    being parsed with --date-format.

    \b
    Examples:
        pricestats summary AAPL "Apple Inc." -r 110@2023-06-29 -r 112@2023-07-01
        pricestats change AAPL "Apple Inc." -r 90@2023-06-25 -r 110@2023-06-29
        pricestats config --show
    """
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand == "config":
        # The config command must still work when the file is invalid.
        return

    loaded = ConfigManager(config_file).load_config()
    ctx.obj["config"] = loaded
    setup_logging(loaded, verbose)
    get_logger("pricestats.cli").debug(
        "pricestats CLI started", version=__version__, verbose_level=verbose
    )


cli.add_command(summary)
cli.add_command(change)
cli.add_command(records)
cli.add_command(config)


def main():
    cli()


if __name__ == "__main__":
    main()
