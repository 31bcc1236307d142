"""Configuration command."""

import click
from rich.console import Console
from rich.syntax import Syntax

import tomli_w

from pricestats.core.config import ConfigManager, PriceStatsConfig

from ..error_handlers import handle_cli_errors

console = Console()


@click.command()
@click.option("--show", is_flag=True, help="Show the effective configuration")
@click.option("--init", "init_config", is_flag=True, help="Write a default configuration file")
@click.option("--force", is_flag=True, help="Overwrite an existing file with --init")
@click.pass_context
@handle_cli_errors
def config(ctx: click.Context, show: bool, init_config: bool, force: bool) -> None:
    """Manage pricestats configuration.

    \b
    Examples:
        pricestats config --show
        pricestats config --init
    """
    manager = ConfigManager(ctx.obj.get("config_file") if ctx.obj else None)

    if init_config:
        if manager.config_file.exists() and not force:
            console.print(
                f"Configuration already exists at {manager.config_file} (use --force)",
                style="yellow",
                markup=False,
            )
            return
        path = manager.save_config(PriceStatsConfig())
        console.print(f"Wrote default configuration to {path}", style="green", markup=False)
        return

    data = manager.load_config().model_dump(mode="json", exclude_none=True)
    console.print(f"Configuration file: {manager.config_file}", style="dim", markup=False)
    console.print(Syntax(tomli_w.dumps(data), "toml"))
