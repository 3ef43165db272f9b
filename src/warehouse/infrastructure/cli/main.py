from dataclasses import replace
from pathlib import Path

import click

from warehouse.infrastructure.cli.item_commands import (
    item_add_electronic,
    item_add_grocery,
    item_add_stock,
    item_increase,
    item_list,
    item_remove,
    item_set_quantity,
    item_show,
)
from warehouse.infrastructure.cli.seed_commands import seed
from warehouse.infrastructure.config import Settings
from warehouse.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON data files (overrides WAREHOUSE_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """Warehouse: keyed inventory store"""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc))
    if data_dir is not None:
        settings = replace(settings, data_dir=data_dir)
    configure_logging(settings.log_level, settings.log_format)
    ctx.obj = settings


@cli.group()
def item() -> None:
    """Manage inventory items."""


# Register subcommands
cli.add_command(seed)
item.add_command(item_add_electronic)
item.add_command(item_add_grocery)
item.add_command(item_add_stock)
item.add_command(item_increase)
item.add_command(item_list)
item.add_command(item_remove)
item.add_command(item_set_quantity)
item.add_command(item_show)
