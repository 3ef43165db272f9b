"""CLI command that loads the demo data set."""

from __future__ import annotations

import click

from warehouse.application.seed_inventory import SeedInventoryHandler
from warehouse.domain.model.electronic_item import ElectronicItem
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.domain.model.stock_item import StockItem
from warehouse.infrastructure.bootstrap import open_repository, record_store
from warehouse.infrastructure.cli.errors import HANDLED_ERRORS, to_click_error
from warehouse.infrastructure.config import Settings


@click.command("seed")
@click.pass_obj
def seed(settings: Settings) -> None:
    """Populate every inventory with sample items."""
    data_dir = settings.data_dir
    try:
        with (
            open_repository(record_store(ElectronicItem.KIND, data_dir)) as electronics,
            open_repository(record_store(GroceryItem.KIND, data_dir)) as groceries,
            open_repository(record_store(StockItem.KIND, data_dir)) as stock,
        ):
            report = SeedInventoryHandler(electronics, groceries, stock).handle()
    except HANDLED_ERRORS as exc:
        raise to_click_error(exc)

    for line in report.added:
        click.echo(f"Added   {line.kind:<10} #{line.id:<5} {line.name}")
    for line in report.skipped:
        click.echo(f"Skipped {line.kind:<10} #{line.id:<5} {line.name} (already exists)")
    click.echo(f"{len(report.added)} added, {len(report.skipped)} skipped.")
