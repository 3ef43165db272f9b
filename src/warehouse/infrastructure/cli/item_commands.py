"""CLI commands for inventory items."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import click

from warehouse.application.add_item import AddItemHandler
from warehouse.application.dto import ItemLineDTO
from warehouse.application.increase_stock import IncreaseStockHandler
from warehouse.application.remove_item import RemoveItemHandler
from warehouse.application.show_inventory import ShowInventoryHandler, ShowItemHandler
from warehouse.application.update_quantity import UpdateQuantityHandler
from warehouse.domain.model.electronic_item import ElectronicItem
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.model.stock_item import StockItem
from warehouse.infrastructure.bootstrap import (
    RECORD_FILES,
    load_repository,
    open_repository,
    record_store,
)
from warehouse.infrastructure.cli.errors import HANDLED_ERRORS, to_click_error
from warehouse.infrastructure.config import Settings

kind_option = click.option(
    "--kind",
    required=True,
    type=click.Choice(sorted(RECORD_FILES)),
    help="Which inventory to operate on.",
)
id_option = click.option("--id", "record_id", required=True, type=int, help="Item ID.")


def _add(settings: Settings, build: Callable[[], InventoryRecord]) -> ItemLineDTO:
    """Construct a record and insert it; both steps may raise domain errors."""
    try:
        record = build()
        with open_repository(record_store(record.KIND, settings.data_dir)) as repo:
            return AddItemHandler(repo).handle(record)
    except HANDLED_ERRORS as exc:
        raise to_click_error(exc)


def _echo_item_added(dto: ItemLineDTO) -> None:
    click.echo(f"Item #{dto.id} '{dto.name}' added ({dto.kind}, qty={dto.quantity})")


@click.command("add-electronic")
@id_option
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--brand", required=True, help="Manufacturer.")
@click.option("--warranty-months", required=True, type=int, help="Warranty length.")
@click.pass_obj
def item_add_electronic(
    settings: Settings,
    record_id: int,
    name: str,
    quantity: int,
    brand: str,
    warranty_months: int,
) -> None:
    """Add an electronic item."""
    dto = _add(
        settings,
        lambda: ElectronicItem(
            id=record_id,
            name=name,
            quantity=quantity,
            brand=brand,
            warranty_months=warranty_months,
        ),
    )
    _echo_item_added(dto)


@click.command("add-grocery")
@id_option
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option(
    "--expiry",
    required=True,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Expiry date (YYYY-MM-DD).",
)
@click.pass_obj
def item_add_grocery(
    settings: Settings, record_id: int, name: str, quantity: int, expiry: datetime
) -> None:
    """Add a grocery item."""
    dto = _add(
        settings,
        lambda: GroceryItem(
            id=record_id, name=name, quantity=quantity, expiry_date=expiry.date()
        ),
    )
    _echo_item_added(dto)


@click.command("add-stock")
@id_option
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option(
    "--date-added",
    type=click.DateTime(),
    default=None,
    help="When the stock arrived (defaults to now).",
)
@click.pass_obj
def item_add_stock(
    settings: Settings,
    record_id: int,
    name: str,
    quantity: int,
    date_added: datetime | None,
) -> None:
    """Add a dated stock entry."""
    dto = _add(
        settings,
        lambda: StockItem(
            id=record_id,
            name=name,
            quantity=quantity,
            date_added=date_added or datetime.now(),
        ),
    )
    _echo_item_added(dto)


@click.command("list")
@kind_option
@click.pass_obj
def item_list(settings: Settings, kind: str) -> None:
    """List every item of one kind, oldest first."""
    try:
        repo = load_repository(record_store(kind, settings.data_dir))
        lines = ShowInventoryHandler(repo).handle()
    except HANDLED_ERRORS as exc:
        raise to_click_error(exc)

    if not lines:
        click.echo("No items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Qty':>8}  Details")
    click.echo("-" * 60)
    for line in lines:
        click.echo(f"{line.id:<6} {line.name:<20} {line.quantity:>8}  {line.details}")


@click.command("show")
@kind_option
@id_option
@click.pass_obj
def item_show(settings: Settings, kind: str, record_id: int) -> None:
    """Show a single item."""
    try:
        repo = load_repository(record_store(kind, settings.data_dir))
        dto = ShowItemHandler(repo).handle(record_id)
    except HANDLED_ERRORS as exc:
        raise to_click_error(exc)

    click.echo(f"Item #{dto.id}  ({dto.kind})")
    click.echo(f"Name:     {dto.name}")
    click.echo(f"Quantity: {dto.quantity}")
    click.echo(f"Details:  {dto.details}")


@click.command("remove")
@kind_option
@id_option
@click.pass_obj
def item_remove(settings: Settings, kind: str, record_id: int) -> None:
    """Remove an item."""
    try:
        with open_repository(record_store(kind, settings.data_dir)) as repo:
            RemoveItemHandler(repo).handle(record_id)
    except HANDLED_ERRORS as exc:
        raise to_click_error(exc)

    click.echo(f"Item #{record_id} removed.")


@click.command("set-quantity")
@kind_option
@id_option
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.pass_obj
def item_set_quantity(
    settings: Settings, kind: str, record_id: int, quantity: int
) -> None:
    """Set an item's quantity."""
    try:
        with open_repository(record_store(kind, settings.data_dir)) as repo:
            dto = UpdateQuantityHandler(repo).handle(record_id, quantity)
    except HANDLED_ERRORS as exc:
        raise to_click_error(exc)

    click.echo(f"Item #{dto.id} quantity set to {dto.quantity}")


@click.command("increase")
@kind_option
@id_option
@click.option("--amount", required=True, type=int, help="Units to add.")
@click.pass_obj
def item_increase(settings: Settings, kind: str, record_id: int, amount: int) -> None:
    """Increase an item's stock."""
    try:
        with open_repository(record_store(kind, settings.data_dir)) as repo:
            dto = IncreaseStockHandler(repo).handle(record_id, amount)
    except HANDLED_ERRORS as exc:
        raise to_click_error(exc)

    click.echo(f"Increased stock for item #{dto.id}. New quantity: {dto.quantity}")

