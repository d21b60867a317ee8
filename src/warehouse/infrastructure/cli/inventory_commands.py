"""CLI commands for browsing and adjusting stock.

State is in memory, so each command runs against freshly seeded sample
data.
"""

from __future__ import annotations

import logging
from datetime import datetime

import click

from warehouse.application.increase_stock import IncreaseStockHandler
from warehouse.application.remove_item import RemoveItemHandler
from warehouse.application.show_inventory import ShowInventoryHandler
from warehouse.application.update_quantity import UpdateQuantityHandler
from warehouse.domain.exceptions import DomainException
from warehouse.infrastructure.bootstrap import (
    ELECTRONIC,
    GROCERY,
    ITEM_KINDS,
    Warehouse,
    seeded_warehouse,
)

logger = logging.getLogger(__name__)

_kind_option = click.option(
    "--kind",
    required=True,
    type=click.Choice(ITEM_KINDS),
    help="Which repository to act on.",
)
_today_option = click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date for seeded expiry dates (YYYY-MM-DD).",
)


def print_listing(warehouse: Warehouse, kind: str) -> None:
    """Print every item of one kind, one display line per item."""
    handler = ShowInventoryHandler(inventory_repo=warehouse.repository_for(kind))
    for line in handler.handle():
        click.echo(line.description)


@click.command("list")
@click.option(
    "--kind",
    type=click.Choice(ITEM_KINDS + ("all",)),
    default="all",
    show_default=True,
    help="Which repository to list.",
)
@_today_option
def inventory_list(kind: str, today: datetime | None) -> None:
    """List seeded stock."""
    warehouse = seeded_warehouse(today.date() if today else None)

    if kind in (GROCERY, "all"):
        click.echo("-- Groceries --")
        print_listing(warehouse, GROCERY)
    if kind == "all":
        click.echo()
    if kind in (ELECTRONIC, "all"):
        click.echo("-- Electronics --")
        print_listing(warehouse, ELECTRONIC)


@click.command("increase")
@_kind_option
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--amount", required=True, type=int, help="Units to add.")
def inventory_increase(kind: str, item_id: int, amount: int) -> None:
    """Increase stock for an item."""
    warehouse = seeded_warehouse()
    handler = IncreaseStockHandler(inventory_repo=warehouse.repository_for(kind))

    try:
        change = handler.handle(item_id, amount)
    except DomainException as exc:
        logger.info("Increase stock for item %s failed: %s", item_id, exc)
        raise click.ClickException(str(exc))

    click.echo(f"Stock increased for ID {change.item_id}. New Qty: {change.new_quantity}")


@click.command("remove")
@_kind_option
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
def inventory_remove(kind: str, item_id: int) -> None:
    """Remove an item from stock."""
    warehouse = seeded_warehouse()
    handler = RemoveItemHandler(inventory_repo=warehouse.repository_for(kind))

    try:
        handler.handle(item_id)
    except DomainException as exc:
        logger.info("Remove item %s failed: %s", item_id, exc)
        raise click.ClickException(str(exc))

    click.echo(f"Item with ID {item_id} removed successfully.")


@click.command("update")
@_kind_option
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
def inventory_update(kind: str, item_id: int, quantity: int) -> None:
    """Set the quantity of an item."""
    warehouse = seeded_warehouse()
    handler = UpdateQuantityHandler(inventory_repo=warehouse.repository_for(kind))

    try:
        line = handler.handle(item_id, quantity)
    except DomainException as exc:
        logger.info("Update quantity for item %s failed: %s", item_id, exc)
        raise click.ClickException(str(exc))

    click.echo(f"Quantity for ID {line.item_id} set to {line.quantity}.")
