"""CLI command that walks through the warehouse scenario end to end.

Every failure in the scenario is reported with a prefixed message and
the run continues; the command itself always succeeds.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

import click

from warehouse.application.add_item import AddItemHandler
from warehouse.application.increase_stock import IncreaseStockHandler
from warehouse.application.remove_item import RemoveItemHandler
from warehouse.application.seed_inventory import add_months
from warehouse.application.update_quantity import UpdateQuantityHandler
from warehouse.domain.exceptions import ErrorKind, InventoryError
from warehouse.domain.model.item import GroceryItem
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.infrastructure.bootstrap import ELECTRONIC, GROCERY, seeded_warehouse
from warehouse.infrastructure.cli.inventory_commands import print_listing

logger = logging.getLogger(__name__)

# Failure kinds an increase-stock call site treats as non-fatal.
_INCREASE_STOCK_KINDS = frozenset(
    {
        ErrorKind.ITEM_NOT_FOUND,
        ErrorKind.INVALID_QUANTITY,
        ErrorKind.ARITHMETIC_OVERFLOW,
    }
)


def _report(label: str, exc: InventoryError) -> None:
    logger.info("%s failed [%s]: %s", label, exc.kind.value, exc.message)
    click.echo(f"[{label} Error] {exc.message}")


def increase_stock(repo: InventoryRepository, item_id: int, amount: int) -> None:
    """Increase stock and report the outcome; recoverable failures never abort."""
    try:
        change = IncreaseStockHandler(repo).handle(item_id, amount)
    except InventoryError as exc:
        if exc.kind not in _INCREASE_STOCK_KINDS:
            raise
        _report("IncreaseStock", exc)
        return
    click.echo(f"Stock increased for ID {change.item_id}. New Qty: {change.new_quantity}")


def remove_item(repo: InventoryRepository, item_id: int) -> None:
    try:
        RemoveItemHandler(repo).handle(item_id)
    except InventoryError as exc:
        if exc.kind is not ErrorKind.ITEM_NOT_FOUND:
            raise
        _report("Remove", exc)
        return
    click.echo(f"Item with ID {item_id} removed successfully.")


@click.command("demo")
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date for seeded expiry dates (YYYY-MM-DD).",
)
def demo(today: datetime | None) -> None:
    """Seed the warehouse, list it, then exercise each failure kind."""
    reference = today.date() if today else date.today()
    warehouse = seeded_warehouse(reference)

    click.echo("=== Warehouse Inventory Management ===")
    click.echo()

    click.echo("-- Groceries --")
    print_listing(warehouse, GROCERY)
    click.echo()

    click.echo("-- Electronics --")
    print_listing(warehouse, ELECTRONIC)
    click.echo()

    click.echo("-- Exception Scenarios --")

    try:
        AddItemHandler(warehouse.groceries).handle(
            GroceryItem(101, "Rice (10kg)", 20, expiry_date=add_months(reference, 10))
        )
    except InventoryError as exc:
        if exc.kind is not ErrorKind.DUPLICATE_ITEM:
            raise
        _report("Duplicate Add", exc)

    remove_item(warehouse.electronics, 999)

    try:
        UpdateQuantityHandler(warehouse.groceries).handle(102, -5)
    except InventoryError as exc:
        if exc.kind is not ErrorKind.INVALID_QUANTITY:
            raise
        _report("Update", exc)

    increase_stock(warehouse.groceries, 103, 12)
    increase_stock(warehouse.groceries, 404, 5)
    increase_stock(warehouse.electronics, 202, -3)
