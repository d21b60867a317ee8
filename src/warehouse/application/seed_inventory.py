"""Application service: Seed Inventory use case.

Populates the electronics and grocery repositories with the fixed sample
stock the warehouse demo starts from.  Grocery expiry dates are relative
to ``today``, which callers may pin for reproducible output.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta

from warehouse.application.add_item import AddItemHandler
from warehouse.domain.model.item import ElectronicItem, GroceryItem
from warehouse.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole months, clamping to the last day of the month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


class SeedInventoryHandler:

    def __init__(
        self,
        electronics_repo: InventoryRepository[ElectronicItem],
        grocery_repo: InventoryRepository[GroceryItem],
    ) -> None:
        self._electronics_repo = electronics_repo
        self._grocery_repo = grocery_repo

    def handle(self, today: date | None = None) -> None:
        today = today or date.today()

        electronics = [
            ElectronicItem(201, "Smartphone", 15, brand="TechNova", warranty_months=24),
            ElectronicItem(202, "Laptop", 8, brand="AeroBook", warranty_months=12),
            ElectronicItem(203, "Bluetooth Speaker", 25, brand="SoundMax", warranty_months=18),
        ]
        groceries = [
            GroceryItem(101, "Rice (5kg)", 40, expiry_date=add_months(today, 12)),
            GroceryItem(102, "Milk (1L)", 60, expiry_date=today + timedelta(days=14)),
            GroceryItem(103, "Eggs (Tray)", 30, expiry_date=today + timedelta(days=10)),
        ]

        add_electronic = AddItemHandler(self._electronics_repo)
        for item in electronics:
            add_electronic.handle(item)
        add_grocery = AddItemHandler(self._grocery_repo)
        for item in groceries:
            add_grocery.handle(item)

        logger.debug(
            "Seeded %d electronic and %d grocery items",
            len(electronics), len(groceries),
        )
