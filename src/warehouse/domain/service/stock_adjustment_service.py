"""Domain service: Stock Adjustment.

Raising an item's stock is a read-compute-write sequence over the
repository.  The order of the checks matters to callers because each
failure is reported under its own kind:

  1. a negative amount is rejected before anything is looked up,
  2. an unknown ID is rejected next,
  3. a sum beyond MAX_QUANTITY is rejected before anything is written.
"""

from __future__ import annotations

from typing import Generic

from warehouse.domain.exceptions import InvalidQuantityError
from warehouse.domain.model.item import ItemT
from warehouse.domain.model.quantity import checked_add
from warehouse.domain.repository.inventory_repository import InventoryRepository


class StockAdjustmentService(Generic[ItemT]):

    def __init__(self, inventory_repo: InventoryRepository[ItemT]) -> None:
        self._inventory_repo = inventory_repo

    def increase_stock(self, item_id: int, amount: int) -> ItemT:
        """Add ``amount`` units to an item and return the updated item."""
        if amount < 0:
            raise InvalidQuantityError("Increase amount cannot be negative.")

        item = self._inventory_repo.get_item_by_id(item_id)
        new_quantity = checked_add(item.quantity, amount)
        return self._inventory_repo.update_quantity(item_id, new_quantity)
