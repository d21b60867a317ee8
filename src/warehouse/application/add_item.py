"""Application service: Add Item use case."""

from __future__ import annotations

import logging
from typing import Generic

from warehouse.domain.model.item import ItemT
from warehouse.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class AddItemHandler(Generic[ItemT]):

    def __init__(self, inventory_repo: InventoryRepository[ItemT]) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item: ItemT) -> None:
        """Store a new item.

        DuplicateItemError and InvalidQuantityError propagate unchanged;
        the repository is left as it was.
        """
        self._inventory_repo.add_item(item)
        logger.info("Added item %s '%s' (qty=%d)", item.id, item.name, item.quantity)
