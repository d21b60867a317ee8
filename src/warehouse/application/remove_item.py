"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from warehouse.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: int) -> None:
        self._inventory_repo.remove_item(item_id)
        logger.info("Removed item %s", item_id)
