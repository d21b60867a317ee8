"""Application service: Update Quantity use case.

Sets an item's quantity to an absolute value.  The repository checks the
range before the lookup, so an out-of-range value on an unknown ID is
still reported as an invalid quantity.
"""

from __future__ import annotations

import logging

from warehouse.application.dto import InventoryLineDTO
from warehouse.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class UpdateQuantityHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: int, new_quantity: int) -> InventoryLineDTO:
        updated = self._inventory_repo.update_quantity(item_id, new_quantity)
        logger.info("Quantity for item %s set to %d", item_id, updated.quantity)
        return InventoryLineDTO(
            item_id=updated.id,
            name=updated.name,
            quantity=updated.quantity,
            description=str(updated),
        )
