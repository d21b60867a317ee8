"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from warehouse.application.dto import InventoryLineDTO
from warehouse.domain.repository.inventory_repository import InventoryRepository


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[InventoryLineDTO]:
        items = self._inventory_repo.get_all_items()
        return [
            InventoryLineDTO(
                item_id=item.id,
                name=item.name,
                quantity=item.quantity,
                description=str(item),
            )
            for item in items
        ]
