"""Dict-backed implementation of InventoryRepository."""

from __future__ import annotations

from warehouse.domain.exceptions import (
    DuplicateItemError,
    ItemNotFoundError,
)
from warehouse.domain.model.item import ItemT
from warehouse.domain.model.quantity import check_quantity
from warehouse.domain.repository.inventory_repository import InventoryRepository


class InMemoryInventoryRepository(InventoryRepository[ItemT]):

    def __init__(self, items: list[ItemT] | None = None) -> None:
        self._store: dict[int, ItemT] = {}
        for item in items or []:
            self.add_item(item)

    # --- InventoryRepository interface ----------------------------------------

    def add_item(self, item: ItemT) -> None:
        if item.id in self._store:
            raise DuplicateItemError(item.id)
        check_quantity(item.quantity)
        self._store[item.id] = item

    def get_item_by_id(self, item_id: int) -> ItemT:
        try:
            return self._store[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def remove_item(self, item_id: int) -> None:
        if self._store.pop(item_id, None) is None:
            raise ItemNotFoundError(
                item_id, f"Cannot remove – item with ID {item_id} not found."
            )

    def update_quantity(self, item_id: int, new_quantity: int) -> ItemT:
        check_quantity(new_quantity)
        item = self.get_item_by_id(item_id)
        # Replacing an existing key keeps its position in the listing.
        updated = item.with_quantity(new_quantity)
        self._store[item_id] = updated
        return updated

    def get_all_items(self) -> list[ItemT]:
        return list(self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._store
