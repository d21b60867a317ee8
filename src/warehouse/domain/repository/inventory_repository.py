"""Abstract repository for stocked items.

Defined in the domain layer so the domain never depends on
infrastructure.  One repository instance holds exactly one item variant;
the type parameter keeps electronics and groceries in separate stores.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic

from warehouse.domain.model.item import ItemT


class InventoryRepository(ABC, Generic[ItemT]):
    """Keyed store of items.

    Invariants every implementation must hold:
    - no two stored items share an ``id``
    - every stored item has ``0 <= quantity <= MAX_QUANTITY``
    - an item's ``id`` never changes after insertion
    """

    @abstractmethod
    def add_item(self, item: ItemT) -> None:
        """Insert a new item.

        Raises DuplicateItemError if the ID is taken, InvalidQuantityError
        if the item's quantity is outside 0..MAX_QUANTITY.
        """

    @abstractmethod
    def get_item_by_id(self, item_id: int) -> ItemT:
        """Return the item with this ID, or raise ItemNotFoundError."""

    @abstractmethod
    def remove_item(self, item_id: int) -> None:
        """Permanently remove an item, or raise ItemNotFoundError."""

    @abstractmethod
    def update_quantity(self, item_id: int, new_quantity: int) -> ItemT:
        """Replace an item's quantity and return the updated item.

        The range of ``new_quantity`` (0..MAX_QUANTITY) is checked before
        the lookup, so an out-of-range value is always reported as
        InvalidQuantityError.
        """

    @abstractmethod
    def get_all_items(self) -> list[ItemT]:
        """Return a snapshot list of every stored item."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored items."""

    @abstractmethod
    def __contains__(self, item_id: object) -> bool:
        """Whether an item with this ID is stored."""
