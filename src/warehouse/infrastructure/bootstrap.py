"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Stock lives in memory only, so every session starts from a fresh
warehouse and, for the CLI, from freshly seeded sample data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from warehouse.application.seed_inventory import SeedInventoryHandler
from warehouse.domain.model.item import ElectronicItem, GroceryItem
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.infrastructure.persistence.in_memory_inventory_repository import (
    InMemoryInventoryRepository,
)

ELECTRONIC = "electronic"
GROCERY = "grocery"
ITEM_KINDS = (ELECTRONIC, GROCERY)


def electronics_repository() -> InMemoryInventoryRepository[ElectronicItem]:
    return InMemoryInventoryRepository[ElectronicItem]()


def grocery_repository() -> InMemoryInventoryRepository[GroceryItem]:
    return InMemoryInventoryRepository[GroceryItem]()


@dataclass
class Warehouse:
    """One repository per item variant, owned by a single session."""

    electronics: InventoryRepository[ElectronicItem] = field(
        default_factory=electronics_repository
    )
    groceries: InventoryRepository[GroceryItem] = field(
        default_factory=grocery_repository
    )

    def repository_for(self, kind: str) -> InventoryRepository:
        if kind == ELECTRONIC:
            return self.electronics
        if kind == GROCERY:
            return self.groceries
        raise ValueError(f"Unknown item kind: {kind!r}")


def seeded_warehouse(today: date | None = None) -> Warehouse:
    warehouse = Warehouse()
    SeedInventoryHandler(
        electronics_repo=warehouse.electronics,
        grocery_repo=warehouse.groceries,
    ).handle(today=today)
    return warehouse
