"""Stocked goods held by an inventory repository.

Items are immutable records.  The only field that ever changes is
``quantity``, and it changes by replacement: the repository stores the
copy returned by ``with_quantity`` in place of the old record.  A caller
holding an item can therefore never alter what the repository holds.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import TypeVar

_ItemSelf = TypeVar("_ItemSelf", bound="StockItem")


@dataclass(frozen=True)
class StockItem:
    """Capability shared by every item variant: id, name and quantity.

    No validation happens here; the repository enforces quantity rules
    at the point quantities change through its API.
    """

    id: int
    name: str
    quantity: int

    def with_quantity(self: _ItemSelf, quantity: int) -> _ItemSelf:
        """Return a copy of this item with ``quantity`` replaced."""
        return replace(self, quantity=quantity)


@dataclass(frozen=True)
class ElectronicItem(StockItem):
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"[Electronic] ID: {self.id}, {self.name} "
            f"(Brand: {self.brand}, Warranty: {self.warranty_months} mo) "
            f"– Qty: {self.quantity}"
        )


@dataclass(frozen=True)
class GroceryItem(StockItem):
    expiry_date: date

    def __str__(self) -> str:
        return (
            f"[Grocery] ID: {self.id}, {self.name} "
            f"(Expires: {self.expiry_date.isoformat()}) "
            f"– Qty: {self.quantity}"
        )


ItemT = TypeVar("ItemT", bound=StockItem)
