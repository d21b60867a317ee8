"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain records to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one stocked item as displayed to the user."""

    item_id: int
    name: str
    quantity: int
    description: str  # formatted display line, e.g. "[Grocery] ID: 101, ..."


@dataclass(frozen=True)
class StockChangeDTO:
    """Output: the outcome of a quantity change."""

    item_id: int
    name: str
    previous_quantity: int
    new_quantity: int
