"""Integration tests for the SeedInventory use case."""

from datetime import date

import pytest

from warehouse.application.seed_inventory import SeedInventoryHandler, add_months
from warehouse.domain.exceptions import DuplicateItemError
from warehouse.domain.model.item import ElectronicItem, GroceryItem
from warehouse.infrastructure.persistence.in_memory_inventory_repository import (
    InMemoryInventoryRepository,
)

TODAY = date(2026, 10, 19)


def _setup():
    electronics = InMemoryInventoryRepository[ElectronicItem]()
    groceries = InMemoryInventoryRepository[GroceryItem]()
    handler = SeedInventoryHandler(electronics_repo=electronics, grocery_repo=groceries)
    return handler, electronics, groceries


class TestSeedInventory:

    def test_seeds_three_items_per_repository(self):
        handler, electronics, groceries = _setup()
        handler.handle(today=TODAY)

        assert [i.id for i in electronics.get_all_items()] == [201, 202, 203]
        assert [i.id for i in groceries.get_all_items()] == [101, 102, 103]

    def test_electronics_sample_data(self):
        handler, electronics, _ = _setup()
        handler.handle(today=TODAY)

        assert electronics.get_item_by_id(202) == ElectronicItem(
            202, "Laptop", 8, brand="AeroBook", warranty_months=12
        )

    def test_grocery_expiry_dates_relative_to_today(self):
        handler, _, groceries = _setup()
        handler.handle(today=TODAY)

        assert groceries.get_item_by_id(101).expiry_date == date(2027, 10, 19)
        assert groceries.get_item_by_id(102).expiry_date == date(2026, 11, 2)
        assert groceries.get_item_by_id(103).expiry_date == date(2026, 10, 29)

    def test_seeding_twice_is_a_duplicate(self):
        handler, _, _ = _setup()
        handler.handle(today=TODAY)
        with pytest.raises(DuplicateItemError):
            handler.handle(today=TODAY)


class TestAddMonths:

    def test_same_day_next_year(self):
        assert add_months(date(2026, 10, 19), 12) == date(2027, 10, 19)

    def test_rolls_over_year(self):
        assert add_months(date(2026, 11, 5), 3) == date(2027, 2, 5)

    def test_clamps_to_month_end(self):
        assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)

    def test_leap_day(self):
        assert add_months(date(2028, 2, 29), 12) == date(2029, 2, 28)
