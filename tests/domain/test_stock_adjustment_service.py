"""Unit tests for the StockAdjustmentService domain service."""

from datetime import date

import pytest

from warehouse.domain.exceptions import (
    ArithmeticOverflowError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from warehouse.domain.model.item import ElectronicItem, GroceryItem
from warehouse.domain.model.quantity import MAX_QUANTITY
from warehouse.domain.service.stock_adjustment_service import (
    StockAdjustmentService,
)
from warehouse.infrastructure.persistence.in_memory_inventory_repository import (
    InMemoryInventoryRepository,
)


def _groceries():
    return InMemoryInventoryRepository(
        [
            GroceryItem(102, "Milk (1L)", 60, expiry_date=date(2026, 11, 2)),
            GroceryItem(103, "Eggs (Tray)", 30, expiry_date=date(2026, 10, 29)),
        ]
    )


class TestIncreaseStockHappyPath:

    def test_increase_adds_to_quantity(self):
        repo = _groceries()
        svc = StockAdjustmentService(repo)

        updated = svc.increase_stock(103, 12)

        assert updated.quantity == 42
        assert repo.get_item_by_id(103).quantity == 42

    def test_increase_by_zero_is_allowed(self):
        repo = _groceries()
        StockAdjustmentService(repo).increase_stock(102, 0)
        assert repo.get_item_by_id(102).quantity == 60

    def test_increase_up_to_max_quantity(self):
        repo = InMemoryInventoryRepository(
            [ElectronicItem(1, "Cable", MAX_QUANTITY - 1, brand="X", warranty_months=0)]
        )
        updated = StockAdjustmentService(repo).increase_stock(1, 1)
        assert updated.quantity == MAX_QUANTITY


class TestIncreaseStockFailures:

    def test_unknown_id_rejected(self):
        svc = StockAdjustmentService(_groceries())
        with pytest.raises(ItemNotFoundError, match="404"):
            svc.increase_stock(404, 5)

    def test_negative_amount_rejected(self):
        repo = InMemoryInventoryRepository(
            [ElectronicItem(202, "Laptop", 8, brand="AeroBook", warranty_months=12)]
        )
        with pytest.raises(InvalidQuantityError, match="Increase amount cannot be negative"):
            StockAdjustmentService(repo).increase_stock(202, -3)
        assert repo.get_item_by_id(202).quantity == 8

    def test_negative_amount_checked_before_lookup(self):
        svc = StockAdjustmentService(_groceries())
        with pytest.raises(InvalidQuantityError):
            svc.increase_stock(404, -1)

    def test_overflow_rejected_and_quantity_unchanged(self):
        repo = InMemoryInventoryRepository(
            [ElectronicItem(1, "Cable", MAX_QUANTITY, brand="X", warranty_months=0)]
        )
        with pytest.raises(ArithmeticOverflowError):
            StockAdjustmentService(repo).increase_stock(1, 1)
        assert repo.get_item_by_id(1).quantity == MAX_QUANTITY


class TestIncreaseStockAfterUpdate:

    def test_stock_set_to_max_rejects_only_positive_increase(self):
        repo = InMemoryInventoryRepository(
            [ElectronicItem(1, "Cable", 5, brand="X", warranty_months=0)]
        )
        svc = StockAdjustmentService(repo)
        repo.update_quantity(1, MAX_QUANTITY)

        assert svc.increase_stock(1, 0).quantity == MAX_QUANTITY
        with pytest.raises(ArithmeticOverflowError):
            svc.increase_stock(1, 1)
