"""Application service: Increase Stock use case.

Delegates the ordered checks (negative amount, unknown ID, overflow) to
the StockAdjustmentService domain service and reports the result.
"""

from __future__ import annotations

import logging

from warehouse.application.dto import StockChangeDTO
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.domain.service.stock_adjustment_service import (
    StockAdjustmentService,
)

logger = logging.getLogger(__name__)


class IncreaseStockHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: int, amount: int) -> StockChangeDTO:
        svc = StockAdjustmentService(self._inventory_repo)
        updated = svc.increase_stock(item_id, amount)

        logger.info("Stock for item %s increased by %d", item_id, amount)
        return StockChangeDTO(
            item_id=updated.id,
            name=updated.name,
            previous_quantity=updated.quantity - amount,
            new_quantity=updated.quantity,
        )
