"""Domain service: Stock Reconciliation.

Applies a placed order to catalog stock.  Each order line is handled on
its own: a product that has vanished from the catalog is skipped, a
product whose stock would drop below one is removed from the catalog,
and any other product is saved with its reduced stock.

There is no validate-then-mutate phase: the order is already persisted
when this runs, so a line that cannot be reconciled must not stop the
lines after it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from shopmanager.domain.model.order import OrderLine
from shopmanager.domain.repository.product_repository import ProductRepository

logger = logging.getLogger("shopmanager.stock")


class ReconciliationOutcome(Enum):
    ADJUSTED = "ADJUSTED"
    DELETED = "DELETED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class LineReconciliation:
    product_id: int
    outcome: ReconciliationOutcome
    remaining: int | None = None


class StockReconciliationService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reconcile(self, lines: Iterable[OrderLine]) -> list[LineReconciliation]:
        """Deduct every line's quantity from the catalog.

        Returns one outcome per line, in line order.
        """
        outcomes: list[LineReconciliation] = []
        for line in lines:
            try:
                outcomes.append(self._reconcile_line(line))
            except Exception:
                logger.exception(
                    "Stock reconciliation failed for product #%s", line.product_id
                )
                outcomes.append(
                    LineReconciliation(line.product_id, ReconciliationOutcome.FAILED)
                )
        return outcomes

    def _reconcile_line(self, line: OrderLine) -> LineReconciliation:
        product = self._product_repo.get_by_id(line.product_id)
        if product is None:
            logger.info(
                "Product #%s no longer in catalog, stock not adjusted",
                line.product_id,
            )
            return LineReconciliation(line.product_id, ReconciliationOutcome.SKIPPED)

        remaining = product.remaining_after(line.quantity.value)
        if remaining < 1:
            self._product_repo.delete(line.product_id)
            logger.info(
                "Product #%s depleted (%s left), removed from catalog",
                line.product_id,
                remaining,
            )
            return LineReconciliation(
                line.product_id, ReconciliationOutcome.DELETED, remaining
            )

        product.restock_to(remaining)
        self._product_repo.save(product)
        logger.debug("Product #%s stock now %s", line.product_id, remaining)
        return LineReconciliation(
            line.product_id, ReconciliationOutcome.ADJUSTED, remaining
        )
