"""Result of a checkout attempt.

Checkout of an empty cart is a normal, user-correctable outcome, so it
comes back as a value carrying error codes instead of an exception.
A successful result also carries the per-line stock outcomes so the
caller can see which products were adjusted, removed or skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopmanager.domain.model.order import Order
from shopmanager.domain.service.stock_reconciliation_service import (
    LineReconciliation,
)


@dataclass(frozen=True)
class OrderResult:
    order: Order | None
    errors: list[str] = field(default_factory=list)
    stock: list[LineReconciliation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @staticmethod
    def success(
        order: Order, stock: list[LineReconciliation] | None = None
    ) -> OrderResult:
        return OrderResult(order=order, stock=list(stock or []))

    @staticmethod
    def failure(*codes: str) -> OrderResult:
        return OrderResult(order=None, errors=list(codes))
