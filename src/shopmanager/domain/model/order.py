"""Order aggregate.

An Order is a snapshot of a cart taken at checkout.  The caller builds
an empty Order, the order service fills it from the shopper's cart,
the order store persists it once, and nothing changes it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopmanager.domain.model.cart import Cart
from shopmanager.domain.model.value_objects import Money, Quantity

CART_EMPTY = "cart.empty"


@dataclass(frozen=True)
class OrderLine:
    """Captures a product and the quantity ordered at checkout time."""

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    ``id`` is ``None`` until the order store assigns one.
    """

    id: int | None = None
    lines: list[OrderLine] = field(default_factory=list)
    created_at: datetime | None = None

    def populate_from(self, cart: Cart) -> None:
        """Copy every cart line, in cart order, into this order."""
        self.lines = [
            OrderLine(
                product_id=line.product_id,
                product_name=line.product.name,
                quantity=line.quantity,
                unit_price=line.unit_price,
            )
            for line in cart.lines
        ]
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)

    def validate(self) -> list[str]:
        """Return the error codes that keep this order from being persisted."""
        errors: list[str] = []
        if not self.lines:
            errors.append(CART_EMPTY)
        return errors

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result
