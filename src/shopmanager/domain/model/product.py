"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: they are added to the catalog, their stock goes down as
orders are placed, and they disappear once depleted or deleted by an
administrator.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopmanager.domain.exceptions import ValidationError
from shopmanager.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because stock changes are a legitimate
    mutation on the aggregate.  ``id`` is ``None`` until the catalog
    assigns one.
    """

    id: int | None
    name: str
    price: Money
    quantity: int
    description: str = ""
    details: str = ""

    def __post_init__(self) -> None:
        if self.price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        if self.quantity < 0:
            raise ValidationError("Product quantity cannot be negative")

    @staticmethod
    def create(
        name: str,
        price: Money,
        quantity: int,
        description: str = "",
        details: str = "",
    ) -> Product:
        """Create a new, not yet persisted, catalog product."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            quantity=quantity,
            description=description.strip(),
            details=details.strip(),
        )

    def remaining_after(self, ordered: int) -> int:
        """Stock left once ``ordered`` units ship.

        May be negative: nothing stops a cart from holding more units
        than the catalog has.
        """
        return self.quantity - ordered

    def restock_to(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Product quantity cannot be negative")
        self.quantity = quantity
