"""Cart aggregate: the in-progress set of products a shopper wants.

A cart holds one line per product.  Adding a product that is already
in the cart bumps that line's quantity instead of creating a second
line.  Totals are never cached; they are recomputed on every access.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from shopmanager.domain.model.product import Product
from shopmanager.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """A single (product, quantity) pairing inside a cart.

    ``unit_price`` is the product's price when the line was created;
    everything else about the product is read from the live reference.
    """

    line_id: int
    product: Product
    quantity: Quantity
    unit_price: Money

    @property
    def product_id(self) -> int:
        return self.product.id  # type: ignore[return-value]

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Cart:
    lines: list[CartLine] = field(default_factory=list)
    next_line_id: int = 0

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> CartLine:
        """Add ``quantity`` units of ``product``, merging with an existing line."""
        qty = Quantity(quantity)

        line = self.find_line(product.id)  # type: ignore[arg-type]
        if line is not None:
            line.quantity = line.quantity + qty
            return line

        line = CartLine(
            line_id=self.next_line_id,
            product=product,
            quantity=qty,
            unit_price=product.price,
        )
        self.next_line_id += 1
        self.lines.append(line)
        return line

    def remove_item(self, product_id: int) -> bool:
        """Take the whole line for ``product_id`` out of the cart.

        Returns False when the product was not in the cart.
        """
        line = self.find_line(product_id)
        if line is None:
            return False
        self.lines.remove(line)
        return True

    def clear(self) -> None:
        self.lines.clear()

    # --- Queries --------------------------------------------------------------

    def find_line(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def line_at(self, index: int) -> CartLine:
        return self.lines[index]

    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_value(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result

    @property
    def average_value(self) -> Money:
        """Mean line subtotal, rounded to the cent; $0.00 for an empty cart."""
        if self.is_empty():
            return Money.zero()
        return self.total_value / len(self.lines)

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    def snapshot(self) -> Cart:
        """Copy of the cart whose lines can be read without touching this one."""
        return Cart(
            lines=[replace(line) for line in self.lines],
            next_line_id=self.next_line_id,
        )
