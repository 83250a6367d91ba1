"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductForm:
    """Input: a product as submitted by an admin form, every field a raw string."""

    name: str = ""
    price: str = ""
    quantity: str = ""
    description: str = ""
    details: str = ""


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the shopper."""

    line_id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str
    average: str
    item_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    id: int
    lines: list[OrderLineDTO]
    total: str
    created_at: str
