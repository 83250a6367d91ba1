"""Abstract repository for the Product aggregate (the catalog).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer or in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopmanager.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if it is not in the catalog."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ascending ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning an ID if it has none."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product from the catalog. No-op if it is absent."""
