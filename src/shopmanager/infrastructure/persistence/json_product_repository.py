"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from shopmanager.domain.model.product import Product
from shopmanager.domain.model.value_objects import Money
from shopmanager.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        products = self._load()
        if not products:
            return 1
        return max(products) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        products = self._load()
        return [products[pid] for pid in sorted(products)]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def delete(self, product_id: int) -> None:
        products = self._load()
        if products.pop(product_id, None) is not None:
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "details": product.details,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "quantity": product.quantity,
        }

    @staticmethod
    def to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            details=raw.get("details", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=raw["quantity"],
        )

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self.to_domain(item) for item in raw}

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [self.to_raw(products[pid]) for pid in sorted(products)]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
