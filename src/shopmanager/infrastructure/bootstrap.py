"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from shopmanager.application.order_service import OrderService
from shopmanager.application.product_service import ProductService
from shopmanager.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from shopmanager.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shopmanager.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "SHOPMANAGER_DATA_DIR"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    """Directory holding the JSON stores; ``$SHOPMANAGER_DATA_DIR`` wins."""
    override = os.getenv(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def cart_repository(product_repo: JsonProductRepository) -> JsonCartRepository:
    return JsonCartRepository(data_dir() / "carts", product_repo)


def order_service() -> OrderService:
    products = product_repository()
    return OrderService(
        product_repo=products,
        order_repo=order_repository(),
        cart_repo=cart_repository(products),
    )


def product_service() -> ProductService:
    return ProductService(
        product_repo=product_repository(),
        order_service=order_service(),
    )
