"""Application service: catalog management.

Validates the raw strings an admin form submits, creates products from
them, and deletes products while keeping every cart consistent with
the catalog.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from shopmanager.application.dto import ProductForm
from shopmanager.application.order_service import OrderService
from shopmanager.domain.exceptions import EntityNotFoundError, ValidationError
from shopmanager.domain.model.product import Product
from shopmanager.domain.model.value_objects import Money
from shopmanager.domain.repository.product_repository import ProductRepository

logger = logging.getLogger("shopmanager.catalog")


def is_decimal_string(value: str) -> bool:
    """True if ``value`` parses as a finite decimal number."""
    if "_" in value:
        return False
    try:
        return Decimal(value.strip()).is_finite()
    except (InvalidOperation, ValueError):
        return False


def is_integer_string(value: str) -> bool:
    if "_" in value:
        return False
    try:
        int(value.strip())
    except ValueError:
        return False
    return True


class ProductService:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_service: OrderService,
    ) -> None:
        self._product_repo = product_repo
        self._order_service = order_service

    # --- Queries --------------------------------------------------------------

    def list_products(self) -> list[Product]:
        return self._product_repo.list_all()

    def list_admin_products(self) -> list[Product]:
        """Newest products first."""
        return sorted(
            self._product_repo.list_all(), key=lambda p: p.id or 0, reverse=True
        )

    def get_product(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def check_product_is_valid(form: ProductForm) -> list[str]:
        """Return the message keys of every problem with ``form``.

        An empty list means the form can be turned into a product.
        """
        errors: list[str] = []
        if not form.name or not form.name.strip():
            errors.append("product.MissingName")

        if not form.price or not form.price.strip():
            errors.append("product.MissingPrice")
        elif not is_decimal_string(form.price):
            errors.append("product.PriceNotANumber")
        elif Decimal(form.price.strip()) <= 0:
            errors.append("product.PriceNotGreaterThanZero")

        if not form.quantity or not form.quantity.strip():
            errors.append("product.MissingQuantity")
        elif not is_integer_string(form.quantity):
            errors.append("product.QuantityNotAnInteger")
        elif int(form.quantity.strip()) <= 0:
            errors.append("product.QuantityNotGreaterThanZero")

        return errors

    # --- Commands -------------------------------------------------------------

    def create_product(self, form: ProductForm) -> Product:
        errors = self.check_product_is_valid(form)
        if errors:
            raise ValidationError(
                f"Invalid product: {', '.join(errors)}", codes=errors
            )

        product = Product.create(
            name=form.name,
            price=Money.of(form.price),
            quantity=int(form.quantity.strip()),
            description=form.description,
            details=form.details,
        )
        self._product_repo.save(product)
        logger.info("Product #%s '%s' added to catalog", product.id, product.name)
        return product

    def delete_product(self, product_id: int) -> None:
        """Remove a product from every cart, then from the catalog."""
        self._order_service.remove_from_all_carts(product_id)
        self._product_repo.delete(product_id)
        logger.info("Product #%s deleted from catalog", product_id)
