"""Tests for catalog management: form validation, creation, deletion."""

import pytest

from shopmanager.application.dto import ProductForm
from shopmanager.application.messages import message_for
from shopmanager.application.order_service import OrderService
from shopmanager.application.product_service import (
    ProductService,
    is_decimal_string,
    is_integer_string,
)
from shopmanager.application.show_cart import ShowCartHandler
from shopmanager.domain.exceptions import EntityNotFoundError, ValidationError
from shopmanager.domain.model.product import Product
from shopmanager.domain.model.value_objects import Money
from shopmanager.infrastructure.persistence.memory_cart_repository import (
    InMemoryCartRepository,
)
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup() -> tuple[ProductService, OrderService, FakeProductRepository]:
    product_repo = FakeProductRepository(
        [
            Product(id=1, name="Lamp", price=Money.of("20.00"), quantity=4),
            Product(id=2, name="Chair", price=Money.of("45.00"), quantity=2),
        ]
    )
    orders = OrderService(product_repo, FakeOrderRepository(), InMemoryCartRepository())
    return ProductService(product_repo, orders), orders, product_repo


def _form(name="Desk", price="120.00", quantity="3") -> ProductForm:
    return ProductForm(name=name, price=price, quantity=quantity)


class TestStringChecks:

    @pytest.mark.parametrize("value", ["1.01", "-1.01", "1", " 2.5 ", "1e3"])
    def test_decimal_strings(self, value):
        assert is_decimal_string(value)

    @pytest.mark.parametrize(
        "value", ["Double", "1.01.01", "1,01", "NaN", "inf", "", "1_000", "9_99.50"]
    )
    def test_non_decimal_strings(self, value):
        assert not is_decimal_string(value)

    @pytest.mark.parametrize("value", ["1", "111", "-1"])
    def test_integer_strings(self, value):
        assert is_integer_string(value)

    @pytest.mark.parametrize("value", ["1,01", "Integer", "1.0", "1L", "", "1_000"])
    def test_non_integer_strings(self, value):
        assert not is_integer_string(value)


class TestCheckProductIsValid:

    def test_valid_form(self):
        assert ProductService.check_product_is_valid(_form()) == []

    def test_all_missing(self):
        errors = ProductService.check_product_is_valid(ProductForm())
        assert errors == [
            "product.MissingName",
            "product.MissingPrice",
            "product.MissingQuantity",
        ]

    def test_not_numbers(self):
        errors = ProductService.check_product_is_valid(_form(price="abc", quantity="x"))
        assert errors == ["product.PriceNotANumber", "product.QuantityNotAnInteger"]

    def test_digit_separators_are_not_numbers(self):
        errors = ProductService.check_product_is_valid(
            _form(price="1_000", quantity="1_0")
        )
        assert errors == ["product.PriceNotANumber", "product.QuantityNotAnInteger"]

    def test_not_positive(self):
        errors = ProductService.check_product_is_valid(_form(price="0", quantity="-2"))
        assert errors == [
            "product.PriceNotGreaterThanZero",
            "product.QuantityNotGreaterThanZero",
        ]

    def test_every_code_has_a_message(self):
        for code in ProductService.check_product_is_valid(ProductForm()):
            assert message_for(code) != code


class TestCreateProduct:

    def test_assigns_next_id(self):
        service, _, product_repo = _setup()
        product = service.create_product(_form())

        assert product.id == 3
        assert product_repo.get_by_id(3).price == Money.of("120.00")
        assert product_repo.get_by_id(3).quantity == 3

    def test_invalid_form_rejected_with_codes(self):
        service, _, product_repo = _setup()

        with pytest.raises(ValidationError) as exc_info:
            service.create_product(_form(name=""))

        assert exc_info.value.codes == ["product.MissingName"]
        assert len(product_repo.list_all()) == 2


class TestQueries:

    def test_list_products_ascending(self):
        service, _, _ = _setup()
        assert [p.id for p in service.list_products()] == [1, 2]

    def test_admin_list_newest_first(self):
        service, _, _ = _setup()
        assert [p.id for p in service.list_admin_products()] == [2, 1]

    def test_get_unknown_product(self):
        service, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            service.get_product(99)


class TestDeleteProduct:

    def test_removes_from_carts_then_catalog(self):
        service, orders, product_repo = _setup()
        orders.add_to_cart("alice", 1)
        orders.add_to_cart("alice", 2)
        orders.add_to_cart("bob", 1)

        service.delete_product(1)

        assert product_repo.get_by_id(1) is None
        assert [line.product_id for line in orders.get_cart("alice").lines] == [2]
        assert orders.is_cart_empty("bob")

    def test_cart_totals_follow_deletion(self):
        service, orders, _ = _setup()
        orders.add_to_cart("alice", 1)
        orders.add_to_cart("alice", 2)

        service.delete_product(2)

        dto = ShowCartHandler(orders).handle("alice")
        assert dto.total == "$20.00"
        assert dto.average == "$20.00"
