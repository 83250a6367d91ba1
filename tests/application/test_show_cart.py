"""Tests for the ShowCart query handler."""

from shopmanager.application.order_service import OrderService
from shopmanager.application.show_cart import ShowCartHandler
from shopmanager.domain.model.product import Product
from shopmanager.domain.model.value_objects import Money
from shopmanager.infrastructure.persistence.memory_cart_repository import (
    InMemoryCartRepository,
)
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _service() -> OrderService:
    products = FakeProductRepository(
        [
            Product(id=5, name="Name", price=Money.of("9.99"), quantity=3),
            Product(id=7, name="Mug", price=Money.of("3.50"), quantity=1),
        ]
    )
    return OrderService(products, FakeOrderRepository(), InMemoryCartRepository())


class TestShowCart:

    def test_empty_cart(self):
        dto = ShowCartHandler(_service()).handle("alice")

        assert dto.is_empty
        assert dto.item_count == 0
        assert dto.total == "$0.00"

    def test_item_count_sums_line_quantities(self):
        service = _service()
        service.add_to_cart("alice", 5)
        service.add_to_cart("alice", 5)
        service.add_to_cart("alice", 7)

        dto = ShowCartHandler(service).handle("alice")

        assert len(dto.lines) == 2
        assert dto.item_count == 3
        assert dto.total == "$23.48"
        assert dto.average == "$11.74"
