"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopmanager.application.dto import CartDTO, CartLineDTO
from shopmanager.application.order_service import OrderService
from shopmanager.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, order_service: OrderService) -> None:
        self._order_service = order_service

    def handle(self, session_id: str) -> CartDTO:
        return self._to_dto(self._order_service.get_cart(session_id))

    @staticmethod
    def _to_dto(cart: Cart) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    line_id=line.line_id,
                    product_id=line.product_id,
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.unit_price),
                    subtotal=str(line.subtotal),
                )
                for line in cart.lines
            ],
            total=str(cart.total_value),
            average=str(cart.average_value),
            item_count=cart.item_count,
        )
