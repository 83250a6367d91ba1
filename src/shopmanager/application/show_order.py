"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shopmanager.application.dto import OrderDTO, OrderLineDTO
from shopmanager.application.order_service import OrderService
from shopmanager.domain.model.order import Order


class ShowOrderHandler:

    def __init__(self, order_service: OrderService) -> None:
        self._order_service = order_service

    def handle(self, order_id: int) -> OrderDTO:
        return self.to_dto(self._order_service.get_order(order_id))

    @staticmethod
    def to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            lines=[
                OrderLineDTO(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity.value,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in order.lines
            ],
            total=str(order.total),
            created_at=(
                order.created_at.strftime("%Y-%m-%d %H:%M UTC")
                if order.created_at
                else ""
            ),
        )
