"""Process-local CartRepository: carts live as long as the process."""

from __future__ import annotations

from shopmanager.domain.model.cart import Cart
from shopmanager.domain.repository.cart_repository import CartRepository


class InMemoryCartRepository(CartRepository):

    def __init__(self) -> None:
        self._carts: dict[str, Cart] = {}

    def get(self, session_id: str) -> Cart:
        cart = self._carts.get(session_id)
        if cart is None:
            cart = self._carts[session_id] = Cart()
        return cart

    def save(self, session_id: str, cart: Cart) -> None:
        self._carts[session_id] = cart

    def sessions(self) -> list[str]:
        return list(self._carts)
