"""Abstract repository for shopper carts, keyed by session ID."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopmanager.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self, session_id: str) -> Cart:
        """Return the session's cart, or a fresh empty one."""

    @abstractmethod
    def save(self, session_id: str, cart: Cart) -> None:
        """Persist the session's cart."""

    @abstractmethod
    def sessions(self) -> list[str]:
        """Return the IDs of every session that has a stored cart."""
