"""Application service: cart and checkout.

The only component allowed to change a shopper's cart.  Each session
has its own cart; every operation on a cart runs under that session's
lock, so a checkout can never interleave with an add or remove on the
same cart.  Different sessions never block each other.
"""

from __future__ import annotations

import logging
import threading
import weakref
from contextlib import contextmanager
from typing import Iterator

from shopmanager.domain.exceptions import EntityNotFoundError
from shopmanager.domain.model.cart import Cart
from shopmanager.domain.model.order import CART_EMPTY, Order
from shopmanager.domain.model.result import OrderResult
from shopmanager.domain.repository.cart_repository import CartRepository
from shopmanager.domain.repository.order_repository import OrderRepository
from shopmanager.domain.repository.product_repository import ProductRepository
from shopmanager.domain.service.stock_reconciliation_service import (
    StockReconciliationService,
)

logger = logging.getLogger("shopmanager.order")


class OrderService:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._stock = StockReconciliationService(product_repo)
        # Entries vanish once no caller holds the lock.
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(self, session_id: str, product_id: int) -> bool:
        """Add one unit of a catalog product to the session's cart.

        Returns False, leaving the cart unchanged, when the product is
        not in the catalog.
        """
        with self._session_cart(session_id) as cart:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                logger.debug(
                    "Session %s: product #%s not found, cart unchanged",
                    session_id,
                    product_id,
                )
                return False

            line = cart.add_item(product, 1)
            logger.debug(
                "Session %s: product #%s now x%s in cart",
                session_id,
                product_id,
                line.quantity,
            )
            return True

    def remove_from_cart(self, session_id: str, product_id: int) -> None:
        """Take a product's whole line out of the cart. Safe if absent."""
        with self._session_cart(session_id) as cart:
            if cart.remove_item(product_id):
                logger.debug(
                    "Session %s: product #%s removed from cart", session_id, product_id
                )

    def remove_from_all_carts(self, product_id: int) -> None:
        """Drop a product from every session's cart.

        Whoever deletes a product from the catalog must call this first,
        so no cart is left pointing at a product the catalog no longer has.
        """
        for session_id in self._cart_repo.sessions():
            self.remove_from_cart(session_id, product_id)

    def get_cart(self, session_id: str) -> Cart:
        """Return a copy of the session's cart."""
        with self._lock_for(session_id):
            return self._cart_repo.get(session_id).snapshot()

    def is_cart_empty(self, session_id: str) -> bool:
        with self._lock_for(session_id):
            return self._cart_repo.get(session_id).is_empty()

    # --- Orders ---------------------------------------------------------------

    def save_order(self, order: Order) -> Order:
        """Persist ``order`` as is. Leaves carts and stock alone."""
        self._order_repo.save(order)
        return order

    def create_order(self, session_id: str, order: Order) -> OrderResult:
        """Check out the session's cart into ``order``.

        On an empty cart nothing is persisted and the result carries the
        ``cart.empty`` error.  Otherwise the order is filled from the
        cart, persisted, applied to catalog stock, and the cart is
        emptied, all while holding the session lock.
        """
        with self._session_cart(session_id) as cart:
            if cart.is_empty():
                logger.info("Session %s: checkout refused, cart is empty", session_id)
                return OrderResult.failure(CART_EMPTY)

            order.populate_from(cart)
            errors = order.validate()
            if errors:
                return OrderResult.failure(*errors)

            self.save_order(order)
            stock = self._stock.reconcile(order.lines)
            cart.clear()

        logger.info(
            "Session %s: order #%s placed (%d lines, total %s)",
            session_id,
            order.id,
            len(order.lines),
            order.total,
        )
        return OrderResult.success(order, stock)

    def get_order(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order

    # --- Session locking ------------------------------------------------------

    def _lock_for(self, session_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = self._locks[session_id] = threading.Lock()
            return lock

    @contextmanager
    def _session_cart(self, session_id: str) -> Iterator[Cart]:
        """Yield the session's cart under its lock and save it afterwards."""
        with self._lock_for(session_id):
            cart = self._cart_repo.get(session_id)
            yield cart
            self._cart_repo.save(session_id, cart)
