"""JSON-file-backed implementation of CartRepository.

Lets a cart survive between CLI invocations.  Every session is kept in
its own ``<session>.json`` file inside one directory, and a file is
only ever replaced whole, so saving one cart never touches another.
Each line stores a copy of the product it was created from; on load
the live catalog record is used instead whenever the product still
exists.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from decimal import Decimal
from pathlib import Path
from urllib.parse import quote, unquote

from shopmanager.domain.model.cart import Cart, CartLine
from shopmanager.domain.model.value_objects import Money, Quantity
from shopmanager.domain.repository.cart_repository import CartRepository
from shopmanager.domain.repository.product_repository import ProductRepository
from shopmanager.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

_SUFFIX = ".json"


class JsonCartRepository(CartRepository):

    def __init__(self, directory: Path, product_repo: ProductRepository) -> None:
        self._directory = directory
        self._product_repo = product_repo
        self._lock = threading.Lock()
        self._directory.mkdir(parents=True, exist_ok=True)

    # --- CartRepository interface ---------------------------------------------

    def get(self, session_id: str) -> Cart:
        path = self._path_for(session_id)
        with self._lock:
            if not path.exists():
                return Cart()
            raw = json.loads(path.read_text(encoding="utf-8"))
        return self._to_domain(raw)

    def save(self, session_id: str, cart: Cart) -> None:
        content = json.dumps(self._to_raw(cart), indent=2) + "\n"
        with self._lock:
            self._replace(self._path_for(session_id), content)

    def sessions(self) -> list[str]:
        with self._lock:
            names = sorted(p.name for p in self._directory.glob(f"*{_SUFFIX}"))
        return [unquote(name[: -len(_SUFFIX)]) for name in names]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "next_line_id": cart.next_line_id,
            "lines": [
                {
                    "line_id": line.line_id,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                    "product": JsonProductRepository.to_raw(line.product),
                }
                for line in cart.lines
            ],
        }

    def _to_domain(self, raw: dict) -> Cart:
        lines = []
        for item in raw["lines"]:
            stored = JsonProductRepository.to_domain(item["product"])
            product = self._product_repo.get_by_id(stored.id) or stored  # type: ignore[arg-type]
            lines.append(
                CartLine(
                    line_id=item["line_id"],
                    product=product,
                    quantity=Quantity(item["quantity"]),
                    unit_price=Money(
                        Decimal(item["unit_price"]), item.get("currency", "USD")
                    ),
                )
            )
        return Cart(lines=lines, next_line_id=raw.get("next_line_id", len(lines)))

    # --- File helpers ---------------------------------------------------------

    def _path_for(self, session_id: str) -> Path:
        return self._directory / f"{quote(session_id, safe='')}{_SUFFIX}"

    def _replace(self, path: Path, content: str) -> None:
        """Write to a temp file beside ``path``, then swap it in."""
        fd, tmp = tempfile.mkstemp(dir=self._directory, prefix=".cart-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
