"""User-facing text for the error codes returned by the services."""

from __future__ import annotations

MESSAGES: dict[str, str] = {
    "cart.empty": "Your cart is empty. Add a product before placing an order.",
    "product.MissingName": "Please enter a name.",
    "product.MissingPrice": "Please enter a price.",
    "product.PriceNotANumber": "The price must be a number.",
    "product.PriceNotGreaterThanZero": "The price must be greater than zero.",
    "product.MissingQuantity": "Please enter a quantity.",
    "product.QuantityNotAnInteger": "The quantity must be a whole number.",
    "product.QuantityNotGreaterThanZero": "The quantity must be greater than zero.",
}


def message_for(code: str) -> str:
    """Look up the text for ``code``, falling back to the code itself."""
    return MESSAGES.get(code, code)
