"""Domain-level exceptions.

Invariant violations are expressed as subclasses of DomainException so
the CLI layer can catch them uniformly and display user-friendly
messages.  Expected outcomes (product not found when adding to a cart,
checkout of an empty cart) are *not* exceptions: they are returned as
values by the application services.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    ``codes`` optionally carries message keys (e.g. ``product.MissingName``)
    so a presentation layer can render each one separately.
    """

    def __init__(self, message: str, codes: list[str] | None = None) -> None:
        super().__init__(message)
        self.codes = list(codes or [])


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
