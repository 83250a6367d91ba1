"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shopmanager.domain.exceptions import ValidationError
from shopmanager.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("9.99"))
        assert m.amount == Decimal("9.99")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_strips_whitespace(self):
        assert Money.of(" 3.50 ").amount == Decimal("3.50")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("1,01")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(9.99)  # type: ignore[arg-type]

    def test_addition_is_exact(self):
        total = Money.of("0.10") + Money.of("0.20")
        assert total == Money.of("0.30")

    def test_multiplication_by_int(self):
        assert Money.of("9.99") * 3 == Money.of("29.97")

    def test_division_rounds_to_cents(self):
        assert Money.of("10.00") / 3 == Money.of("3.33")
        assert Money.of("0.05") / 2 == Money.of("0.03")

    def test_division_by_zero_rejected(self):
        with pytest.raises(ValidationError, match="positive count"):
            Money.of("10") / 0

    def test_zero(self):
        assert Money.zero().is_zero
        assert str(Money.zero()) == "$0.00"

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_no_subtraction_or_ordering(self):
        with pytest.raises(TypeError):
            Money.of("5") - Money.of("1")
        with pytest.raises(TypeError):
            Money.of("1") < Money.of("2")

    def test_str_formatting(self):
        assert str(Money.of("9.5")) == "$9.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)
