"""Unit tests for domain value objects."""

import pytest

from heritage.domain.exceptions import ValidationError
from heritage.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(45000)
        assert m.cents == 45000
        assert m.currency == "USD"

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="integer number of cents"):
            Money(450.0)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_addition(self):
        assert Money(1000) + Money(550) == Money(1550)

    def test_multiplication_by_int(self):
        assert Money(12000) * 2 == Money(24000)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money(100) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(1000, "USD") + Money(500, "EUR")

    def test_str_formatting(self):
        assert str(Money(45000)) == "$450.00"
        assert str(Money(5)) == "$0.05"
        assert str(Money(120000)) == "$1,200.00"


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
