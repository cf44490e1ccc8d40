"""Unit tests for money rounding and formatting"""

from decimal import Decimal

import pytest
from finplan_gateway.utils.money import floor_money, format_inr, round_money, to_decimal


def test_round_money_half_up():
    assert round_money(2.675) == 2.68
    assert round_money(17220.745) == 17220.75
    assert round_money(-1.005) == -1.01


def test_to_decimal_and_floor():
    assert to_decimal(0.1) == Decimal("0.10")
    assert floor_money(Decimal("4.019")) == Decimal("4.01")


@pytest.mark.parametrize(
    "amount,expected",
    [
        (0, "₹0"),
        (999, "₹999"),
        (8000, "₹8,000"),
        (200000, "₹2,00,000"),
        (2304578.4, "₹23,04,578"),
        (12345678.5, "₹1,23,45,679"),
        (-5000, "-₹5,000"),
    ],
)
def test_format_inr_uses_indian_grouping(amount, expected):
    assert format_inr(amount) == expected
