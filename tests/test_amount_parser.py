"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from rentflow.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1200", Decimal("1200")),
        ("$1,200.50", Decimal("1200.50")),
        ("1 334", Decimal("1334")),
        ("€950", Decimal("950")),
        (" 0 ", Decimal("0")),
    ],
)
def test_parse_amount(text, expected):
    """Test parsing amounts with currency symbols and separators."""
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "lots", "NaN", "Infinity", "12.3.4"])
def test_parse_amount_rejects_garbage(text):
    """Test that unparsable amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(text)


def test_negative_amount_rejected():
    """Test that negative amounts are rejected."""
    with pytest.raises(ValueError):
        parse_amount("-50")
