"""Tests for CLI output formatting."""

from decimal import Decimal

from rentflow.cli.formatting import format_money, format_optional


def test_format_money_drops_zero_cents():
    assert format_money(Decimal("1200")) == "$1,200"
    assert format_money(Decimal("1200.00")) == "$1,200"


def test_format_money_keeps_cents():
    assert format_money(Decimal("1250.5")) == "$1,250.50"


def test_format_optional():
    assert format_optional(None) == "Not provided"
    assert format_optional("") == "Not provided"
    assert format_optional("555-0101") == "555-0101"
