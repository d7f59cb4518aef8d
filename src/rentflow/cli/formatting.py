"""Shared output formatting for CLI commands."""

from decimal import Decimal


def format_money(amount: Decimal) -> str:
    """Format an amount with thousands separators, dropping zero cents."""
    if amount == amount.to_integral_value():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_optional(value) -> str:
    """Render a missing field the way the detail view does."""
    return str(value) if value else "Not provided"
