"""Revenue statistics derived from the roster."""

from decimal import Decimal
from typing import Iterable

from rentflow.domain.entities import MonthlyBar, Stats, Tenant
from rentflow.domain.errors import ValidationError, invalid_month
from rentflow.domain.payment_key import ALL_MONTHS, MONTHS, decode


def compute_stats(tenants: Iterable[Tenant], year: int, month: str = ALL_MONTHS) -> Stats:
    """Compute revenue statistics for a year and optional month filter.

    Total revenue is the annualized rent of every tenant and ignores the
    filter. Collected revenue and the monthly breakdown only count ledger
    entries marked paid whose key falls in the filtered year (and month,
    unless month is "All"). Keys that do not decode are skipped.

    Args:
        tenants: Tenants to aggregate (usually a Roster)
        year: Calendar year to report on
        month: Month abbreviation or "All"

    Returns:
        Stats with a monthly_income entry for each of the 12 months

    Raises:
        ValidationError: If month is neither "All" nor a month abbreviation
    """
    if month != ALL_MONTHS and month not in MONTHS:
        raise ValidationError(invalid_month(month))

    monthly_income = {m: Decimal("0") for m in MONTHS}
    total_revenue = Decimal("0")
    collected_revenue = Decimal("0")
    count = 0

    for tenant in tenants:
        count += 1
        rent = tenant.rent_amount or Decimal("0")
        total_revenue += rent * 12

        for key, is_paid in tenant.ledger.items():
            if not is_paid:
                continue
            try:
                payment_key = decode(key)
            except ValidationError:
                continue
            if payment_key.year != year:
                continue
            if month != ALL_MONTHS and payment_key.month != month:
                continue
            monthly_income[payment_key.month] += rent
            collected_revenue += rent

    return Stats(
        year=year,
        month=month,
        total_revenue=total_revenue,
        collected_revenue=collected_revenue,
        monthly_income=monthly_income,
        active_tenants=count,
        total_tenants=count,
    )


def monthly_chart(stats: Stats) -> list[MonthlyBar]:
    """Build chart bars for each month; bars outside the month filter are inactive."""
    return [
        MonthlyBar(
            month=m,
            income=stats.monthly_income.get(m, Decimal("0")),
            active=stats.month == ALL_MONTHS or stats.month == m,
        )
        for m in MONTHS
    ]
