"""CLI helpers for year/month filter resolution."""

from datetime import date

from rentflow.cli.error_handling import exit_with_error, handle_domain_error
from rentflow.domain.errors import ValidationError
from rentflow.domain.payment_key import ALL_MONTHS, normalize_month, normalize_month_filter


def resolve_cli_period(
    ctx,
    *,
    year: int | None,
    month: str | None,
    allow_all: bool = True,
) -> tuple[int, str]:
    """Resolve the --year/--month options.

    The year defaults to the current year. The month defaults to "All" when
    allowed, otherwise it is required.
    """
    resolved_year = year if year is not None else date.today().year
    if resolved_year <= 0:
        exit_with_error(ctx, f"Invalid year: {resolved_year}")

    if month is None:
        if not allow_all:
            exit_with_error(ctx, "--month is required.")
        return resolved_year, ALL_MONTHS

    try:
        if allow_all:
            resolved_month = normalize_month_filter(month)
        else:
            resolved_month = normalize_month(month)
    except ValidationError as e:
        handle_domain_error(ctx, e)

    return resolved_year, resolved_month
