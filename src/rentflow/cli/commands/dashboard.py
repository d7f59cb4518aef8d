"""Dashboard command."""

import click
from rentflow.cli.error_handling import handle_domain_error
from rentflow.cli.formatting import format_money
from rentflow.cli.period_filters import resolve_cli_period
from rentflow.domain.errors import DomainError
from rentflow.domain.payment_key import ALL_MONTHS
from rentflow.domain.preferences import PreferencesService
from rentflow.domain.stats import compute_stats, monthly_chart
from rentflow.domain.tenant import TenantService

BAR_WIDTH = 30


def _render_chart(bars, dark_mode: bool) -> None:
    """Print a horizontal bar per month scaled to the largest month."""
    peak = max((bar.income for bar in bars), default=0)
    fill = "#" if dark_mode else "█"
    for bar in bars:
        length = int(bar.income / peak * BAR_WIDTH) if peak else 0
        glyph = fill if bar.active else "·"
        amount = format_money(bar.income)
        click.echo(f"  {bar.month}  {amount:>12s}  {glyph * length}")


@click.command("dashboard")
@click.option("--year", type=int, help="Year to report on (defaults to current year)")
@click.option("--month", help="Restrict collected revenue to one month (e.g. Feb) or 'All'")
@click.pass_context
def dashboard(ctx, year: int | None, month: str | None):
    """Show revenue overview and monthly breakdown."""
    db = ctx.obj["db"]
    tenants = TenantService(db)
    preferences = PreferencesService(db)
    year, month = resolve_cli_period(ctx, year=year, month=month)

    try:
        stats = compute_stats(tenants.roster, year, month)
    except DomainError as e:
        handle_domain_error(ctx, e)

    period = month if month != ALL_MONTHS else str(year)
    click.echo(f"\nDashboard: {year}" + ("" if month == ALL_MONTHS else f" ({month})"))
    click.echo("=" * 60)
    click.echo(f"Collected Revenue ({period}): {format_money(stats.collected_revenue)}")
    click.echo(f"Potential Annual Revenue:   {format_money(stats.total_revenue)}")
    click.echo(f"Active Tenants:             {stats.active_tenants}")

    click.echo(f"\nRevenue Breakdown ({year}):")
    _render_chart(monthly_chart(stats), preferences.dark_mode)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
