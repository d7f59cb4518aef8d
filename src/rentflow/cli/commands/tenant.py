"""Tenant management commands."""

import click
from rentflow.cli.error_handling import exit_with_error, handle_domain_error
from rentflow.cli.formatting import format_money, format_optional
from rentflow.cli.period_filters import resolve_cli_period
from rentflow.cli.tenant_resolution import resolve_tenant_or_exit
from rentflow.domain.entities import Tenant
from rentflow.domain.errors import DomainError
from rentflow.domain.payment_key import ALL_MONTHS, MONTHS, encode
from rentflow.domain.property import PropertyService
from rentflow.domain.tenant import TenantService
from rentflow.utils.amount_parser import parse_amount
from rentflow.utils.date_parser import parse_date
from rentflow.utils.image_reference import image_to_data_uri


def _parse_optional_date(ctx, value: str | None, label: str):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        exit_with_error(ctx, f"Invalid {label}: {e}")


def _parse_rent_or_exit(ctx, value: str):
    try:
        return parse_amount(value)
    except ValueError as e:
        exit_with_error(ctx, f"Invalid rent amount: {e}")


def _photo_or_exit(ctx, path: str | None):
    if path is None:
        return None
    try:
        return image_to_data_uri(path)
    except (ValueError, OSError) as e:
        exit_with_error(ctx, f"Cannot use photo: {e}")


def _check_property_or_exit(ctx, db, property_id: str | None) -> None:
    if property_id is None:
        return
    if PropertyService(db).get_property(property_id) is None:
        exit_with_error(ctx, f"Property {property_id} not found")


def _payment_line(tenant: Tenant, year: int, month: str) -> str:
    """Render the payment grid for one tenant and filter."""
    if month != ALL_MONTHS:
        status = "Paid" if tenant.ledger.is_paid(encode(year, month)) else "Unpaid"
        return f"    {month} Rent: {status}"
    cells = [
        f"{m} {'x' if tenant.ledger.is_paid(encode(year, m)) else '.'}" for m in MONTHS
    ]
    return "    " + "  ".join(cells)


@click.group()
def tenant_group():
    """Manage tenants and their rent payments."""
    pass


@tenant_group.command("add")
@click.argument("name")
@click.option("--rent", "rent", required=True, help="Monthly rent amount")
@click.option("--email", help="Email address")
@click.option("--phone", help="Phone number")
@click.option("--start-date", help="Lease start date (defaults to today)")
@click.option("--lease-end", help="Lease end date")
@click.option("--property", "property_id", help="ID of the rented property")
@click.option("--notes", help="Free-form notes")
@click.option("--photo", type=click.Path(exists=True, dir_okay=False), help="Profile photo image file")
@click.pass_context
def add_tenant(
    ctx,
    name: str,
    rent: str,
    email: str | None,
    phone: str | None,
    start_date: str | None,
    lease_end: str | None,
    property_id: str | None,
    notes: str | None,
    photo: str | None,
):
    """Add a new tenant.

    Examples:
        rentflow tenant add "Jane Doe" --rent 1200
        rentflow tenant add "Jane Doe" --rent 1200 --email jane@example.com --start-date 2024-03-01
    """
    db = ctx.obj["db"]
    service = TenantService(db)

    rent_amount = _parse_rent_or_exit(ctx, rent)
    start = _parse_optional_date(ctx, start_date, "start date")
    end = _parse_optional_date(ctx, lease_end, "lease end date")
    _check_property_or_exit(ctx, db, property_id)
    photo_url = _photo_or_exit(ctx, photo)

    try:
        tenant = service.add_tenant(
            name,
            rent_amount,
            email=email,
            phone=phone,
            start_date=start,
            lease_end=end,
            property_id=property_id,
            notes=notes,
            photo_url=photo_url,
        )
    except DomainError as e:
        handle_domain_error(ctx, e, "Cannot add tenant")
    click.echo(f"Added tenant '{tenant.name}' (ID: {tenant.id})")


@tenant_group.command("list")
@click.option("--search", help="Filter by name, email or phone")
@click.option("--year", type=int, help="Year for the payment grid (defaults to current year)")
@click.option("--month", help="Month for the payment grid (e.g. Feb) or 'All'")
@click.pass_context
def list_tenants(ctx, search: str | None, year: int | None, month: str | None):
    """List tenants with their payment status."""
    db = ctx.obj["db"]
    service = TenantService(db)
    year, month = resolve_cli_period(ctx, year=year, month=month)

    tenants = service.list_tenants(search=search)
    if not tenants:
        click.echo("No tenants found.")
        return

    click.echo(f"\nTenants ({year}):")
    click.echo("-" * 60)
    for tenant in tenants:
        rent = format_money(tenant.rent_amount)
        click.echo(f"ID: {tenant.id:>9s} | {tenant.name:20s} | Rent: {rent}/mo")
        click.echo(_payment_line(tenant, year, month))


@tenant_group.command("show")
@click.argument("tenant", metavar="TENANT")
@click.option("--limit", type=int, default=5, show_default=True, help="Number of recent activity entries to show")
@click.pass_context
def show_tenant(ctx, tenant: str, limit: int):
    """Show tenant details and recent activity.

    TENANT can be a tenant name or ID.
    """
    db = ctx.obj["db"]
    service = TenantService(db)
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)
    t = service.select_tenant(tenant_id)

    click.echo(f"\n{t.name} (ID: {t.id})")
    if t.start_date:
        click.echo(f"Joined {t.start_date.strftime('%b %Y')}")
    click.echo("-" * 60)
    click.echo(f"Rent:   {format_money(t.rent_amount)}")
    click.echo(f"Paid:   {t.ledger.paid_count()} total")
    click.echo(f"Mobile: {format_optional(t.phone)}")
    click.echo(f"Email:  {format_optional(t.email)}")
    if t.property_id:
        prop = PropertyService(db).get_property(t.property_id)
        label = f"{prop.name} ({prop.id})" if prop else f"{t.property_id} (removed)"
        click.echo(f"Property: {label}")
    if t.lease_end:
        click.echo(f"Lease ends: {t.lease_end.isoformat()}")

    click.echo("\nNotes:")
    click.echo(f"  {t.notes}" if t.notes else "  No notes added yet.")

    click.echo("\nRecent Activity:")
    _echo_history(t, limit)


def _echo_history(tenant: Tenant, limit: int | None) -> None:
    entries = list(tenant.audit_trail)
    if limit is not None:
        entries = entries[:limit]
    if not entries:
        click.echo("  No history available.")
        return
    for entry in entries:
        click.echo(f"  {entry.display_timestamp():20s} {entry.action}")


@tenant_group.command("history")
@click.argument("tenant", metavar="TENANT")
@click.pass_context
def tenant_history(ctx, tenant: str):
    """Show the full payment activity log of a tenant, newest first."""
    db = ctx.obj["db"]
    service = TenantService(db)
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)
    t = service.require_tenant(tenant_id)

    click.echo(f"\nActivity for {t.name}:")
    _echo_history(t, None)


@tenant_group.command("pay")
@click.argument("tenant", metavar="TENANT")
@click.option("--month", required=True, help="Month to toggle (e.g. Feb)")
@click.option("--year", type=int, help="Year (defaults to current year)")
@click.pass_context
def toggle_payment(ctx, tenant: str, month: str, year: int | None):
    """Toggle a month between paid and unpaid.

    Running the command twice for the same month reverts it.

    Examples:
        rentflow tenant pay "Yab" --month Feb
        rentflow tenant pay t2 --month Jun --year 2024
    """
    db = ctx.obj["db"]
    service = TenantService(db)
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)
    year, month = resolve_cli_period(ctx, year=year, month=month, allow_all=False)

    try:
        updated = service.toggle_payment(tenant_id, year, month)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"{updated.name}: {updated.audit_trail.head().action}")


@tenant_group.command("mark")
@click.argument("tenant", metavar="TENANT")
@click.option("--month", required=True, help="Month to mark (e.g. Feb)")
@click.option("--year", type=int, help="Year (defaults to current year)")
@click.option("--paid/--unpaid", default=True, help="Mark as paid (default) or unpaid")
@click.pass_context
def mark_payment(ctx, tenant: str, month: str, year: int | None, paid: bool):
    """Mark a month as paid or unpaid regardless of its current state."""
    db = ctx.obj["db"]
    service = TenantService(db)
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)
    year, month = resolve_cli_period(ctx, year=year, month=month, allow_all=False)

    try:
        updated = service.set_payment(tenant_id, year, month, paid)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"{updated.name}: {updated.audit_trail.head().action}")


@tenant_group.command("edit")
@click.argument("tenant", metavar="TENANT")
@click.option("--name", help="New name")
@click.option("--rent", help="New monthly rent amount")
@click.option("--email", help="New email address")
@click.option("--phone", help="New phone number")
@click.option("--start-date", help="New lease start date")
@click.option("--lease-end", help="New lease end date")
@click.option("--property", "property_id", help="ID of the rented property")
@click.option("--notes", help="New notes")
@click.option("--photo", type=click.Path(exists=True, dir_okay=False), help="New profile photo image file")
@click.pass_context
def edit_tenant(
    ctx,
    tenant: str,
    name: str | None,
    rent: str | None,
    email: str | None,
    phone: str | None,
    start_date: str | None,
    lease_end: str | None,
    property_id: str | None,
    notes: str | None,
    photo: str | None,
):
    """Edit tenant details. Payment history is left untouched.

    TENANT can be a tenant name or ID.
    """
    db = ctx.obj["db"]
    service = TenantService(db)
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)

    changes = {}
    if name is not None:
        changes["name"] = name
    if rent is not None:
        changes["rent_amount"] = _parse_rent_or_exit(ctx, rent)
    if email is not None:
        changes["email"] = email or None
    if phone is not None:
        changes["phone"] = phone or None
    if start_date is not None:
        changes["start_date"] = _parse_optional_date(ctx, start_date, "start date")
    if lease_end is not None:
        changes["lease_end"] = _parse_optional_date(ctx, lease_end, "lease end date")
    if property_id is not None:
        _check_property_or_exit(ctx, db, property_id)
        changes["property_id"] = property_id
    if notes is not None:
        changes["notes"] = notes or None
    if photo is not None:
        changes["photo_url"] = _photo_or_exit(ctx, photo)

    if not changes:
        click.echo("Nothing to change.")
        return

    try:
        updated = service.edit_tenant(tenant_id, **changes)
    except DomainError as e:
        handle_domain_error(ctx, e, "Cannot update tenant")
    click.echo(f"Updated tenant '{updated.name}'")


@tenant_group.command("delete")
@click.argument("tenant", metavar="TENANT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_tenant(ctx, tenant: str, yes: bool):
    """Delete a tenant and their payment history.

    TENANT can be a tenant name or ID. This cannot be undone.
    """
    db = ctx.obj["db"]
    service = TenantService(db)
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)
    t = service.require_tenant(tenant_id)

    if not yes and not click.confirm(f"Are you sure you want to delete tenant '{t.name}' (ID: {t.id})?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_tenant(tenant_id)
    click.echo(f"Deleted tenant '{t.name}'")


def register_commands(cli):
    """Register tenant commands with main CLI."""
    cli.add_command(tenant_group, name="tenant")
