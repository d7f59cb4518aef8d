"""Property management commands."""

from decimal import Decimal

import click
from rentflow.cli.error_handling import exit_with_error, handle_domain_error
from rentflow.cli.formatting import format_money
from rentflow.domain.entities import PropertyStatus
from rentflow.domain.errors import DomainError
from rentflow.domain.generation import DESCRIPTION_FALLBACKS, TextGenerator
from rentflow.domain.property import PropertyService
from rentflow.utils.amount_parser import parse_amount
from rentflow.utils.image_reference import image_to_data_uri

STATUS_CHOICE = click.Choice([s.value for s in PropertyStatus], case_sensitive=False)


def _status(value: str) -> PropertyStatus:
    return next(s for s in PropertyStatus if s.value.lower() == value.lower())


def _amount_or_exit(ctx, value: str, label: str) -> Decimal:
    try:
        return parse_amount(value)
    except ValueError as e:
        exit_with_error(ctx, f"Invalid {label}: {e}")


def _image_or_exit(ctx, path: str | None):
    if path is None:
        return None
    try:
        return image_to_data_uri(path)
    except (ValueError, OSError) as e:
        exit_with_error(ctx, f"Cannot use image: {e}")


@click.group()
def property_group():
    """Manage properties."""
    pass


@property_group.command("add")
@click.argument("name")
@click.option("--address", required=True, help="Street address")
@click.option("--rent", required=True, help="Monthly rent amount")
@click.option("--bedrooms", type=int, default=1, show_default=True, help="Number of bedrooms")
@click.option("--bathrooms", default="1", show_default=True, help="Number of bathrooms (e.g. 2.5)")
@click.option("--description", default="", help="Listing description")
@click.option("--features", help="Key features; generates a description when --description is not given")
@click.option("--image", type=click.Path(exists=True, dir_okay=False), help="Property photo image file")
@click.pass_context
def add_property(
    ctx,
    name: str,
    address: str,
    rent: str,
    bedrooms: int,
    bathrooms: str,
    description: str,
    features: str | None,
    image: str | None,
):
    """Add a new property. New properties start out vacant.

    Examples:
        rentflow property add "Maple Court 2A" --address "12 Maple Ct" --rent 1800 --bedrooms 2
        rentflow property add "Loft" --address "5 Mill St" --rent 2100 --features "exposed brick, rooftop"
    """
    db = ctx.obj["db"]
    service = PropertyService(db)

    rent_amount = _amount_or_exit(ctx, rent, "rent amount")
    bathroom_count = _amount_or_exit(ctx, bathrooms, "bathroom count")
    image_url = _image_or_exit(ctx, image)

    if not description and features:
        description = TextGenerator().generate_property_description(
            name, "Apartment", bedrooms, float(bathroom_count), features
        )
        if description in DESCRIPTION_FALLBACKS:
            click.echo(f"Warning: {description} Continuing without a description.", err=True)
            description = ""

    try:
        prop = service.add_property(
            name=name,
            address=address,
            rent_amount=rent_amount,
            bedrooms=bedrooms,
            bathrooms=bathroom_count,
            description=description,
            image_url=image_url,
        )
    except DomainError as e:
        handle_domain_error(ctx, e, "Cannot add property")
    click.echo(f"Added property '{prop.name}' (ID: {prop.id})")


@property_group.command("list")
@click.option("--status", type=STATUS_CHOICE, help="Only show properties with this status")
@click.pass_context
def list_properties(ctx, status: str | None):
    """List properties."""
    db = ctx.obj["db"]
    service = PropertyService(db)

    properties = service.list_properties(status=_status(status) if status else None)
    if not properties:
        click.echo("No properties found.")
        return

    click.echo("\nProperties:")
    click.echo("-" * 60)
    for prop in properties:
        click.echo(
            f"ID: {prop.id:>9s} | {prop.name:20s} | {prop.status.value:11s} | "
            f"{format_money(prop.rent_amount)}/mo"
        )
        click.echo(f"    {prop.address} | {prop.bedrooms} bd / {prop.bathrooms} ba")
        if prop.description:
            click.echo(f"    {prop.description}")


@property_group.command("edit")
@click.argument("property_id", metavar="PROPERTY_ID")
@click.option("--name", help="New name")
@click.option("--address", help="New address")
@click.option("--rent", help="New monthly rent amount")
@click.option("--bedrooms", type=int, help="New bedroom count")
@click.option("--bathrooms", help="New bathroom count")
@click.option("--description", help="New description")
@click.option("--image", type=click.Path(exists=True, dir_okay=False), help="New photo image file")
@click.pass_context
def edit_property(
    ctx,
    property_id: str,
    name: str | None,
    address: str | None,
    rent: str | None,
    bedrooms: int | None,
    bathrooms: str | None,
    description: str | None,
    image: str | None,
):
    """Edit property details."""
    db = ctx.obj["db"]
    service = PropertyService(db)

    changes = {}
    if name is not None:
        changes["name"] = name
    if address is not None:
        changes["address"] = address
    if rent is not None:
        changes["rent_amount"] = _amount_or_exit(ctx, rent, "rent amount")
    if bedrooms is not None:
        changes["bedrooms"] = bedrooms
    if bathrooms is not None:
        changes["bathrooms"] = _amount_or_exit(ctx, bathrooms, "bathroom count")
    if description is not None:
        changes["description"] = description
    if image is not None:
        changes["image_url"] = _image_or_exit(ctx, image)

    if not changes:
        click.echo("Nothing to change.")
        return

    try:
        prop = service.update_property(property_id, **changes)
    except DomainError as e:
        handle_domain_error(ctx, e, "Cannot update property")
    click.echo(f"Updated property '{prop.name}'")


@property_group.command("status")
@click.argument("property_id", metavar="PROPERTY_ID")
@click.argument("status", type=STATUS_CHOICE)
@click.pass_context
def set_status(ctx, property_id: str, status: str):
    """Set the occupancy status (Occupied, Vacant or Maintenance)."""
    db = ctx.obj["db"]
    service = PropertyService(db)

    try:
        prop = service.set_status(property_id, _status(status))
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Property '{prop.name}' is now {prop.status.value}")


@property_group.command("describe")
@click.argument("property_id", metavar="PROPERTY_ID")
@click.option("--features", required=True, help="Key features to highlight")
@click.option("--type", "property_type", default="Apartment", show_default=True, help="Property type")
@click.option("--save", is_flag=True, help="Store the generated text as the property description")
@click.pass_context
def describe_property(ctx, property_id: str, features: str, property_type: str, save: bool):
    """Draft a listing description for a property."""
    db = ctx.obj["db"]
    service = PropertyService(db)

    try:
        prop = service.require_property(property_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    text = TextGenerator().generate_property_description(
        prop.name, property_type, prop.bedrooms, float(prop.bathrooms), features
    )
    click.echo(text)
    if not save:
        return
    if text in DESCRIPTION_FALLBACKS:
        click.echo(f"\nDescription for '{prop.name}' was not saved.")
        return
    service.update_property(prop.id, description=text)
    click.echo(f"\nSaved description for '{prop.name}'")


@property_group.command("delete")
@click.argument("property_id", metavar="PROPERTY_ID")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_property(ctx, property_id: str, yes: bool):
    """Delete a property. Tenants keep their property reference."""
    db = ctx.obj["db"]
    service = PropertyService(db)

    try:
        prop = service.require_property(property_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Are you sure you want to delete property '{prop.name}'?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_property(property_id)
    click.echo(f"Deleted property '{prop.name}'")


def register_commands(cli):
    """Register property commands with main CLI."""
    cli.add_command(property_group, name="property")
