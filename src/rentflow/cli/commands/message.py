"""Tenant messaging commands."""

import click
from rentflow.cli.tenant_resolution import resolve_tenant_or_exit
from rentflow.domain.entities import Tone
from rentflow.domain.generation import TextGenerator
from rentflow.domain.tenant import TenantService


@click.group()
def message_group():
    """Draft messages to tenants."""
    pass


@message_group.command("draft")
@click.argument("tenant", metavar="TENANT")
@click.option("--topic", required=True, help="What the message is about (e.g. 'rent reminder')")
@click.option(
    "--tone",
    type=click.Choice([t.value for t in Tone], case_sensitive=False),
    default=Tone.PROFESSIONAL.value,
    show_default=True,
    help="Tone of the message",
)
@click.pass_context
def draft_message(ctx, tenant: str, topic: str, tone: str):
    """Draft a short SMS/email message to a tenant.

    TENANT can be a tenant name or ID.

    Examples:
        rentflow message draft "Yab" --topic "rent due on the 1st" --tone Friendly
    """
    db = ctx.obj["db"]
    service = TenantService(db)
    tenant_id = resolve_tenant_or_exit(ctx, service, tenant)
    t = service.require_tenant(tenant_id)

    tone_value = next(x for x in Tone if x.value.lower() == tone.lower())
    click.echo(TextGenerator().draft_tenant_message(t.name, topic, tone_value))


def register_commands(cli):
    """Register message commands with main CLI."""
    cli.add_command(message_group, name="message")
