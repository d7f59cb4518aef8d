"""CLI helpers for tenant resolution."""

from __future__ import annotations

import click
from rentflow.domain.errors import DomainError
from rentflow.domain.tenant import TenantService
from rentflow.utils.tenant_resolver import resolve_tenant
from rentflow.cli.error_handling import handle_domain_error


def resolve_tenant_or_exit(
    ctx: click.Context, tenant_service: TenantService, tenant: str
) -> str:
    """Resolve tenant name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_tenant(tenant_service, tenant)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
