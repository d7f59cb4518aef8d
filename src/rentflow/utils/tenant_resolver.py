"""Utility for resolving tenant names to IDs."""

from rentflow.domain.errors import ConflictError, NotFoundError
from rentflow.domain.tenant import TenantService


def resolve_tenant(tenant_service: TenantService, tenant: str) -> str:
    """Resolve tenant name or ID to tenant ID.

    Args:
        tenant_service: TenantService instance
        tenant: Tenant ID or tenant name (case-insensitive)

    Returns:
        Tenant ID

    Raises:
        NotFoundError: If no tenant matches
        ConflictError: If the name matches more than one tenant
    """
    # Exact ID match wins
    if tenant_service.get_tenant(tenant) is not None:
        return tenant

    matches = tenant_service.roster.find_by_name(tenant)
    if len(matches) == 1:
        return matches[0].id
    if len(matches) > 1:
        ids = ", ".join(t.id for t in matches)
        raise ConflictError(f"Tenant name '{tenant}' is ambiguous (IDs: {ids}); use the ID")

    raise NotFoundError(f"Tenant '{tenant}' not found")
