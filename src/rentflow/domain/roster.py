"""Roster: the ordered collection of all tenants."""

from typing import Iterable, Iterator, Optional

from rentflow.domain.entities import Tenant
from rentflow.domain.errors import ConflictError, duplicate_tenant_id


class Roster:
    """Immutable collection of tenants keyed by id.

    Newly added tenants come first in the default ordering. Every operation
    returns a new Roster; the original is left untouched.
    """

    __slots__ = ("_tenants",)

    def __init__(self, tenants: Iterable[Tenant] = ()):
        tenants = tuple(tenants)
        seen: set[str] = set()
        for tenant in tenants:
            if tenant.id in seen:
                raise ConflictError(duplicate_tenant_id(tenant.id))
            seen.add(tenant.id)
        self._tenants: tuple[Tenant, ...] = tenants

    def __iter__(self) -> Iterator[Tenant]:
        return iter(self._tenants)

    def __len__(self) -> int:
        return len(self._tenants)

    def __contains__(self, tenant_id: object) -> bool:
        return any(tenant.id == tenant_id for tenant in self._tenants)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roster):
            return NotImplemented
        return self._tenants == other._tenants

    def __repr__(self) -> str:
        return f"Roster({list(self._tenants)!r})"

    def get(self, tenant_id: str) -> Optional[Tenant]:
        """Return the tenant with tenant_id, or None."""
        for tenant in self._tenants:
            if tenant.id == tenant_id:
                return tenant
        return None

    def find_by_name(self, name: str) -> list[Tenant]:
        """Return tenants whose name matches exactly (case-insensitive)."""
        wanted = name.strip().lower()
        return [tenant for tenant in self._tenants if tenant.name.lower() == wanted]

    def add(self, tenant: Tenant) -> "Roster":
        """Insert tenant at the front.

        Raises:
            ConflictError: If a tenant with the same id is already present
        """
        if tenant.id in self:
            raise ConflictError(duplicate_tenant_id(tenant.id))
        return Roster((tenant,) + self._tenants)

    def update(self, tenant: Tenant) -> "Roster":
        """Replace the tenant with the same id. Unknown ids leave the roster unchanged."""
        if tenant.id not in self:
            return self
        return Roster(tenant if t.id == tenant.id else t for t in self._tenants)

    def remove(self, tenant_id: str) -> "Roster":
        """Remove the tenant with tenant_id. Unknown ids leave the roster unchanged."""
        if tenant_id not in self:
            return self
        return Roster(t for t in self._tenants if t.id != tenant_id)

    def search(self, term: str) -> list[Tenant]:
        """Filter tenants by name, email or phone.

        Name and email match case-insensitively; phone matches as a plain
        substring. An empty term matches every tenant.
        """
        needle = term.lower()
        results = []
        for tenant in self._tenants:
            if needle in tenant.name.lower():
                results.append(tenant)
            elif tenant.email and needle in tenant.email.lower():
                results.append(tenant)
            elif tenant.phone and term in tenant.phone:
                results.append(tenant)
        return results
