"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


def tenant_not_found(tenant_id: str) -> str:
    """Return message for missing tenant."""
    return f"Tenant {tenant_id} not found"


def property_not_found(property_id: str) -> str:
    """Return message for missing property."""
    return f"Property {property_id} not found"


def duplicate_tenant_id(tenant_id: str) -> str:
    """Return message for a tenant ID already present in the roster."""
    return f"Tenant with id '{tenant_id}' already exists"


def duplicate_property_id(property_id: str) -> str:
    """Return message for a property ID already present in the property list."""
    return f"Property with id '{property_id}' already exists"


def invalid_month(month: str) -> str:
    """Return message for an unrecognized month abbreviation."""
    return f"Unknown month '{month}'. Expected one of Jan, Feb, ..., Dec"


def invalid_payment_key(key: str) -> str:
    """Return message for a ledger key not shaped like '<year>-<Mon>'."""
    return f"Invalid payment key '{key}'. Expected '<year>-<Mon>' (e.g. 2024-Jan)"


def readonly_tenant_fields(fields: list[str]) -> str:
    """Return message when an edit names fields that cannot be edited."""
    names = ", ".join(sorted(fields))
    return f"Cannot edit tenant field{'s' if len(fields) != 1 else ''}: {names}"
