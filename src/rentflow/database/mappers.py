"""Mapper functions to convert between domain models and stored JSON documents.

The documents use the camelCase layout of the original browser storage
blobs, so data exported from there loads unchanged. Amounts are written as
strings to keep Decimal precision; numbers are accepted on read.
"""

from datetime import date, datetime, UTC
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dateutil import parser as date_parser

from rentflow.domain import entities as domain
from rentflow.domain.audit import AuditTrail, AuditTrailEntry
from rentflow.domain.ledger import Ledger


class MappingError(ValueError):
    """A stored document does not have the expected shape."""


def _to_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool):
        raise MappingError(f"Field '{field_name}' must be numeric, got {value!r}")
    try:
        amount = Decimal(str(value)) if value is not None else Decimal("0")
    except InvalidOperation:
        raise MappingError(f"Field '{field_name}' must be numeric, got {value!r}")
    if not amount.is_finite():
        raise MappingError(f"Field '{field_name}' must be a finite number, got {value!r}")
    return amount


def _to_date(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise MappingError(f"Invalid date {value!r}")


def _date_str(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def audit_entry_to_dict(entry: AuditTrailEntry) -> dict[str, Any]:
    """Convert an audit entry to its stored form."""
    if entry.timestamp is None:
        stamp = entry.legacy_timestamp or ""
    else:
        stamp = entry.timestamp.isoformat()
    return {"date": stamp, "action": entry.action}


def audit_entry_from_dict(data: dict[str, Any]) -> AuditTrailEntry:
    """Convert a stored audit entry to a domain AuditTrailEntry.

    ISO-8601 timestamps are read as UTC when they carry no offset. Older
    display strings such as "6/01/2024 • 10:30" are parsed with dateutil;
    if that fails the raw text is kept as a legacy timestamp.
    """
    if not isinstance(data, dict):
        raise MappingError(f"Audit entry must be an object, got {type(data).__name__}")
    action = data.get("action")
    if not isinstance(action, str):
        raise MappingError("Audit entry is missing 'action'")
    raw = data.get("date") or ""

    try:
        timestamp = datetime.fromisoformat(raw)
    except (TypeError, ValueError):
        try:
            timestamp = date_parser.parse(raw, fuzzy=True)
        except (TypeError, ValueError, OverflowError):
            return AuditTrailEntry(action=action, timestamp=None, legacy_timestamp=str(raw))

    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return AuditTrailEntry(action=action, timestamp=timestamp)


def tenant_to_dict(tenant: domain.Tenant) -> dict[str, Any]:
    """Convert domain Tenant entity to its stored JSON form."""
    return {
        "id": tenant.id,
        "name": tenant.name,
        "email": tenant.email,
        "phone": tenant.phone,
        "rentAmount": str(tenant.rent_amount),
        "startDate": _date_str(tenant.start_date),
        "photoUrl": tenant.photo_url,
        "payments": tenant.ledger.to_dict(),
        "paymentHistory": [audit_entry_to_dict(e) for e in tenant.audit_trail],
        "propertyId": tenant.property_id,
        "leaseEnd": _date_str(tenant.lease_end),
        "notes": tenant.notes,
    }


def tenant_from_dict(data: dict[str, Any]) -> domain.Tenant:
    """Convert a stored tenant document to a domain Tenant entity.

    Raises:
        MappingError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise MappingError(f"Tenant document must be an object, got {type(data).__name__}")
    tenant_id = data.get("id")
    name = data.get("name")
    if not tenant_id or not isinstance(name, str):
        raise MappingError("Tenant document is missing 'id' or 'name'")

    payments = data.get("payments") or {}
    if not isinstance(payments, dict):
        raise MappingError(f"Tenant {tenant_id} has malformed payments")

    history = data.get("paymentHistory") or []
    if not isinstance(history, list):
        raise MappingError(f"Tenant {tenant_id} has malformed payment history")

    return domain.Tenant(
        id=str(tenant_id),
        name=name,
        rent_amount=_to_decimal(data.get("rentAmount"), "rentAmount"),
        email=data.get("email") or None,
        phone=data.get("phone") or None,
        photo_url=data.get("photoUrl") or None,
        notes=data.get("notes") or None,
        start_date=_to_date(data.get("startDate")),
        lease_end=_to_date(data.get("leaseEnd")),
        property_id=data.get("propertyId") or None,
        ledger=Ledger(payments),
        audit_trail=AuditTrail(audit_entry_from_dict(e) for e in history),
    )


def property_to_dict(prop: domain.Property) -> dict[str, Any]:
    """Convert domain Property entity to its stored JSON form."""
    return {
        "id": prop.id,
        "name": prop.name,
        "address": prop.address,
        "rentAmount": str(prop.rent_amount),
        "status": prop.status.value,
        "description": prop.description,
        "bedrooms": prop.bedrooms,
        "bathrooms": str(prop.bathrooms),
        "imageUrl": prop.image_url,
    }


def property_from_dict(data: dict[str, Any]) -> domain.Property:
    """Convert a stored property document to a domain Property entity.

    Raises:
        MappingError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise MappingError(f"Property document must be an object, got {type(data).__name__}")
    property_id = data.get("id")
    if not property_id:
        raise MappingError("Property document is missing 'id'")
    try:
        status = domain.PropertyStatus(data.get("status", domain.PropertyStatus.VACANT.value))
    except ValueError:
        raise MappingError(f"Property {property_id} has unknown status {data.get('status')!r}")
    try:
        bedrooms = int(data.get("bedrooms") or 0)
    except (TypeError, ValueError, OverflowError):
        raise MappingError(f"Property {property_id} has malformed bedrooms")

    return domain.Property(
        id=str(property_id),
        name=data.get("name") or "",
        address=data.get("address") or "",
        rent_amount=_to_decimal(data.get("rentAmount"), "rentAmount"),
        status=status,
        bedrooms=bedrooms,
        bathrooms=_to_decimal(data.get("bathrooms"), "bathrooms"),
        description=data.get("description") or "",
        image_url=data.get("imageUrl") or None,
    )


def roster_to_payload(tenants) -> list[dict[str, Any]]:
    """Serialize tenants (e.g. a Roster) in display order."""
    return [tenant_to_dict(t) for t in tenants]


def roster_from_payload(payload: Any) -> list[domain.Tenant]:
    """Deserialize a stored tenant list.

    Raises:
        MappingError: If the payload is not a list of tenant documents
    """
    if not isinstance(payload, list):
        raise MappingError("Tenant roster document must be a list")
    return [tenant_from_dict(item) for item in payload]


def properties_to_payload(properties) -> list[dict[str, Any]]:
    """Serialize properties in display order."""
    return [property_to_dict(p) for p in properties]


def properties_from_payload(payload: Any) -> list[domain.Property]:
    """Deserialize a stored property list.

    Raises:
        MappingError: If the payload is not a list of property documents
    """
    if not isinstance(payload, list):
        raise MappingError("Property list document must be a list")
    return [property_from_dict(item) for item in payload]
