"""Domain model entities for rentflow.

These are pure data classes representing business concepts, independent of
how they are stored. The persistence layer converts them to and from the
JSON documents kept in the key-value store (see ``rentflow.database.mappers``).
"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Container, Optional

from rentflow.domain.audit import AuditTrail
from rentflow.domain.ledger import Ledger


class PropertyStatus(str, Enum):
    """Occupancy status of a property."""

    OCCUPIED = "Occupied"
    VACANT = "Vacant"
    MAINTENANCE = "Maintenance"


class Tone(str, Enum):
    """Tone of a drafted tenant message."""

    PROFESSIONAL = "Professional"
    FRIENDLY = "Friendly"
    FIRM = "Firm"


@dataclass(frozen=True)
class Tenant:
    """Tenant aggregate: identity, contact fields, one ledger, one audit trail."""

    id: str
    name: str
    rent_amount: Decimal
    email: Optional[str] = None
    phone: Optional[str] = None
    photo_url: Optional[str] = None
    notes: Optional[str] = None
    start_date: Optional[date] = None
    lease_end: Optional[date] = None
    property_id: Optional[str] = None
    ledger: Ledger = field(default_factory=Ledger)
    audit_trail: AuditTrail = field(default_factory=AuditTrail)


@dataclass(frozen=True)
class Property:
    """Rental property domain entity."""

    id: str
    name: str
    address: str
    rent_amount: Decimal
    status: PropertyStatus = PropertyStatus.VACANT
    bedrooms: int = 1
    bathrooms: Decimal = Decimal("1")
    description: str = ""
    image_url: Optional[str] = None


@dataclass(frozen=True)
class Stats:
    """Revenue statistics derived from the roster for one year/month filter."""

    year: int
    month: str
    total_revenue: Decimal
    collected_revenue: Decimal
    monthly_income: dict[str, Decimal]
    active_tenants: int
    total_tenants: int


@dataclass(frozen=True)
class MonthlyBar:
    """One bar of the monthly income chart."""

    month: str
    income: Decimal
    active: bool


def generate_id(existing: Container[str] = ()) -> str:
    """Generate a short opaque id not present in existing."""
    while True:
        candidate = uuid.uuid4().hex[:9]
        if candidate not in existing:
            return candidate
