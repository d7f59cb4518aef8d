"""Built-in demo data used when nothing usable is stored yet."""

from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Optional

from rentflow.domain.audit import AuditTrail, AuditTrailEntry, payment_action
from rentflow.domain.entities import Property, PropertyStatus, Tenant
from rentflow.domain.ledger import Ledger
from rentflow.domain.payment_key import MONTHS, encode


def seed_properties() -> list[Property]:
    """Return the two demo properties."""
    return [
        Property(
            id="p1",
            name="Sunset Heights 3B",
            address="123 Sunset Blvd, CA",
            rent_amount=Decimal("2400"),
            status=PropertyStatus.OCCUPIED,
            bedrooms=2,
            bathrooms=Decimal("2"),
            description="Modern unit with great views and updated kitchen.",
            image_url="https://picsum.photos/400/300?random=1",
        ),
        Property(
            id="p3",
            name="Lakeside Villa",
            address="88 Lakeview Dr",
            rent_amount=Decimal("3200"),
            status=PropertyStatus.MAINTENANCE,
            bedrooms=3,
            bathrooms=Decimal("2.5"),
            description="Spacious villa undergoing renovations.",
            image_url="https://picsum.photos/400/300?random=3",
        ),
    ]


def seed_tenants(today: Optional[date] = None) -> list[Tenant]:
    """Return the three demo tenants with payments for the current year.

    Args:
        today: Reference date (defaults to today); its year keys the demo ledgers
    """
    today = today or date.today()
    year = today.year
    current_month = MONTHS[today.month - 1]

    def at(month: int, day: int) -> datetime:
        return datetime(year, month, day, tzinfo=UTC)

    return [
        Tenant(
            id="t1",
            name="frvd",
            email="frvd@example.com",
            phone="555-0101",
            rent_amount=Decimal("1334"),
            start_date=date(2023, 6, 1),
            ledger=Ledger({encode(year, "Jan"): False, encode(year, "Feb"): False}),
            notes="Prefers communication via text. Lease renewal discussion pending for next month.",
        ),
        Tenant(
            id="t2",
            name="Yab",
            email="yab@example.com",
            phone="555-0102",
            rent_amount=Decimal("1000"),
            start_date=date(2024, 1, 15),
            photo_url="https://picsum.photos/200/200?random=11",
            ledger=Ledger(
                {
                    encode(year, "Jan"): True,
                    encode(year, "Feb"): False,
                    encode(year, "Jun"): True,
                }
            ),
            audit_trail=AuditTrail(
                [
                    AuditTrailEntry(payment_action(year, "Jun", True), at(6, 1)),
                    AuditTrailEntry(payment_action(year, "Jan", True), at(1, 20)),
                ]
            ),
        ),
        Tenant(
            id="t3",
            name="Mike Johnson",
            email="mike@example.com",
            phone="555-0103",
            rent_amount=Decimal("1200"),
            start_date=date(2023, 11, 1),
            photo_url="https://picsum.photos/200/200?random=12",
            ledger=Ledger({encode(year, current_month): True, encode(year, "Jan"): True}),
            audit_trail=AuditTrail(
                [
                    AuditTrailEntry(
                        payment_action(year, current_month, True),
                        at(today.month, today.day),
                    )
                ]
            ),
            notes="Dog owner (Golden Retriever named Max). Security deposit includes pet fee.",
        ),
    ]
