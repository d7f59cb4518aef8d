"""Tenant aggregate transitions and the tenant domain service."""

import dataclasses
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from rentflow.database.base import Database, TENANTS_NAMESPACE
from rentflow.database.mappers import MappingError, roster_from_payload, roster_to_payload
from rentflow.domain.audit import PROFILE_CREATED, AuditTrail, payment_action
from rentflow.domain.entities import Tenant, generate_id
from rentflow.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    readonly_tenant_fields,
    tenant_not_found,
)
from rentflow.domain.ledger import Ledger
from rentflow.domain.payment_key import encode
from rentflow.domain.roster import Roster
from rentflow.domain.seed import seed_tenants

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(
    {
        "name",
        "rent_amount",
        "email",
        "phone",
        "photo_url",
        "notes",
        "start_date",
        "lease_end",
        "property_id",
    }
)


def _coerce_rent(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Rent amount must be a number, got {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"Rent amount must be a number, got {value!r}")
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"Rent amount must be a non-negative number, got {value!r}")
    return amount


def create_tenant(
    name: str,
    rent_amount: Decimal | int | str,
    *,
    tenant_id: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    photo_url: Optional[str] = None,
    notes: Optional[str] = None,
    start_date: Optional[date] = None,
    lease_end: Optional[date] = None,
    property_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Tenant:
    """Create a new tenant with an empty ledger.

    The audit trail is seeded with a single "Tenant profile created" entry.
    The start date defaults to the creation date.

    Raises:
        ValidationError: If the name is blank or the rent is not a non-negative number
    """
    if not name or not name.strip():
        raise ValidationError("Tenant name is required")
    trail = AuditTrail().record(PROFILE_CREATED, at=now)
    return Tenant(
        id=tenant_id or generate_id(),
        name=name.strip(),
        rent_amount=_coerce_rent(rent_amount),
        email=email or None,
        phone=phone or None,
        photo_url=photo_url or None,
        notes=notes or None,
        start_date=start_date or (trail.head().timestamp.astimezone().date()),
        lease_end=lease_end,
        property_id=property_id or None,
        ledger=Ledger(),
        audit_trail=trail,
    )


def toggle_payment(
    tenant: Tenant, year: int, month: str, now: Optional[datetime] = None
) -> Tenant:
    """Flip the paid flag for one month and record it in the audit trail.

    Toggling the same month twice restores the original flag and adds two
    audit entries.

    Raises:
        ValidationError: If year/month do not form a valid payment key
    """
    key = encode(year, month)
    paid = not tenant.ledger.is_paid(key)
    return dataclasses.replace(
        tenant,
        ledger=tenant.ledger.set_paid(key, paid),
        audit_trail=tenant.audit_trail.record(payment_action(year, month, paid), at=now),
    )


def set_payment(
    tenant: Tenant, year: int, month: str, paid: bool, now: Optional[datetime] = None
) -> Tenant:
    """Set the paid flag for one month to an explicit value.

    Unlike toggle_payment, repeating the call leaves the ledger unchanged,
    but every call is still recorded in the audit trail.
    """
    key = encode(year, month)
    return dataclasses.replace(
        tenant,
        ledger=tenant.ledger.set_paid(key, paid),
        audit_trail=tenant.audit_trail.record(payment_action(year, month, paid), at=now),
    )


def edit_tenant(tenant: Tenant, **changes: Any) -> Tenant:
    """Overwrite contact and lease fields, keeping ledger and audit trail.

    Field edits are not recorded in the audit trail.

    Raises:
        ValidationError: If a field is unknown or not editable, the name is
            blank, or the rent is not a non-negative number
    """
    rejected = [name for name in changes if name not in EDITABLE_FIELDS]
    if rejected:
        raise ValidationError(readonly_tenant_fields(rejected))

    if "name" in changes:
        name = changes["name"]
        if not name or not str(name).strip():
            raise ValidationError("Tenant name is required")
        changes["name"] = str(name).strip()
    if "rent_amount" in changes:
        changes["rent_amount"] = _coerce_rent(changes["rent_amount"])

    return dataclasses.replace(tenant, **changes)


class TenantService:
    """Service holding the tenant roster and persisting every committed change."""

    def __init__(self, db: Database):
        """Initialize tenant service and load the roster.

        Args:
            db: Database instance
        """
        self.db = db
        self.roster = self._load_roster()
        self._selected_id: Optional[str] = None

    def _load_roster(self) -> Roster:
        payload = self.db.load(TENANTS_NAMESPACE)
        if payload is None:
            logger.info("No stored tenants, starting from demo data")
            return Roster(seed_tenants())
        try:
            return Roster(roster_from_payload(payload))
        except (MappingError, ConflictError) as e:
            logger.warning("Stored tenants are unreadable (%s), starting from demo data", e)
            return Roster(seed_tenants())

    def _commit(self, roster: Roster) -> None:
        self.roster = roster
        if not self.db.save(TENANTS_NAMESPACE, roster_to_payload(roster)):
            logger.error("Tenant roster was not saved; changes are kept for this session only")

    def list_tenants(self, search: Optional[str] = None) -> list[Tenant]:
        """List tenants in display order, optionally filtered by a search term."""
        if search:
            return self.roster.search(search)
        return list(self.roster)

    def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        """Get tenant by ID.

        Returns:
            Tenant entity or None if not found
        """
        return self.roster.get(tenant_id)

    def require_tenant(self, tenant_id: str) -> Tenant:
        """Get tenant by ID.

        Raises:
            NotFoundError: If the tenant does not exist
        """
        tenant = self.roster.get(tenant_id)
        if tenant is None:
            raise NotFoundError(tenant_not_found(tenant_id))
        return tenant

    def add_tenant(self, name: str, rent_amount: Decimal | int | str, **fields: Any) -> Tenant:
        """Create a tenant with a fresh id and put it at the front of the roster.

        Args:
            name: Tenant name
            rent_amount: Monthly rent
            **fields: Optional contact and lease fields accepted by create_tenant

        Returns:
            The new tenant
        """
        fields.pop("tenant_id", None)
        tenant = create_tenant(
            name, rent_amount, tenant_id=generate_id(self.roster), **fields
        )
        self._commit(self.roster.add(tenant))
        logger.info("Added tenant %s (%s)", tenant.id, tenant.name)
        return tenant

    def update_tenant(self, tenant: Tenant) -> None:
        """Replace the stored tenant with the same id; unknown ids are ignored."""
        if tenant.id not in self.roster:
            logger.debug("Ignoring update for unknown tenant %s", tenant.id)
            return
        self._commit(self.roster.update(tenant))

    def edit_tenant(self, tenant_id: str, **changes: Any) -> Tenant:
        """Edit tenant fields.

        Raises:
            NotFoundError: If the tenant does not exist
            ValidationError: If the changes are invalid
        """
        tenant = edit_tenant(self.require_tenant(tenant_id), **changes)
        self._commit(self.roster.update(tenant))
        return tenant

    def delete_tenant(self, tenant_id: str) -> None:
        """Delete a tenant. Unknown ids are ignored."""
        if tenant_id not in self.roster:
            return
        if self._selected_id == tenant_id:
            self._selected_id = None
        self._commit(self.roster.remove(tenant_id))
        logger.info("Deleted tenant %s", tenant_id)

    def toggle_payment(
        self, tenant_id: str, year: int, month: str, now: Optional[datetime] = None
    ) -> Tenant:
        """Flip one month's payment flag for a tenant.

        Raises:
            NotFoundError: If the tenant does not exist
            ValidationError: If year/month do not form a valid payment key
        """
        tenant = toggle_payment(self.require_tenant(tenant_id), year, month, now=now)
        self._commit(self.roster.update(tenant))
        logger.info("Tenant %s: %s", tenant.id, tenant.audit_trail.head().action)
        return tenant

    def set_payment(
        self,
        tenant_id: str,
        year: int,
        month: str,
        paid: bool,
        now: Optional[datetime] = None,
    ) -> Tenant:
        """Set one month's payment flag for a tenant to an explicit value.

        Raises:
            NotFoundError: If the tenant does not exist
            ValidationError: If year/month do not form a valid payment key
        """
        tenant = set_payment(self.require_tenant(tenant_id), year, month, paid, now=now)
        self._commit(self.roster.update(tenant))
        logger.info("Tenant %s: %s", tenant.id, tenant.audit_trail.head().action)
        return tenant

    def select_tenant(self, tenant_id: Optional[str]) -> Optional[Tenant]:
        """Select the tenant shown in the detail view (None clears the selection)."""
        if tenant_id is not None:
            self.require_tenant(tenant_id)
        self._selected_id = tenant_id
        return self.selected_tenant

    @property
    def selected_tenant(self) -> Optional[Tenant]:
        """The tenant in the detail view, always read from the current roster."""
        if self._selected_id is None:
            return None
        return self.roster.get(self._selected_id)
