"""Audit trail of ledger mutations."""

from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Iterator, Optional, Sequence

PROFILE_CREATED = "Tenant profile created"


@dataclass(frozen=True)
class AuditTrailEntry:
    """One human-readable audit record.

    ``timestamp`` is a timezone-aware UTC datetime. Entries loaded from
    storage with a display-only date string that could not be parsed keep
    that string in ``legacy_timestamp`` and have no structured timestamp.
    """

    action: str
    timestamp: Optional[datetime]
    legacy_timestamp: Optional[str] = None

    def display_timestamp(self, fmt: str = "%m/%d/%Y • %H:%M") -> str:
        """Format the timestamp in local time for display."""
        if self.timestamp is None:
            return self.legacy_timestamp or ""
        return self.timestamp.astimezone().strftime(fmt)


class AuditTrail:
    """Immutable, newest-first sequence of audit entries."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Sequence[AuditTrailEntry] = ()):
        self._entries: tuple[AuditTrailEntry, ...] = tuple(entries)

    def __iter__(self) -> Iterator[AuditTrailEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> AuditTrailEntry:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuditTrail):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"AuditTrail({list(self._entries)!r})"

    def head(self) -> Optional[AuditTrailEntry]:
        """Return the most recent entry, or None for an empty trail."""
        return self._entries[0] if self._entries else None

    def record(self, action: str, at: Optional[datetime] = None) -> "AuditTrail":
        """Return a new trail with an entry for action prepended.

        Args:
            action: Human-readable description of the mutation
            at: Time of the mutation (defaults to now, UTC)
        """
        entry = AuditTrailEntry(action=action, timestamp=at or datetime.now(UTC))
        return AuditTrail((entry,) + self._entries)


def payment_action(year: int, month: str, paid: bool) -> str:
    """Describe a ledger toggle, e.g. "Marked Feb 2024 as Paid"."""
    return f"Marked {month} {year} as {'Paid' if paid else 'Unpaid'}"
