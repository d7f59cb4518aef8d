"""Per-tenant payment ledger."""

from collections.abc import Iterator, Mapping
from typing import Optional


class Ledger(Mapping):
    """Immutable mapping from payment key to paid flag.

    A missing key reads as unpaid. Entries are never removed: ``set_paid``
    returns a new ledger with the key overwritten and every other entry kept,
    including keys that do not decode as payment keys.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, bool]] = None):
        self._entries: dict[str, bool] = {
            str(key): bool(value) for key, value in (entries or {}).items()
        }

    def __getitem__(self, key: str) -> bool:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"Ledger({self._entries!r})"

    def is_paid(self, key: str) -> bool:
        """Return the stored flag for key, or False if the key was never set."""
        return self._entries.get(key, False)

    def set_paid(self, key: str, value: bool) -> "Ledger":
        """Return a new ledger with key mapped to value."""
        entries = dict(self._entries)
        entries[key] = bool(value)
        return Ledger(entries)

    def paid_count(self) -> int:
        """Number of months marked as paid across all years."""
        return sum(1 for value in self._entries.values() if value)

    def to_dict(self) -> dict[str, bool]:
        """Return a plain dict copy for serialization."""
        return dict(self._entries)
