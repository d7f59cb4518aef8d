"""Tests for the payment ledger and audit trail."""

from datetime import datetime, timedelta, UTC

import pytest

from rentflow.domain.audit import AuditTrail, AuditTrailEntry, payment_action
from rentflow.domain.ledger import Ledger


class TestLedger:
    """Tests for Ledger."""

    def test_absent_key_reads_unpaid(self):
        assert Ledger().is_paid("2024-Jan") is False

    def test_explicit_false_reads_unpaid(self):
        assert Ledger({"2024-Jan": False}).is_paid("2024-Jan") is False

    def test_set_paid_returns_new_ledger(self):
        ledger = Ledger({"2024-Jan": True})
        updated = ledger.set_paid("2024-Feb", True)

        assert updated.is_paid("2024-Feb") is True
        assert updated.is_paid("2024-Jan") is True
        assert "2024-Feb" not in ledger

    def test_set_paid_is_idempotent(self):
        ledger = Ledger().set_paid("2024-Mar", True)
        assert ledger.set_paid("2024-Mar", True) == ledger

    def test_setting_false_keeps_key(self):
        ledger = Ledger({"2024-Jan": True}).set_paid("2024-Jan", False)
        assert "2024-Jan" in ledger
        assert ledger["2024-Jan"] is False

    def test_malformed_keys_are_preserved(self):
        ledger = Ledger({"Jan": True, "2024-Jan": True}).set_paid("2024-Feb", True)
        assert ledger.to_dict() == {"Jan": True, "2024-Jan": True, "2024-Feb": True}

    def test_paid_count(self):
        ledger = Ledger({"2023-Dec": True, "2024-Jan": False, "2024-Feb": True})
        assert ledger.paid_count() == 2

    def test_equality_with_dict(self):
        assert Ledger({"2024-Jan": True}) == {"2024-Jan": True}

    def test_to_dict_is_a_copy(self):
        ledger = Ledger({"2024-Jan": True})
        data = ledger.to_dict()
        data["2024-Jan"] = False
        assert ledger.is_paid("2024-Jan") is True


class TestAuditTrail:
    """Tests for AuditTrail."""

    def test_empty_trail_has_no_head(self):
        assert AuditTrail().head() is None
        assert len(AuditTrail()) == 0

    def test_record_prepends(self):
        t0 = datetime(2024, 1, 1, tzinfo=UTC)
        trail = AuditTrail().record("first", at=t0).record("second", at=t0 + timedelta(hours=1))

        assert [e.action for e in trail] == ["second", "first"]
        assert trail.head().action == "second"
        assert trail.head().timestamp == t0 + timedelta(hours=1)

    def test_record_leaves_original_untouched(self):
        trail = AuditTrail().record("first")
        trail.record("second")
        assert len(trail) == 1

    def test_record_defaults_to_utc_now(self):
        before = datetime.now(UTC)
        entry = AuditTrail().record("now").head()
        assert entry.timestamp.tzinfo is not None
        assert entry.timestamp >= before

    def test_entries_are_immutable(self):
        entry = AuditTrailEntry(action="x", timestamp=datetime.now(UTC))
        with pytest.raises(Exception):
            entry.action = "y"

    def test_display_timestamp_for_legacy_entry(self):
        entry = AuditTrailEntry(action="x", timestamp=None, legacy_timestamp="sometime")
        assert entry.display_timestamp() == "sometime"

    def test_payment_action(self):
        assert payment_action(2024, "Feb", True) == "Marked Feb 2024 as Paid"
        assert payment_action(2024, "Feb", False) == "Marked Feb 2024 as Unpaid"
