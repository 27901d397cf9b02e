"""Tests for the QA approval workflow — pending filter and status transitions."""

from __future__ import annotations

import pytest

from vendor_risk.models.vendor import RiskLevel, VendorMetrics, VendorStatus
from vendor_risk.services.approval_workflow import approve, is_pending, pending_vendors, reject
from vendor_risk.services.vendors import create_vendor


@pytest.fixture
def vendor():
    base = create_vendor("Acme Construction", "Electrical", "excellent safety record", vendor_id="V-0001")
    return base.model_copy(
        update={
            "risk_level": RiskLevel.HIGH,
            "overall_score": 61,
            "metrics": VendorMetrics(
                financial_health=60, safety_record=62, project_performance=58, compliance=66
            ),
        }
    )


# ─── Pending filter ─────────────────────────────────────────────────────────

class TestPendingVendors:
    """Tests for the pending queue."""

    def test_empty_collection(self):
        assert pending_vendors([]) == []

    def test_only_pending_returned_in_source_order(self):
        a = create_vendor("A", vendor_id="V-A")
        b = approve(create_vendor("B", vendor_id="V-B"))
        c = create_vendor("C", vendor_id="V-C")
        d = reject(create_vendor("D", vendor_id="V-D"))
        e = create_vendor("E", vendor_id="V-E")
        assert [v.id for v in pending_vendors([a, b, c, d, e])] == ["V-A", "V-C", "V-E"]

    def test_accepts_any_iterable(self):
        vendors = (create_vendor(str(i), vendor_id=f"V-{i}") for i in range(3))
        assert len(pending_vendors(vendors)) == 3

    def test_is_pending(self, vendor):
        assert is_pending(vendor)
        assert not is_pending(approve(vendor))


# ─── Transitions ────────────────────────────────────────────────────────────

class TestTransitions:
    """Tests for approve and reject."""

    @pytest.mark.parametrize(
        "action,expected",
        [(approve, VendorStatus.APPROVED), (reject, VendorStatus.REJECTED)],
    )
    def test_sets_status(self, vendor, action, expected):
        assert action(vendor).status is expected

    @pytest.mark.parametrize("action", [approve, reject])
    def test_input_not_mutated(self, vendor, action):
        before = vendor.model_dump()
        action(vendor)
        assert vendor.model_dump() == before
        assert vendor.status is VendorStatus.PENDING

    @pytest.mark.parametrize("action", [approve, reject])
    def test_only_status_changes(self, vendor, action):
        result = action(vendor)
        assert result is not vendor
        assert result.model_dump(exclude={"status"}) == vendor.model_dump(exclude={"status"})

    def test_core_does_not_police_terminal_states(self, vendor):
        """Re-reviewing is the caller's policy decision, not the workflow's."""
        assert reject(approve(vendor)).status is VendorStatus.REJECTED

    def test_approved_vendor_leaves_pending_queue(self, vendor):
        other = create_vendor("Other", vendor_id="V-0002")
        collection = [vendor, other]
        updated = approve(vendor)
        collection = [updated if v.id == updated.id else v for v in collection]
        assert vendor.id not in [v.id for v in pending_vendors(collection)]
        assert [v.id for v in pending_vendors(collection)] == ["V-0002"]
