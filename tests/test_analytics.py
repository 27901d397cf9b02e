"""Tests for portfolio analytics — distribution, averages and high-risk listing."""

from __future__ import annotations

import math

import pytest

from vendor_risk.models.vendor import RiskLevel, Vendor, VendorMetrics, VendorStatus
from vendor_risk.services.analytics import (
    METRIC_NAMES,
    average_metrics,
    high_risk_vendors,
    risk_distribution,
    status_counts,
    summarize,
)


def _vendor(vendor_id: str, risk: RiskLevel, value: int = 50, status=VendorStatus.PENDING) -> Vendor:
    metrics = VendorMetrics(
        financial_health=value, safety_record=value, project_performance=value, compliance=value
    )
    return Vendor(
        id=vendor_id,
        name=f"Vendor {vendor_id}",
        status=status,
        risk_level=risk,
        overall_score=metrics.weighted_score(),
        metrics=metrics,
    )


# ─── Empty collection ───────────────────────────────────────────────────────

class TestEmptyCollection:
    """An empty portfolio yields a defined no-data result."""

    def test_distribution_empty(self):
        assert risk_distribution([]) == {}

    def test_averages_none(self):
        assert average_metrics([]) is None

    def test_high_risk_empty(self):
        assert high_risk_vendors([]) == []

    def test_summarize_empty(self):
        result = summarize([])
        assert set(result) == {"total_vendors", "distribution", "averages", "high_risk", "status_counts"}
        assert result["total_vendors"] == 0
        assert result["distribution"] == {}
        assert result["averages"] is None
        assert result["high_risk"] == []
        assert all(n == 0 for n in result["status_counts"].values())


# ─── Risk distribution ──────────────────────────────────────────────────────

class TestRiskDistribution:
    """Tests for per-level counts."""

    def test_counts_per_level(self):
        vendors = [
            _vendor("1", RiskLevel.LOW),
            _vendor("2", RiskLevel.CRITICAL),
            _vendor("3", RiskLevel.LOW),
            _vendor("4", RiskLevel.HIGH),
        ]
        assert risk_distribution(vendors) == {
            RiskLevel.LOW: 2,
            RiskLevel.HIGH: 1,
            RiskLevel.CRITICAL: 1,
        }

    def test_zero_levels_omitted(self):
        dist = risk_distribution([_vendor("1", RiskLevel.MEDIUM)])
        assert list(dist) == [RiskLevel.MEDIUM]

    def test_fixed_level_order(self):
        vendors = [
            _vendor("1", RiskLevel.CRITICAL),
            _vendor("2", RiskLevel.MEDIUM),
            _vendor("3", RiskLevel.LOW),
            _vendor("4", RiskLevel.HIGH),
        ]
        assert list(risk_distribution(vendors)) == [
            RiskLevel.LOW,
            RiskLevel.MEDIUM,
            RiskLevel.HIGH,
            RiskLevel.CRITICAL,
        ]


# ─── Average metrics ────────────────────────────────────────────────────────

class TestAverageMetrics:
    """Tests for mean sub-metrics."""

    @pytest.mark.parametrize("value", [0, 37, 100])
    @pytest.mark.parametrize("count", [1, 5, 20])
    def test_identical_vendors_average_to_their_value(self, value, count):
        vendors = [_vendor(str(i), RiskLevel.LOW, value) for i in range(count)]
        assert average_metrics(vendors) == {name: value for name in METRIC_NAMES}

    def test_half_rounds_up(self):
        vendors = [_vendor("1", RiskLevel.LOW, 81), _vendor("2", RiskLevel.LOW, 82)]
        averages = average_metrics(vendors)
        assert averages["financial_health"] == 82

    def test_metrics_averaged_independently(self):
        a_metrics = VendorMetrics(financial_health=90, safety_record=10, project_performance=50, compliance=0)
        b_metrics = VendorMetrics(financial_health=70, safety_record=30, project_performance=51, compliance=0)
        a = Vendor(id="a", name="A", overall_score=a_metrics.weighted_score(), metrics=a_metrics)
        b = Vendor(id="b", name="B", overall_score=b_metrics.weighted_score(), metrics=b_metrics)
        assert average_metrics([a, b]) == {
            "financial_health": 80,
            "safety_record": 20,
            "project_performance": 51,
            "compliance": 0,
        }

    def test_never_nan(self):
        averages = average_metrics([_vendor("1", RiskLevel.LOW, 0)])
        assert not any(math.isnan(v) for v in averages.values())


# ─── High risk and status counts ────────────────────────────────────────────

class TestHighRiskAndStatus:
    """Tests for the high-risk listing and status counts."""

    def test_high_and_critical_in_source_order(self):
        vendors = [
            _vendor("1", RiskLevel.CRITICAL),
            _vendor("2", RiskLevel.LOW),
            _vendor("3", RiskLevel.HIGH),
            _vendor("4", RiskLevel.MEDIUM),
            _vendor("5", RiskLevel.CRITICAL),
        ]
        assert [v.id for v in high_risk_vendors(vendors)] == ["1", "3", "5"]

    def test_status_counts_include_every_status(self):
        vendors = [
            _vendor("1", RiskLevel.LOW, status=VendorStatus.APPROVED),
            _vendor("2", RiskLevel.LOW),
            _vendor("3", RiskLevel.LOW),
        ]
        assert status_counts(vendors) == {
            VendorStatus.PENDING: 2,
            VendorStatus.APPROVED: 1,
            VendorStatus.REJECTED: 0,
        }

    def test_summarize_accepts_generators(self):
        result = summarize(_vendor(str(i), RiskLevel.HIGH, 60) for i in range(3))
        assert result["total_vendors"] == 3
        assert result["distribution"] == {RiskLevel.HIGH: 3}
        assert len(result["high_risk"]) == 3
        assert result["averages"]["compliance"] == 60
