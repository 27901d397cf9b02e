"""Portfolio risk analytics — derived views over a vendor snapshot."""

from __future__ import annotations

import statistics
from collections.abc import Iterable, Sequence
from typing import Any

from vendor_risk.models.vendor import METRIC_WEIGHTS, RiskLevel, Vendor, VendorStatus, round_half_up


HIGH_RISK_LEVELS = {RiskLevel.HIGH, RiskLevel.CRITICAL}

# Presentation order for the distribution
RISK_LEVEL_ORDER = [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.CRITICAL]

METRIC_NAMES = list(METRIC_WEIGHTS)


def risk_distribution(vendors: Sequence[Vendor]) -> dict[RiskLevel, int]:
    """Count vendors per risk level, omitting levels with no vendors.

    Keys follow Low, Medium, High, Critical order.
    """
    counts = {level: 0 for level in RISK_LEVEL_ORDER}
    for vendor in vendors:
        counts[vendor.risk_level] += 1
    return {level: count for level, count in counts.items() if count > 0}


def average_metrics(vendors: Sequence[Vendor]) -> dict[str, int] | None:
    """Mean of each sub-metric across all vendors, rounded half up.

    Returns None for an empty collection.
    """
    if not vendors:
        return None

    return {
        name: round_half_up(statistics.mean(getattr(v.metrics, name) for v in vendors))
        for name in METRIC_NAMES
    }


def high_risk_vendors(vendors: Sequence[Vendor]) -> list[Vendor]:
    """High and Critical vendors in source order."""
    return [v for v in vendors if v.risk_level in HIGH_RISK_LEVELS]


def status_counts(vendors: Sequence[Vendor]) -> dict[VendorStatus, int]:
    """Count vendors per review status. Every status is present."""
    counts = {status: 0 for status in VendorStatus}
    for vendor in vendors:
        counts[vendor.status] += 1
    return counts


def summarize(vendors: Iterable[Vendor]) -> dict[str, Any]:
    """Compute every portfolio view in one pass over a snapshot.

    Args:
        vendors: The current vendor collection. May be empty.

    Returns:
        Dict with ``total_vendors``, ``distribution``, ``averages`` (None when
        empty), ``high_risk`` and ``status_counts``.
    """
    vendors = list(vendors)
    return {
        "total_vendors": len(vendors),
        "distribution": risk_distribution(vendors),
        "averages": average_metrics(vendors),
        "high_risk": high_risk_vendors(vendors),
        "status_counts": status_counts(vendors),
    }
