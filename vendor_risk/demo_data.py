"""Sample vendor portfolio loaded when ``seed_demo_data`` is enabled."""

from __future__ import annotations

from datetime import date

from vendor_risk.models.vendor import RiskLevel, Vendor, VendorMetrics, VendorStatus


def _vendor(
    vendor_id: str,
    name: str,
    vendor_type: str,
    description: str,
    status: VendorStatus,
    risk_level: RiskLevel,
    metrics: tuple[int, int, int, int],
    audited: date,
) -> Vendor:
    financial, safety, performance, compliance = metrics
    vendor_metrics = VendorMetrics(
        financial_health=financial,
        safety_record=safety,
        project_performance=performance,
        compliance=compliance,
    )
    return Vendor(
        id=vendor_id,
        name=name,
        type=vendor_type,
        description=description,
        status=status,
        risk_level=risk_level,
        overall_score=vendor_metrics.weighted_score(),
        metrics=vendor_metrics,
        last_audit_date=audited,
        assessed=True,
    )


def demo_vendors() -> list[Vendor]:
    """Return a fresh list of sample vendors spanning every status and risk level."""
    return [
        _vendor(
            "V-1001",
            "Apex Builders Inc.",
            "General Contractor",
            "Experienced general contractor with a strong safety record and certified site supervisors.",
            VendorStatus.APPROVED,
            RiskLevel.LOW,
            (92, 88, 90, 85),
            date(2025, 9, 14),
        ),
        _vendor(
            "V-1002",
            "Volt Electric Co.",
            "Electrical",
            "Reliable electrical subcontractor; one delay on the last hospital fit-out.",
            VendorStatus.APPROVED,
            RiskLevel.MEDIUM,
            (74, 80, 68, 77),
            date(2025, 8, 2),
        ),
        _vendor(
            "V-1003",
            "Riverbend Plumbing",
            "Plumbing",
            "Recurring payment dispute and a safety violation under review.",
            VendorStatus.PENDING,
            RiskLevel.HIGH,
            (55, 60, 58, 62),
            date(2025, 7, 21),
        ),
        _vendor(
            "V-1004",
            "Summit Steel Fabricators",
            "Steel",
            "Facing insolvency proceedings and an active lawsuit from a former client.",
            VendorStatus.PENDING,
            RiskLevel.CRITICAL,
            (38, 45, 42, 40),
            date(2025, 6, 30),
        ),
        _vendor(
            "V-1005",
            "ClearAir HVAC Services",
            "HVAC",
            "Professional HVAC installer with proven quality on commercial retrofits.",
            VendorStatus.PENDING,
            RiskLevel.LOW,
            (85, 91, 87, 89),
            date(2025, 10, 5),
        ),
        _vendor(
            "V-1006",
            "Granite Concrete Works",
            "Concrete",
            "Poor curing practices led to failure of a slab pour; licence suspended pending audit.",
            VendorStatus.REJECTED,
            RiskLevel.CRITICAL,
            (41, 36, 39, 44),
            date(2025, 5, 12),
        ),
    ]
