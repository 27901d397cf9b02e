"""Vendor creation and assessment application."""

from __future__ import annotations

import uuid
from datetime import date

import structlog

from vendor_risk.models.vendor import (
    DEFAULT_VENDOR_TYPE,
    AssessmentResult,
    RiskLevel,
    Vendor,
    VendorMetrics,
    VendorStatus,
)

logger = structlog.get_logger()


def generate_vendor_id() -> str:
    """Return a random vendor id such as ``V-3F9A1C2B``."""
    return f"V-{uuid.uuid4().hex[:8].upper()}"


def create_vendor(
    name: str,
    type: str = DEFAULT_VENDOR_TYPE,
    description: str = "",
    vendor_id: str | None = None,
) -> Vendor:
    """Build a new, unassessed vendor awaiting review.

    Metrics and score start at zero and the risk level is the Medium
    placeholder; ``assessed`` stays False until ``apply_assessment``.
    """
    vendor = Vendor(
        id=vendor_id or generate_vendor_id(),
        name=name,
        type=type,
        description=description,
        status=VendorStatus.PENDING,
        risk_level=RiskLevel.MEDIUM,
        overall_score=0,
        metrics=VendorMetrics(),
        last_audit_date=date.today(),
        assessed=False,
    )
    logger.info("vendor_created", vendor_id=vendor.id, vendor_type=vendor.type)
    return vendor


def apply_assessment(vendor: Vendor, result: AssessmentResult) -> Vendor:
    """Return a copy of ``vendor`` carrying the assessment's scores.

    Status is left alone; the audit date moves to today.
    """
    return vendor.model_copy(
        update={
            "risk_level": result.risk_level,
            "overall_score": result.overall_score,
            "metrics": result.metrics,
            "summary": result.summary,
            "assessed": True,
            "last_audit_date": date.today(),
        }
    )
