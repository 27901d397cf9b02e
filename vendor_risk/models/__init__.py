"""Domain models for the vendor risk dashboard."""

from vendor_risk.models.vendor import (
    DEFAULT_VENDOR_TYPE,
    METRIC_WEIGHTS,
    VENDOR_TYPES,
    AssessmentResult,
    RiskLevel,
    Vendor,
    VendorMetrics,
    VendorStatus,
    round_half_up,
)

__all__ = [
    "DEFAULT_VENDOR_TYPE",
    "METRIC_WEIGHTS",
    "VENDOR_TYPES",
    "AssessmentResult",
    "RiskLevel",
    "Vendor",
    "VendorMetrics",
    "VendorStatus",
    "round_half_up",
]
