"""Vendor model — the core entity tracked by the dashboard."""

from __future__ import annotations

import math
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


VENDOR_TYPES = [
    "General Contractor",
    "Electrical",
    "Plumbing",
    "HVAC",
    "Concrete",
    "Steel",
    "Other",
]

DEFAULT_VENDOR_TYPE = "General Contractor"

# Sub-metric weights for the overall score; must sum to 1.0
METRIC_WEIGHTS = {
    "financial_health": 0.30,
    "safety_record": 0.30,
    "project_performance": 0.25,
    "compliance": 0.15,
}


class VendorStatus(str, Enum):
    """Review status. Approved and Rejected are terminal."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class RiskLevel(str, Enum):
    """Categorical risk severity, ordered from least to most severe."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    The builtin ``round`` uses banker's rounding (``round(82.5) == 82``),
    which would put scores one point below what the dashboard displays.
    """
    return math.floor(value + 0.5)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class VendorMetrics(_CamelModel):
    """The four weighted sub-scores, each an integer in [0, 100]."""

    financial_health: int = Field(default=0, ge=0, le=100)
    safety_record: int = Field(default=0, ge=0, le=100)
    project_performance: int = Field(default=0, ge=0, le=100)
    compliance: int = Field(default=0, ge=0, le=100)

    def weighted_score(self) -> int:
        """Overall score derived from the sub-scores."""
        total = sum(getattr(self, name) * weight for name, weight in METRIC_WEIGHTS.items())
        return round_half_up(total)


class _ScoredModel(_CamelModel):
    """Carries ``overall_score`` and ``metrics``; the score must match the weights."""

    @model_validator(mode="after")
    def _check_overall_score(self):
        expected = self.metrics.weighted_score()
        if self.overall_score != expected:
            raise ValueError(
                f"overall_score {self.overall_score} does not match weighted metrics ({expected})"
            )
        return self


class Vendor(_ScoredModel):
    """An external contractor or supplier under review.

    Records are immutable; every change produces a replacement record with the
    same ``id`` which the owner commits back to the store.
    """

    id: str
    name: str
    type: str = DEFAULT_VENDOR_TYPE
    description: str = ""
    status: VendorStatus = VendorStatus.PENDING
    risk_level: RiskLevel = RiskLevel.MEDIUM
    overall_score: int = Field(default=0, ge=0, le=100)
    metrics: VendorMetrics = Field(default_factory=VendorMetrics)
    last_audit_date: date = Field(default_factory=date.today)

    # Medium above is only a placeholder until an assessment has been applied
    assessed: bool = False
    summary: str | None = None

    def __repr__(self) -> str:
        return f"<Vendor {self.id} {self.status.value} {self.risk_level.value}>"


class AssessmentResult(_ScoredModel):
    """Output of the risk scorer. Not stored on its own."""

    risk_level: RiskLevel
    overall_score: int = Field(..., ge=0, le=100)
    metrics: VendorMetrics
    summary: str
