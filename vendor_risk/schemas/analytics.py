"""Schemas for portfolio analytics endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vendor_risk.models.vendor import RiskLevel, Vendor


class _CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RiskBucket(_CamelResponse):
    """Number of vendors at one risk level."""

    risk_level: RiskLevel
    count: int = Field(..., ge=1)


class MetricAverages(_CamelResponse):
    """Portfolio mean of each sub-metric, rounded to an integer."""

    financial_health: int
    safety_record: int
    project_performance: int
    compliance: int


class PortfolioSummaryResponse(_CamelResponse):
    """Risk distribution, average metrics and high-risk listing."""

    total_vendors: int
    distribution: list[RiskBucket]
    averages: MetricAverages | None = Field(
        default=None,
        description="None when there are no vendors to average",
    )
    high_risk: list[Vendor]
    status_counts: dict[str, int]
    summary: str
