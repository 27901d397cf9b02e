"""Portfolio risk analytics API endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from vendor_risk.schemas.analytics import MetricAverages, PortfolioSummaryResponse, RiskBucket
from vendor_risk.services.analytics import summarize
from vendor_risk.store import vendor_store

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary", response_model=PortfolioSummaryResponse)
async def get_portfolio_summary() -> PortfolioSummaryResponse:
    """Risk distribution, average metrics and high-risk vendors for the portfolio."""
    result = summarize(vendor_store.snapshot())

    distribution = [
        RiskBucket(risk_level=level, count=count)
        for level, count in result["distribution"].items()
    ]
    averages = MetricAverages(**result["averages"]) if result["averages"] is not None else None
    high_risk = result["high_risk"]
    total = result["total_vendors"]

    if total == 0:
        summary = "No vendors registered yet; there is no risk data to summarise."
    else:
        summary = (
            f"{total} vendor(s) in the portfolio, {len(high_risk)} rated high or critical risk. "
            f"Average safety record: {averages.safety_record}, "
            f"average financial health: {averages.financial_health}."
        )

    return PortfolioSummaryResponse(
        total_vendors=total,
        distribution=distribution,
        averages=averages,
        high_risk=high_risk,
        status_counts={s.value: n for s, n in result["status_counts"].items()},
        summary=summary,
    )
