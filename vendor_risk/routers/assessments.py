"""On-demand risk assessment endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request

from vendor_risk.models.vendor import AssessmentResult
from vendor_risk.schemas.vendor import AssessmentRequest

router = APIRouter(prefix="/assessments", tags=["assessments"])


@router.post("", response_model=AssessmentResult)
async def run_assessment(body: AssessmentRequest, request: Request) -> AssessmentResult:
    """Score arbitrary vendor text without touching the store."""
    scorer = request.app.state.scorer
    return await scorer.assess(body.name, body.description, body.history_data)
