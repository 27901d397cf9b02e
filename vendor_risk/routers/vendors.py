"""Vendor registry API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request, status

from vendor_risk.exceptions import VendorNotFoundError
from vendor_risk.models.vendor import RiskLevel, Vendor, VendorStatus
from vendor_risk.schemas.vendor import AssessVendorRequest, VendorCreateRequest
from vendor_risk.services.vendors import apply_assessment, create_vendor
from vendor_risk.store import vendor_store

router = APIRouter(prefix="/vendors", tags=["vendors"])


def get_vendor_or_404(vendor_id: str) -> Vendor:
    """Look up a vendor, translating a miss into a 404."""
    try:
        return vendor_store.get(vendor_id)
    except VendorNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc


@router.get("", response_model=list[Vendor])
async def list_vendors(
    status_filter: VendorStatus | None = Query(default=None, alias="status"),
    risk_level: RiskLevel | None = Query(default=None, alias="riskLevel"),
) -> list[Vendor]:
    """List vendors in insertion order, optionally filtered."""
    vendors = vendor_store.snapshot()
    if status_filter is not None:
        vendors = [v for v in vendors if v.status is status_filter]
    if risk_level is not None:
        vendors = [v for v in vendors if v.risk_level is risk_level]
    return vendors


@router.post("", response_model=Vendor, status_code=status.HTTP_201_CREATED)
async def add_vendor(request: VendorCreateRequest) -> Vendor:
    """Register a new vendor. It starts Pending and unassessed."""
    vendor = create_vendor(
        name=request.name,
        type=request.type,
        description=request.description,
        vendor_id=vendor_store.next_id(),
    )
    return vendor_store.add(vendor)


@router.get("/{vendor_id}", response_model=Vendor)
async def get_vendor(vendor_id: str) -> Vendor:
    return get_vendor_or_404(vendor_id)


@router.post("/{vendor_id}/assess", response_model=Vendor)
async def assess_vendor(
    vendor_id: str,
    http_request: Request,
    request: AssessVendorRequest | None = None,
) -> Vendor:
    """Score a stored vendor's description and commit the result.

    The vendor is re-read after the assessment so a status change made while
    the scorer was running is not overwritten.
    """
    if request is None:
        request = AssessVendorRequest()

    vendor = get_vendor_or_404(vendor_id)
    scorer = http_request.app.state.scorer
    result = await scorer.assess(vendor.name, vendor.description, request.history_data)

    current = get_vendor_or_404(vendor_id)
    return vendor_store.replace(apply_assessment(current, result))
