"""QA approval API endpoints."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, HTTPException

from vendor_risk.models.vendor import Vendor
from vendor_risk.routers.vendors import get_vendor_or_404
from vendor_risk.services.approval_workflow import approve, is_pending, pending_vendors, reject
from vendor_risk.store import vendor_store

router = APIRouter(prefix="/approvals", tags=["approvals"])


def _review(vendor_id: str, action: Callable[[Vendor], Vendor]) -> Vendor:
    vendor = get_vendor_or_404(vendor_id)
    if not is_pending(vendor):
        raise HTTPException(
            status_code=409,
            detail=f"Vendor '{vendor_id}' is already {vendor.status.value}",
        )
    return vendor_store.replace(action(vendor))


@router.get("/pending", response_model=list[Vendor])
async def get_pending_vendors() -> list[Vendor]:
    """Vendors awaiting QA review, oldest first."""
    return pending_vendors(vendor_store.snapshot())


@router.post("/{vendor_id}/approve", response_model=Vendor)
async def approve_vendor(vendor_id: str) -> Vendor:
    return _review(vendor_id, approve)


@router.post("/{vendor_id}/reject", response_model=Vendor)
async def reject_vendor(vendor_id: str) -> Vendor:
    return _review(vendor_id, reject)
