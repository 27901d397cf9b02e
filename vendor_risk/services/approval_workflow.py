"""QA approval workflow — pending queue and status transitions.

``approve`` and ``reject`` are pure: they return replacement records and leave
committing them to the owner of the collection. Whether a non-pending vendor
may be transitioned is the caller's policy; the API only allows it for
pending vendors.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from vendor_risk.models.vendor import Vendor, VendorStatus

logger = structlog.get_logger()


def is_pending(vendor: Vendor) -> bool:
    return vendor.status is VendorStatus.PENDING


def pending_vendors(vendors: Iterable[Vendor]) -> list[Vendor]:
    """Vendors awaiting review, in source order."""
    return [v for v in vendors if is_pending(v)]


def _transition(vendor: Vendor, status: VendorStatus) -> Vendor:
    logger.info(
        "vendor_status_changed",
        vendor_id=vendor.id,
        from_status=vendor.status.value,
        to_status=status.value,
    )
    return vendor.model_copy(update={"status": status})


def approve(vendor: Vendor) -> Vendor:
    """Return a copy of ``vendor`` marked Approved."""
    return _transition(vendor, VendorStatus.APPROVED)


def reject(vendor: Vendor) -> Vendor:
    """Return a copy of ``vendor`` marked Rejected."""
    return _transition(vendor, VendorStatus.REJECTED)
