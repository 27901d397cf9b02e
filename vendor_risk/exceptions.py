"""Exceptions raised by the vendor store.

Core scoring, workflow and analytics functions are total and raise nothing;
only lookups against the store can fail.
"""

from __future__ import annotations


class VendorRiskError(Exception):
    """Base class for all vendor risk dashboard errors."""

    def __init__(self, message: str, vendor_id: str | None = None) -> None:
        self.message = message
        self.vendor_id = vendor_id
        super().__init__(message)


class VendorNotFoundError(VendorRiskError):
    """No vendor with the given id exists in the store."""

    def __init__(self, vendor_id: str) -> None:
        super().__init__(f"Vendor '{vendor_id}' not found", vendor_id=vendor_id)


class DuplicateVendorError(VendorRiskError):
    """A vendor with the given id is already in the store."""

    def __init__(self, vendor_id: str) -> None:
        super().__init__(f"Vendor '{vendor_id}' already exists", vendor_id=vendor_id)
