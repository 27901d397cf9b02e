"""In-memory vendor store.

The single owner of the vendor collection. Everything else works on the
snapshots it hands out and commits changes back through ``replace``.
Persistence is out of scope; the collection lives for the life of the process.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterable

import structlog

from vendor_risk.exceptions import DuplicateVendorError, VendorNotFoundError
from vendor_risk.models.vendor import Vendor

logger = structlog.get_logger()


class VendorStore:
    """Thread-safe, insertion-ordered vendor collection."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._vendors: dict[str, Vendor] = {}
        self._ids = itertools.count(1)

    def reset(self) -> None:
        """Clear all data — used in tests."""
        with self._lock:
            self._vendors.clear()
            self._ids = itertools.count(1)

    def next_id(self) -> str:
        """Hand out a fresh id that is not in use, e.g. ``V-0001``."""
        with self._lock:
            while True:
                candidate = f"V-{next(self._ids):04d}"
                if candidate not in self._vendors:
                    return candidate

    def snapshot(self) -> list[Vendor]:
        """Snapshot of all vendors in insertion order."""
        with self._lock:
            return list(self._vendors.values())

    def get(self, vendor_id: str) -> Vendor:
        with self._lock:
            try:
                return self._vendors[vendor_id]
            except KeyError:
                raise VendorNotFoundError(vendor_id) from None

    def __contains__(self, vendor_id: object) -> bool:
        with self._lock:
            return vendor_id in self._vendors

    def __len__(self) -> int:
        with self._lock:
            return len(self._vendors)

    def add(self, vendor: Vendor) -> Vendor:
        """Insert a new vendor at the end of the collection."""
        with self._lock:
            if vendor.id in self._vendors:
                raise DuplicateVendorError(vendor.id)
            self._vendors[vendor.id] = vendor
        logger.info("vendor_stored", vendor_id=vendor.id)
        return vendor

    def replace(self, vendor: Vendor) -> Vendor:
        """Swap in a replacement record with the same id, keeping its position."""
        with self._lock:
            if vendor.id not in self._vendors:
                raise VendorNotFoundError(vendor.id)
            self._vendors[vendor.id] = vendor
        logger.info("vendor_replaced", vendor_id=vendor.id, status=vendor.status.value)
        return vendor

    def extend(self, vendors: Iterable[Vendor]) -> None:
        """Add several vendors, e.g. when seeding demo data."""
        for vendor in vendors:
            self.add(vendor)


# Global singleton — replaced in tests
vendor_store = VendorStore()
