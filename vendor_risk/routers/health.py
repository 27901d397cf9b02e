"""Health check endpoints for production monitoring."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request

from vendor_risk.schemas.health import HealthResponse, ServiceHealth
from vendor_risk.store import vendor_store

router = APIRouter(tags=["health"])


async def _check_service(name: str, check_fn) -> ServiceHealth:
    """Time one check; any exception marks the service unhealthy."""
    start = time.monotonic()
    details = None
    try:
        await check_fn()
    except Exception as exc:
        details = str(exc)[:200]
    return ServiceHealth(
        service=name,
        status="healthy" if details is None else "unhealthy",
        latency_ms=round((time.monotonic() - start) * 1000, 2),
        details=details,
    )


async def _check_app() -> None:
    """Application self-check — always passes."""


async def _check_store() -> None:
    """The vendor store answers a snapshot."""
    vendor_store.snapshot()


def _build_response(request: Request, services: list[ServiceHealth], degraded: str) -> HealthResponse:
    settings = request.app.state.settings
    overall = "healthy" if all(s.status == "healthy" for s in services) else degraded
    return HealthResponse(
        status=overall,
        version=settings.app_version,
        environment=settings.environment,
        vendor_count=len(vendor_store),
        services=services,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Basic health check — is the application running?"""
    services = [await _check_service("app", _check_app)]
    return _build_response(request, services, degraded="degraded")


@router.get("/health/ready", response_model=HealthResponse)
async def readiness_check(request: Request) -> HealthResponse:
    """Readiness check — can the application serve vendor data?"""
    services = [
        await _check_service("app", _check_app),
        await _check_service("vendor_store", _check_store),
    ]
    return _build_response(request, services, degraded="unhealthy")


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """Liveness probe — is the process alive?"""
    return {"status": "alive"}
