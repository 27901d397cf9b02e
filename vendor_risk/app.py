"""Vendor Risk Dashboard — FastAPI application factory."""

from __future__ import annotations

from fastapi import Depends, FastAPI

from vendor_risk.config import Settings, get_settings
from vendor_risk.middleware import (
    configure_cors,
    configure_rate_limiting,
    enforce_rate_limit,
    lifespan,
    logging_middleware,
)
from vendor_risk.routers import analytics, approvals, assessments, health, vendors
from vendor_risk.services.risk_scorer import RiskScorer


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Vendor risk assessment, QA approvals and portfolio analytics",
        version=settings.app_version,
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )

    # Store settings and the shared scorer on app state
    app.state.settings = settings
    app.state.scorer = RiskScorer(latency=settings.assessment_latency_seconds)

    # Middleware
    configure_cors(app, settings)
    configure_rate_limiting(app, settings)
    app.middleware("http")(logging_middleware)

    # Routers
    app.include_router(health.router)
    for module in (vendors, approvals, assessments, analytics):
        app.include_router(module.router, prefix=settings.api_prefix)

    return app


# Default app instance for uvicorn
app = create_app()
