"""Application middleware — rate limiting, CORS, request logging, lifespan."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from vendor_risk.config import Settings
from vendor_risk.demo_data import demo_vendors
from vendor_risk.store import vendor_store

logger = structlog.get_logger()


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Let the configured dashboard origins call the API."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )


def configure_rate_limiting(app: FastAPI, settings: Settings) -> None:
    """Attach a per-client limiter using the configured default limit.

    The limit itself is enforced by ``enforce_rate_limit``, which the app
    factory installs as a global dependency.
    """
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
    )
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def enforce_rate_limit(request: Request) -> None:
    """Count the request against the default limit for its endpoint.

    Runs after routing, so the endpoint is taken from the request scope.
    Raises ``RateLimitExceeded`` (HTTP 429) once the limit is used up.
    """
    limiter: Limiter = request.app.state.limiter
    # Same check SlowAPIMiddleware performs, keyed by request path
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)


async def logging_middleware(request: Request, call_next) -> Response:
    """Log one ``http_request`` event per request.

    Method and path are bound to the structlog context for the duration of
    the request, so vendor events logged by the services carry them too.
    """
    start = time.monotonic()
    with structlog.contextvars.bound_contextvars(method=request.method, path=request.url.path):
        response = await call_next(request)
        logger.info(
            "http_request",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
            client_ip=request.client.host if request.client else "unknown",
        )
    return response


def _renderer(settings: Settings) -> Any:
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_structured_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging at the configured level."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            _renderer(settings),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def seed_demo_data() -> int:
    """Load the sample portfolio into an empty store. Returns vendors added."""
    if len(vendor_store):
        return 0
    vendors = demo_vendors()
    vendor_store.extend(vendors)
    return len(vendors)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and optionally seed demo vendors on startup."""
    settings = app.state.settings
    configure_structured_logging(settings)

    logger.info("application_starting", version=settings.app_version, environment=settings.environment)

    if settings.seed_demo_data:
        logger.info("demo_data_seeded", vendor_count=seed_demo_data())

    yield

    logger.info("application_shutting_down", vendor_count=len(vendor_store))
