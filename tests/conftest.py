"""Shared test fixtures for the vendor risk dashboard test suite."""

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from vendor_risk.app import create_app
from vendor_risk.config import Settings
from vendor_risk.demo_data import demo_vendors
from vendor_risk.services.risk_scorer import RiskScorer
from vendor_risk.store import vendor_store


class SequenceRandom(random.Random):
    """Random source that replays fixed values from ``random()``, cycling."""

    def __init__(self, *values: float) -> None:
        super().__init__(0)
        self._values = list(values) or [0.5]
        self._index = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


def _test_settings() -> Settings:
    """Return settings suitable for testing."""
    return Settings(
        environment="development",
        debug=True,
        log_format="console",
        rate_limit_default="1000/minute",
        allowed_origins="http://localhost:3000,http://localhost:5173",
        assessment_latency_min_ms=0,
        assessment_latency_max_ms=0,
    )


@pytest.fixture
def settings():
    """Test settings."""
    return _test_settings()


@pytest.fixture
def scorer():
    """Seeded scorer with the artificial latency disabled."""
    return RiskScorer(rng=random.Random(1234), latency=(0, 0))


@pytest.fixture
def fixed_rng():
    """Factory for random sources that replay the given values."""
    return SequenceRandom


@pytest.fixture
def app(settings, scorer):
    """Create a fresh FastAPI app for testing."""
    application = create_app(settings)
    application.state.scorer = scorer
    return application


@pytest.fixture
def client(app):
    """HTTP test client."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_store():
    """Reset the global vendor store before each test."""
    vendor_store.reset()
    yield
    vendor_store.reset()


@pytest.fixture
def sample_vendors():
    """Load the demo portfolio into the store."""
    vendors = demo_vendors()
    vendor_store.extend(vendors)
    return vendors
