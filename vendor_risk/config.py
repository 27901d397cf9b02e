"""Application configuration via environment variables."""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration for the vendor risk dashboard."""

    # Application
    app_name: str = "Vendor Risk Dashboard"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", pattern=r"^(development|staging|production)$")
    log_level: str = "INFO"
    log_format: str = Field(default="json", pattern=r"^(json|console)$")

    # API
    api_prefix: str = "/api"
    allowed_origins: str = "http://localhost:3000"
    rate_limit_default: str = "100/minute"

    # Simulated assessment latency, drawn uniformly from [min, max]
    assessment_latency_min_ms: int = Field(default=800, ge=0)
    assessment_latency_max_ms: int = Field(default=1500, ge=0)

    # Preload the sample vendor portfolio on startup
    seed_demo_data: bool = False

    @model_validator(mode="after")
    def _check_latency_band(self) -> "Settings":
        if self.assessment_latency_min_ms > self.assessment_latency_max_ms:
            raise ValueError("assessment_latency_min_ms must not exceed assessment_latency_max_ms")
        return self

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",")]

    @property
    def assessment_latency_seconds(self) -> tuple[float, float]:
        return (
            self.assessment_latency_min_ms / 1000,
            self.assessment_latency_max_ms / 1000,
        )

    model_config = {"env_prefix": "VENDOR_RISK_", "env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Return a settings instance built from the environment."""
    return Settings()
