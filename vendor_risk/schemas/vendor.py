"""Schemas for vendor and assessment endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from vendor_risk.models.vendor import DEFAULT_VENDOR_TYPE, VENDOR_TYPES


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VendorCreateRequest(_CamelRequest):
    """Submission from the new-vendor form."""

    name: str = Field(..., max_length=255, description="e.g. Acme Construction")
    type: str = Field(default=DEFAULT_VENDOR_TYPE, description="One of the supported vendor types")
    description: str = Field(..., description="Brief description of services and history")

    @field_validator("name", "description")
    @classmethod
    def _required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        if value not in VENDOR_TYPES:
            raise ValueError(f"must be one of: {', '.join(VENDOR_TYPES)}")
        return value


class AssessVendorRequest(_CamelRequest):
    """Optional extra history text scored alongside a stored vendor's description."""

    history_data: str = ""


class AssessmentRequest(_CamelRequest):
    """Ad-hoc assessment of arbitrary vendor text. Nothing is stored."""

    name: str = ""
    description: str = ""
    history_data: str = ""
