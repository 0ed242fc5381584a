"""
Shared Pydantic base models and generic response schemas.

Input models validate their defaults so required-ness rules fire on unset
fields. Output models are frozen snapshots built by the mappers.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InputModel(BaseModel):
    """Base class for request payloads (camelCase on the wire)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )


class OutputModel(BaseModel):
    """Base class for immutable response payloads."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


class FieldViolation(BaseModel):
    """A single field validation failure."""
    field: str = Field(..., description="Offending field (wire name)")
    message: str = Field(..., description="Human-readable failure message")
    code: str = Field(..., description="Rule or error code")

    model_config = ConfigDict(frozen=True)


class ValidationErrorResponse(BaseModel):
    """Validation error response schema."""
    detail: str = Field(default="Validation failed", description="Error summary")
    violations: List[FieldViolation] = Field(..., description="Every field violation")


class MessageResponse(BaseModel):
    """Standard API response schema."""
    message: str = Field(..., description="Response message")


class ErrorResponse(BaseModel):
    """Error response schema."""
    detail: str = Field(..., description="Error detail message")
