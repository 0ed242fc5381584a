"""
Declarative field validation for request DTOs.

Rules are attached to fields with ``enforce``; failures surface as
``FieldViolation`` lists through ``validate_payload`` or the API error handlers.
"""
from .errors import PayloadValidationError, validate_payload, violations_from_error, violations_from_errors
from .rules import (
    Choice, Date, Email, Length, NotBlank, NotNull, Positive, Regex, Rule, RuleFailure, enforce,
)

__all__ = [
    "Choice", "Date", "Email", "Length", "NotBlank", "NotNull", "Positive", "Regex", "Rule",
    "RuleFailure", "enforce", "PayloadValidationError", "validate_payload",
    "violations_from_error", "violations_from_errors",
]
