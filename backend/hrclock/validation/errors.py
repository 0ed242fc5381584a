"""
Validation error surface.

Turns Pydantic validation errors into (field, message) violations using the
wire names of the fields, and provides ``validate_payload`` for callers that
build DTOs outside of FastAPI's request parsing.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..schemas.common import FieldViolation

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Location prefixes added by FastAPI request parsing
REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


class PayloadValidationError(Exception):
    """Raised when a payload does not satisfy its DTO rules."""

    def __init__(self, violations: List[FieldViolation]):
        self.violations = violations
        super().__init__(f"{len(violations)} validation violation(s)")

    def fields(self) -> List[str]:
        return [violation.field for violation in self.violations]


def _wire_name(model: Optional[Type[BaseModel]], name: str) -> str:
    if model is None:
        return name
    field = model.model_fields.get(name)
    if field is not None and field.alias:
        return field.alias
    return name


def _field_path(loc: Sequence[Union[str, int]], model: Optional[Type[BaseModel]]) -> str:
    parts = list(loc)
    if parts and parts[0] in REQUEST_LOCATIONS:
        parts = parts[1:]
    if not parts:
        return ""
    head = parts[0]
    if isinstance(head, str):
        parts[0] = _wire_name(model, head)
    return ".".join(str(part) for part in parts)


# PUBLIC_INTERFACE
def violations_from_errors(errors: Iterable[Dict[str, Any]],
                           model: Optional[Type[BaseModel]] = None) -> List[FieldViolation]:
    """
    Convert Pydantic/FastAPI error dictionaries into field violations.

    Args:
        errors: Error dictionaries (``loc``, ``msg``, ``type``)
        model: DTO class the errors belong to, used to map attribute names to wire names

    Returns:
        List[FieldViolation]: One violation per error, in reporting order
    """
    return [
        FieldViolation(
            field=_field_path(error.get("loc", ()), model),
            message=error.get("msg", ""),
            code=error.get("type", "invalid"),
        )
        for error in errors
    ]


# PUBLIC_INTERFACE
def violations_from_error(exc: ValidationError, model: Optional[Type[BaseModel]] = None) -> List[FieldViolation]:
    """Convert a Pydantic ``ValidationError`` into field violations."""
    return violations_from_errors(exc.errors(), model)


# PUBLIC_INTERFACE
def validate_payload(model: Type[ModelT], payload: Mapping[str, Any]) -> ModelT:
    """
    Build a DTO from a raw payload.

    Args:
        model: DTO class to build
        payload: Raw request data (wire or attribute names)

    Returns:
        ModelT: The validated DTO

    Raises:
        PayloadValidationError: If any field violates its rules
    """
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        violations = violations_from_error(exc, model)
        logger.debug(f"Rejected {model.__name__} payload: {[v.field for v in violations]}")
        raise PayloadValidationError(violations) from exc
