"""
Password reset Pydantic schemas.

Both payloads are constructor-required: a missing field is rejected before
any business rule runs.
"""
from typing import Annotated

from pydantic import Field

from ..validation.rules import PASSWORD_PATTERN, PASSWORD_SPECIAL_CHARS, Email, Length, NotBlank, Regex, enforce
from .common import InputModel

PASSWORD_MIN_LENGTH = 12
PASSWORD_MAX_LENGTH = 255


class PasswordResetRequest(InputModel):
    """Password reset request schema."""
    email: Annotated[str, enforce(
        NotBlank("Email is required"),
        Email("Invalid email format"),
    )] = Field(..., description="User email address")


class PasswordResetConfirm(InputModel):
    """Password reset confirmation schema."""
    token: Annotated[str, enforce(NotBlank("Token is required"))] = Field(
        ..., description="Password reset token")
    new_password: Annotated[str, enforce(
        NotBlank("Password is required"),
        Length(
            min=PASSWORD_MIN_LENGTH,
            max=PASSWORD_MAX_LENGTH,
            min_message="Password must be at least {limit} characters long",
            max_message="Password cannot be longer than {limit} characters",
        ),
        Regex(
            PASSWORD_PATTERN,
            "Password must contain at least one lowercase letter, one uppercase letter, "
            f"one digit, and one special character ({PASSWORD_SPECIAL_CHARS})",
        ),
    )] = Field(..., description="New password")
