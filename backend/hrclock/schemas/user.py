"""
User-related Pydantic schemas.

Defines request/response models for user account creation, partial
updates, and the user summary embedded in clock and team responses.
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StrictInt

from ..validation.rules import PHONE_NUMBER_PATTERN, Choice, Email, Length, NotBlank, Regex, enforce
from .common import InputModel, OutputModel

USER_ROLES = ("employee", "manager")

_role = Choice(USER_ROLES, "Role must be either employee or manager")
_phone_number = Regex(PHONE_NUMBER_PATTERN, "Invalid phone number format")


class UserInput(InputModel):
    """User creation request schema."""
    username: Annotated[Optional[str], enforce(NotBlank(), Length(3, 50))] = Field(
        None, description="Login name")
    email: Annotated[Optional[str], enforce(NotBlank(), Email())] = Field(
        None, description="User email address")
    password: Annotated[Optional[str], enforce(NotBlank(), Length(min=8))] = Field(
        None, description="User password (minimum 8 characters)")
    first_name: Annotated[Optional[str], enforce(NotBlank(), Length(2, 100))] = Field(
        None, description="User first name")
    last_name: Annotated[Optional[str], enforce(NotBlank(), Length(2, 100))] = Field(
        None, description="User last name")
    phone_number: Annotated[Optional[str], enforce(_phone_number)] = Field(
        None, description="Phone number in E.164 format")
    role: Annotated[Optional[str], enforce(NotBlank(), _role)] = Field(
        None, description="Business role (employee or manager)")
    team_id: Optional[StrictInt] = Field(None, description="Team to join")


class UserUpdate(InputModel):
    """User update request schema. Every field is optional."""
    email: Annotated[Optional[str], enforce(Email())] = Field(None, description="User email address")
    password: Annotated[Optional[str], enforce(Length(min=8))] = Field(None, description="New password")
    first_name: Annotated[Optional[str], enforce(Length(2, 100))] = Field(None, description="User first name")
    last_name: Annotated[Optional[str], enforce(Length(2, 100))] = Field(None, description="User last name")
    phone_number: Annotated[Optional[str], enforce(_phone_number)] = Field(None, description="Phone number")
    role: Annotated[Optional[str], enforce(_role)] = Field(None, description="Business role")
    team_id: Optional[StrictInt] = Field(None, description="Team to join")


class UserTeam(OutputModel):
    """Team reference embedded in a user response."""
    id: int = Field(..., description="Team ID")
    name: str = Field(..., description="Team name")


class UserOutput(OutputModel):
    """User response schema."""
    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Login name")
    email: str = Field(..., description="User email address")
    first_name: str = Field(..., description="User first name")
    last_name: str = Field(..., description="User last name")
    phone_number: Optional[str] = Field(None, description="Phone number")
    role: str = Field(..., description="Business role")
    team: Optional[UserTeam] = Field(None, description="Team the user belongs to")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
