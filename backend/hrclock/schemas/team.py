"""
Team-related Pydantic schemas.

Creation and partial update are separate types: the team name is required
on creation, while an update may omit any field.
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StrictInt

from ..validation.rules import Length, NotBlank, Positive, enforce
from .common import InputModel, OutputModel
from .user import UserOutput


class TeamInput(InputModel):
    """Team creation request schema."""
    name: Annotated[Optional[str], enforce(NotBlank(), Length(2, 100))] = Field(
        None, description="Team name")
    description: Optional[str] = Field(None, description="Team description")
    manager_id: Annotated[Optional[StrictInt], enforce(Positive())] = Field(
        None, description="ID of the managing user")


class TeamUpdate(InputModel):
    """Team update request schema."""
    name: Annotated[Optional[str], enforce(Length(2, 100))] = Field(None, description="Team name")
    description: Optional[str] = Field(None, description="Team description")
    manager_id: Annotated[Optional[StrictInt], enforce(Positive())] = Field(
        None, description="ID of the managing user")


class TeamOutput(OutputModel):
    """Team response schema."""
    id: int = Field(..., description="Team ID")
    name: str = Field(..., description="Team name")
    description: Optional[str] = Field(None, description="Team description")
    manager: Optional[UserOutput] = Field(None, description="Managing user")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
