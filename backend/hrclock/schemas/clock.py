"""
Clock (badge in/out) Pydantic schemas.

A clock entry records an arrival (status true) or a departure (status
false) for its owner.
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field

from ..validation.rules import NotNull, enforce
from .common import InputModel, OutputModel
from .user import UserOutput


class ClockInput(InputModel):
    """
    Clock creation request schema.

    Both fields are optional: the request handler fills in the current time
    and alternates the status when they are omitted.
    """
    time: Optional[datetime] = Field(None, description="Clock time (defaults to now)")
    status: Optional[bool] = Field(None, description="true for clock-in, false for clock-out")


class ClockUpdate(InputModel):
    """Clock correction request schema (managers only)."""
    time: Annotated[Optional[datetime], enforce(NotNull("Time is required"))] = Field(
        None, description="Clock time")
    status: Annotated[Optional[bool], enforce(NotNull("Status is required"))] = Field(
        None, description="true for clock-in, false for clock-out")


class ClockOutput(OutputModel):
    """Clock response schema."""
    id: int = Field(..., description="Clock ID")
    time: datetime = Field(..., description="Clock time")
    status: bool = Field(..., description="true for clock-in, false for clock-out")
    owner: UserOutput = Field(..., description="User who clocked")
    created_at: datetime = Field(..., description="Creation timestamp")
