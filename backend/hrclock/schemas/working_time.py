"""
Working time Pydantic schemas.

A working time is a closed period (start and end) attributed to a user.
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StrictInt, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from ..validation.rules import NotNull, Positive, enforce
from .common import InputModel, OutputModel
from .user import UserOutput

END_BEFORE_START_MESSAGE = "End time must be after start time"


def _check_period(end_time: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
    start_time = info.data.get("start_time")
    if start_time is None or end_time is None:
        return end_time
    if (start_time.tzinfo is None) != (end_time.tzinfo is None):
        raise PydanticCustomError("timezone_mismatch", "Start and end times must both carry a timezone or neither")
    if end_time <= start_time:
        raise PydanticCustomError("end_before_start", END_BEFORE_START_MESSAGE)
    return end_time


class WorkingTimeInput(InputModel):
    """Working time creation schema."""
    start_time: Annotated[Optional[datetime], enforce(NotNull())] = Field(None, description="Period start")
    end_time: Annotated[Optional[datetime], enforce(NotNull())] = Field(None, description="Period end")
    user_id: Annotated[Optional[StrictInt], enforce(NotNull(), Positive())] = Field(
        None, description="User the period belongs to")

    @field_validator("end_time")
    @classmethod
    def end_after_start(cls, value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
        return _check_period(value, info)


class WorkingTimeUpdate(InputModel):
    """Working time update schema."""
    start_time: Optional[datetime] = Field(None, description="Period start")
    end_time: Optional[datetime] = Field(None, description="Period end")

    @field_validator("end_time")
    @classmethod
    def end_after_start(cls, value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
        return _check_period(value, info)


class WorkingTimeOutput(OutputModel):
    """Working time response schema."""
    id: int = Field(..., description="Working time ID")
    start_time: datetime = Field(..., description="Period start")
    end_time: datetime = Field(..., description="Period end")
    user: UserOutput = Field(..., description="User the period belongs to")
    duration_minutes: int = Field(..., description="Whole minutes between start and end")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
