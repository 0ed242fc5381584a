"""
Clock request Pydantic schemas.

Employees ask a manager to create, correct or delete a clock entry; the
manager approves or rejects the request.
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StrictInt

from ..validation.rules import Choice, Length, NotBlank, NotNull, Positive, enforce
from .clock import ClockOutput
from .common import InputModel, OutputModel
from .user import UserOutput

CLOCK_REQUEST_TYPES = ("CREATE", "UPDATE", "DELETE")
CLOCK_REQUEST_STATUSES = ("PENDING", "APPROVED", "REJECTED")

REASON_MIN_LENGTH = 10
REASON_MAX_LENGTH = 1000


def _reason_length(label: str) -> Length:
    return Length(
        REASON_MIN_LENGTH,
        REASON_MAX_LENGTH,
        min_message=f"{label} must be at least {{limit}} characters",
        max_message=f"{label} cannot be longer than {{limit}} characters",
    )


class CreateClockRequest(InputModel):
    """Clock request creation schema."""
    type: Annotated[Optional[str], enforce(
        NotBlank("Type is required"),
        Choice(CLOCK_REQUEST_TYPES, "Type must be CREATE, UPDATE or DELETE"),
    )] = Field(None, description="CREATE, UPDATE or DELETE")
    requested_time: Annotated[Optional[datetime], enforce(NotNull("Requested time is required"))] = Field(
        None, description="Clock time the employee asks for")
    requested_status: Optional[bool] = Field(None, description="Clock status the employee asks for")
    target_clock_id: Annotated[Optional[StrictInt], enforce(Positive())] = Field(
        None, description="Clock entry to update or delete")
    reason: Annotated[Optional[str], enforce(
        NotBlank("Reason is required"),
        _reason_length("Reason"),
    )] = Field(None, description="Why the change is needed")


class UpdateClockRequest(InputModel):
    """Pending clock request update schema."""
    requested_time: Optional[datetime] = Field(None, description="Clock time the employee asks for")
    requested_status: Optional[bool] = Field(None, description="Clock status the employee asks for")
    reason: Annotated[Optional[str], enforce(_reason_length("Reason"))] = Field(
        None, description="Why the change is needed")


class ApproveClockRequest(InputModel):
    """Approval schema; the manager may adjust the requested values."""
    approved_time: Optional[datetime] = Field(None, description="Overrides the requested time")
    approved_status: Optional[bool] = Field(None, description="Overrides the requested status")


class RejectClockRequest(InputModel):
    """Rejection schema."""
    rejection_reason: Annotated[Optional[str], enforce(
        NotBlank("Rejection reason is required"),
        _reason_length("Rejection reason"),
    )] = Field(None, description="Why the request is rejected")


class ClockRequestOutput(OutputModel):
    """Clock request response schema."""
    id: int = Field(..., description="Clock request ID")
    user: UserOutput = Field(..., description="Requesting user")
    type: str = Field(..., description="CREATE, UPDATE or DELETE")
    requested_time: datetime = Field(..., description="Requested clock time")
    requested_status: Optional[bool] = Field(None, description="Requested clock status")
    target_clock: Optional[ClockOutput] = Field(None, description="Clock entry targeted by the request")
    status: str = Field(..., description="PENDING, APPROVED or REJECTED")
    reason: str = Field(..., description="Why the change is needed")
    reviewed_by: Optional[UserOutput] = Field(None, description="Manager who reviewed the request")
    reviewed_at: Optional[datetime] = Field(None, description="Review timestamp")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
