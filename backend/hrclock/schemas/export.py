"""
Report export filter schema.

Filters arrive as query parameters, so the wire names stay snake_case.
Dates are whole days: the start date covers from midnight, the end date
until the end of the day. A date is in the future when that bound is later
than now, so a report may start today but must end no later than yesterday.
"""
from datetime import date, datetime, time
from typing import Annotated, Optional

from pydantic import ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from ..validation.rules import Choice, Date, Positive, enforce
from .common import InputModel

EXPORT_FORMATS = ("pdf", "xlsx")


def _one_year_after(day: date) -> date:
    try:
        return day.replace(year=day.year + 1)
    except ValueError:
        # 29 February
        return day.replace(year=day.year + 1, day=28)


def _day_start(value: str) -> datetime:
    return datetime.combine(date.fromisoformat(value), time.min)


def _day_end(value: str) -> datetime:
    return datetime.combine(date.fromisoformat(value), time(23, 59, 59))


def _not_in_future(moment: datetime):
    if moment > datetime.now():
        raise PydanticCustomError("future_date", "Dates cannot be in the future")


class ExportFilter(InputModel):
    """Export filter query schema."""
    model_config = ConfigDict(alias_generator=None)

    start_date: Annotated[Optional[str], enforce(
        Date("start_date must be a valid date (format: YYYY-MM-DD)"),
    )] = Field(None, description="First day of the report (YYYY-MM-DD)")
    end_date: Annotated[Optional[str], enforce(
        Date("end_date must be a valid date (format: YYYY-MM-DD)"),
    )] = Field(None, description="Last day of the report (YYYY-MM-DD)")
    team_id: Annotated[Optional[int], enforce(Positive("team_id must be a positive integer"))] = Field(
        None, description="Restrict to one team")
    user_id: Annotated[Optional[int], enforce(Positive("user_id must be a positive integer"))] = Field(
        None, description="Restrict to one user")
    format: Annotated[Optional[str], enforce(
        Choice(EXPORT_FORMATS, 'Format must be either "pdf" or "xlsx"'),
    )] = Field(None, description="pdf or xlsx")

    @field_validator("start_date")
    @classmethod
    def start_not_in_future(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            _not_in_future(_day_start(value))
        return value

    @field_validator("end_date")
    @classmethod
    def end_within_range(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if value is None:
            return value
        _not_in_future(_day_end(value))
        start = info.data.get("start_date")
        if start is None:
            return value
        start_day = date.fromisoformat(start)
        end_day = date.fromisoformat(value)
        if end_day < start_day:
            raise PydanticCustomError("end_before_start", "end_date must be after start_date")
        if end_day > _one_year_after(start_day):
            raise PydanticCustomError("range_too_large", "Date range cannot exceed 1 year")
        return value

    def start_datetime(self) -> Optional[datetime]:
        """Start of the first day, or None when no start date was given."""
        if self.start_date is None:
            return None
        return _day_start(self.start_date)

    def end_datetime(self) -> Optional[datetime]:
        """Last second of the last day, or None when no end date was given."""
        if self.end_date is None:
            return None
        return _day_end(self.end_date)
