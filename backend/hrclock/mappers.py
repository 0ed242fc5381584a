"""
Projection of domain objects into response DTOs.

Mappers accept any object exposing the entity attributes (ORM rows,
dataclasses, namespaces) and build frozen output models. The persistence
layer is responsible for handing over fully loaded objects.
"""
from datetime import datetime
from typing import Any, Dict, Iterable, List

from pydantic import BaseModel

from .schemas.clock import ClockOutput
from .schemas.clock_request import ClockRequestOutput
from .schemas.team import TeamOutput
from .schemas.user import UserOutput, UserTeam
from .schemas.working_time import WorkingTimeOutput


# PUBLIC_INTERFACE
def updated_fields(dto: BaseModel) -> Dict[str, Any]:
    """
    Fields the client actually sent in a partial update.

    Args:
        dto: Validated update DTO

    Returns:
        Dict[str, Any]: Attribute name to value, explicit nulls included
    """
    return dto.model_dump(exclude_unset=True)


def duration_minutes(start_time: datetime, end_time: datetime) -> int:
    """Whole minutes elapsed between two instants."""
    return int((end_time - start_time).total_seconds() // 60)


class UserMapper:
    """User projections."""

    @staticmethod
    def to_output(user) -> UserOutput:
        team = getattr(user, "team", None)
        return UserOutput(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone_number=user.phone_number,
            role=user.role,
            # Reference only: a team embeds its manager, never the reverse
            team=UserTeam(id=team.id, name=team.name) if team is not None else None,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_output_list(users: Iterable) -> List[UserOutput]:
        return [UserMapper.to_output(user) for user in users]


class TeamMapper:
    """Team projections."""

    @staticmethod
    def to_output(team) -> TeamOutput:
        manager = team.manager
        return TeamOutput(
            id=team.id,
            name=team.name,
            description=team.description,
            manager=UserMapper.to_output(manager) if manager is not None else None,
            created_at=team.created_at,
            updated_at=team.updated_at,
        )

    @staticmethod
    def to_output_list(teams: Iterable) -> List[TeamOutput]:
        return [TeamMapper.to_output(team) for team in teams]


class ClockMapper:
    """Clock projections."""

    @staticmethod
    def to_output(clock) -> ClockOutput:
        return ClockOutput(
            id=clock.id,
            time=clock.time,
            status=clock.status,
            owner=UserMapper.to_output(clock.owner),
            created_at=clock.created_at,
        )

    @staticmethod
    def to_output_list(clocks: Iterable) -> List[ClockOutput]:
        return [ClockMapper.to_output(clock) for clock in clocks]


class ClockRequestMapper:
    """Clock request projections."""

    @staticmethod
    def to_output(clock_request) -> ClockRequestOutput:
        target_clock = clock_request.target_clock
        reviewed_by = clock_request.reviewed_by
        return ClockRequestOutput(
            id=clock_request.id,
            user=UserMapper.to_output(clock_request.user),
            type=clock_request.type,
            requested_time=clock_request.requested_time,
            requested_status=clock_request.requested_status,
            target_clock=ClockMapper.to_output(target_clock) if target_clock is not None else None,
            status=clock_request.status,
            reason=clock_request.reason,
            reviewed_by=UserMapper.to_output(reviewed_by) if reviewed_by is not None else None,
            reviewed_at=clock_request.reviewed_at,
            created_at=clock_request.created_at,
            updated_at=clock_request.updated_at,
        )

    @staticmethod
    def to_output_list(clock_requests: Iterable) -> List[ClockRequestOutput]:
        return [ClockRequestMapper.to_output(clock_request) for clock_request in clock_requests]


class WorkingTimeMapper:
    """Working time projections."""

    @staticmethod
    def to_output(working_time) -> WorkingTimeOutput:
        return WorkingTimeOutput(
            id=working_time.id,
            start_time=working_time.start_time,
            end_time=working_time.end_time,
            user=UserMapper.to_output(working_time.user),
            duration_minutes=duration_minutes(working_time.start_time, working_time.end_time),
            created_at=working_time.created_at,
            updated_at=working_time.updated_at,
        )

    @staticmethod
    def to_output_list(working_times: Iterable) -> List[WorkingTimeOutput]:
        return [WorkingTimeMapper.to_output(working_time) for working_time in working_times]
