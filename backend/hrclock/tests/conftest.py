"""
Pytest configuration and fixtures for backend testing.

Provides sample payloads, duck-typed domain objects for the mappers and a
FastAPI test client over an app with sample routes.
"""
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict

import pytest
from fastapi import Body
from fastapi.testclient import TestClient

from hrclock.api.main import create_app
from hrclock.schemas.common import MessageResponse
from hrclock.schemas.password_reset import PasswordResetConfirm
from hrclock.schemas.team import TeamInput
from hrclock.validation.errors import validate_payload

CREATED_AT = datetime(2025, 10, 8, 9, 0, tzinfo=timezone.utc)
UPDATED_AT = datetime(2025, 10, 9, 17, 30, tzinfo=timezone.utc)


@pytest.fixture
def api_app():
    """Backend app with sample routes exercising both validation paths."""
    app = create_app()

    @app.post("/samples/password-reset/confirm", response_model=MessageResponse)
    def confirm_reset(request: PasswordResetConfirm):
        return MessageResponse(message="Password has been reset")

    @app.post("/samples/teams", response_model=MessageResponse)
    def create_team(payload: Dict[str, Any] = Body(...)):
        team = validate_payload(TeamInput, payload)
        return MessageResponse(message=f"Team {team.name} accepted")

    @app.get("/samples/crash")
    def crash():
        raise RuntimeError("boom")

    return app


@pytest.fixture
def client(api_app):
    """Create FastAPI test client."""
    with TestClient(api_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def sample_reset_confirm_data() -> Dict[str, Any]:
    """Valid password reset confirmation payload."""
    return {
        "token": "abc123",
        "newPassword": "Abcdefghijk1!"
    }


@pytest.fixture
def sample_team_data() -> Dict[str, Any]:
    """Valid team creation payload."""
    return {
        "name": "Development Team",
        "description": "Builds the product",
        "managerId": 1
    }


@pytest.fixture
def sample_user_data() -> Dict[str, Any]:
    """Valid user creation payload."""
    return {
        "username": "jdoe",
        "email": "john.doe@example.com",
        "password": "secure_password123",
        "firstName": "John",
        "lastName": "Doe",
        "phoneNumber": "+33612345678",
        "role": "employee",
        "teamId": 1
    }


@pytest.fixture
def team_entity() -> SimpleNamespace:
    """Team domain object without a manager."""
    return SimpleNamespace(
        id=1,
        name="Development Team",
        description=None,
        manager=None,
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
    )


@pytest.fixture
def user_entity(team_entity) -> SimpleNamespace:
    """Employee domain object belonging to ``team_entity``."""
    return SimpleNamespace(
        id=7,
        username="jdoe",
        email="john.doe@example.com",
        first_name="John",
        last_name="Doe",
        phone_number="+33612345678",
        role="employee",
        team=team_entity,
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
    )


@pytest.fixture
def manager_entity() -> SimpleNamespace:
    """Manager domain object without a team."""
    return SimpleNamespace(
        id=2,
        username="msmith",
        email="mary.smith@example.com",
        first_name="Mary",
        last_name="Smith",
        phone_number=None,
        role="manager",
        team=None,
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
    )


@pytest.fixture
def clock_entity(user_entity) -> SimpleNamespace:
    """Clock-in domain object."""
    return SimpleNamespace(
        id=11,
        time=datetime(2025, 10, 8, 9, 0, tzinfo=timezone.utc),
        status=True,
        owner=user_entity,
        created_at=CREATED_AT,
    )
