"""
Clock schema tests.
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from hrclock.mappers import ClockMapper
from hrclock.schemas.clock import ClockInput, ClockUpdate
from hrclock.validation.errors import validate_payload

from .test_base import BaseAPITest


class TestClockInput(BaseAPITest):
    """Clock creation payload."""

    def test_empty_payload_is_accepted(self):
        dto = validate_payload(ClockInput, {})
        assert dto.time is None
        assert dto.status is None

    def test_parses_iso_time(self):
        dto = validate_payload(ClockInput, {"time": "2025-10-08T09:00:00+00:00", "status": True})
        assert dto.time == datetime(2025, 10, 8, 9, 0, tzinfo=timezone.utc)
        assert dto.status is True

    def test_input_is_mutable(self):
        dto = ClockInput()
        dto.time = datetime(2025, 10, 8, 9, 0, tzinfo=timezone.utc)
        dto.status = False
        assert dto.status is False

    def test_rejects_non_boolean_status(self):
        violations = self.assert_violations(ClockInput, {"status": "sometimes"})
        assert self.violation_for(violations, "status").code == "bool_parsing"


class TestClockUpdate(BaseAPITest):
    """Clock correction payload."""

    def test_requires_time_and_status(self):
        violations = self.assert_violations(ClockUpdate, {})
        assert self.violation_for(violations, "time").message == "Time is required"
        assert self.violation_for(violations, "status").message == "Status is required"

    def test_false_status_is_present(self):
        dto = validate_payload(ClockUpdate, {"time": "2025-10-08T18:00:00Z", "status": False})
        assert dto.status is False


class TestClockOutput:
    """Clock response snapshot."""

    def test_nested_owner_and_immutability(self, clock_entity):
        dto = ClockMapper.to_output(clock_entity)
        assert dto.owner.username == "jdoe"
        with pytest.raises(ValidationError):
            dto.status = False
        with pytest.raises(ValidationError):
            dto.owner.email = "other@example.com"

    def test_json_shape(self, clock_entity):
        data = ClockMapper.to_output(clock_entity).model_dump(mode="json", by_alias=True)
        assert data["id"] == 11
        assert data["status"] is True
        assert data["time"] == "2025-10-08T09:00:00Z"
        assert data["owner"]["firstName"] == "John"
        assert data["owner"]["team"] == {"id": 1, "name": "Development Team"}
        assert "createdAt" in data
