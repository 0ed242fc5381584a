"""
Team schema tests.

Creation requires a name; partial updates accept any subset of fields,
including none at all.
"""
import pytest
from pydantic import ValidationError

from hrclock.mappers import updated_fields
from hrclock.schemas.team import TeamInput, TeamOutput, TeamUpdate
from hrclock.validation.errors import validate_payload

from .test_base import BaseAPITest


class TestTeamInput(BaseAPITest):
    """Team creation validation."""

    def test_valid_payload(self, sample_team_data):
        dto = validate_payload(TeamInput, sample_team_data)
        assert dto.name == "Development Team"
        assert dto.manager_id == 1

    def test_name_unset_is_rejected_as_blank(self):
        violations = self.assert_violations(TeamInput, {})
        violation = self.violation_for(violations, "name")
        assert violation.code == "not_blank"
        assert violation.message == "This value should not be blank."

    def test_whitespace_name_is_blank(self):
        violations = self.assert_violations(TeamInput, {"name": "   "})
        assert self.violation_for(violations, "name").code == "not_blank"

    @pytest.mark.parametrize("name, code", [("A", "too_short"), ("x" * 101, "too_long")])
    def test_name_length(self, name, code):
        violations = self.assert_violations(TeamInput, {"name": name})
        assert self.violation_for(violations, "name").code == code

    @pytest.mark.parametrize("manager_id", [0, -3])
    def test_manager_id_must_be_positive(self, manager_id):
        violations = self.assert_violations(TeamInput, {"name": "Ops", "managerId": manager_id})
        violation = self.violation_for(violations, "managerId")
        assert violation.message == "This value should be positive."

    @pytest.mark.parametrize("manager_id", [True, False, "3", 2.5])
    def test_manager_id_must_be_an_integer(self, manager_id):
        violations = self.assert_violations(TeamInput, {"name": "Ops", "managerId": manager_id})
        assert self.violation_for(violations, "managerId").code == "int_type"

    def test_every_failing_field_is_reported(self):
        violations = self.assert_violations(TeamInput, {"name": "", "managerId": 0})
        assert sorted(v.field for v in violations) == ["managerId", "name"]

    def test_description_is_free_text(self):
        dto = validate_payload(TeamInput, {"name": "Ops", "description": ""})
        assert dto.description == ""


class TestTeamUpdate(BaseAPITest):
    """Team partial update validation."""

    def test_all_fields_unset_is_accepted(self):
        dto = validate_payload(TeamUpdate, {})
        assert dto.name is None
        assert updated_fields(dto) == {}

    def test_name_rules_still_apply_when_present(self):
        violations = self.assert_violations(TeamUpdate, {"name": "A"})
        assert self.violation_for(violations, "name").code == "too_short"

    def test_manager_id_rule_applies_when_present(self):
        violations = self.assert_violations(TeamUpdate, {"managerId": 0})
        assert self.violation_for(violations, "managerId").code == "positive"

    def test_updated_fields_keep_explicit_nulls(self):
        dto = validate_payload(TeamUpdate, {"description": None, "managerId": 4})
        assert updated_fields(dto) == {"description": None, "manager_id": 4}

    def test_distinct_from_creation_type(self):
        assert not issubclass(TeamUpdate, TeamInput)
        assert not issubclass(TeamInput, TeamUpdate)


class TestTeamOutput:
    """Team response snapshot."""

    def test_is_immutable(self, team_entity):
        dto = TeamOutput(
            id=team_entity.id,
            name=team_entity.name,
            created_at=team_entity.created_at,
            updated_at=team_entity.updated_at,
        )
        with pytest.raises(ValidationError):
            dto.name = "Renamed"
        assert dto.name == "Development Team"

    def test_serializes_camel_case(self, team_entity):
        dto = TeamOutput(
            id=1, name="Ops", created_at=team_entity.created_at, updated_at=team_entity.updated_at)
        data = dto.model_dump(mode="json", by_alias=True)
        assert set(data) == {"id", "name", "description", "manager", "createdAt", "updatedAt"}
        assert data["description"] is None
        assert data["manager"] is None
