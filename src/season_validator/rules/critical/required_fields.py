"""CRITICAL rules V01.1-V01.3: required fields are present and non-empty.

Fields are checked in a fixed order and the first missing (``None``) or
empty-string field is reported.
"""

from __future__ import annotations

from typing import Any

from season_validator.models.context import ValidationContext
from season_validator.models.enums import ALL_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class _RequiredFieldsRule(ValidationRule):
    """Shared check; subclasses list their attribute names in order."""

    severity = Severity.CRITICAL
    modes = ALL_MODES
    invariant = 1
    required_fields: tuple[str, ...] = ()

    def validate(self, entity: Any, context: ValidationContext) -> ValidationIssue | None:
        kind = self.entity_type.value
        for attr in self.required_fields:
            field_name = entity.wire_names[attr]
            value = getattr(entity, attr, None)

            if value is None:
                return self.issue(
                    entity,
                    field_path=f"{kind}.{field_name}",
                    message=f"Required field missing: {field_name}",
                    suggested_fix=f"Add {field_name} field to {kind}",
                )

            if isinstance(value, str) and value == "":
                return self.issue(
                    entity,
                    field_path=f"{kind}.{field_name}",
                    message=f"Required field cannot be empty: {field_name}",
                    suggested_fix=f"Provide a value for {field_name}",
                )

        return None


class SeasonRequiredFieldsRule(_RequiredFieldsRule):
    rule_id = "V01.1"
    name = "Season Required Fields"
    entity_type = EntityType.SEASON
    required_fields = ("season_id", "name", "start_date", "end_date", "block_ids", "status")


class BlockRequiredFieldsRule(_RequiredFieldsRule):
    rule_id = "V01.2"
    name = "Block Required Fields"
    entity_type = EntityType.BLOCK
    required_fields = (
        "block_id",
        "season_id",
        "name",
        "phase",
        "start_date",
        "end_date",
        "week_ids",
    )


class WeekRequiredFieldsRule(_RequiredFieldsRule):
    rule_id = "V01.3"
    name = "Week Required Fields"
    entity_type = EntityType.WEEK
    required_fields = ("week_id", "block_id", "name", "start_date", "workout_ids")
