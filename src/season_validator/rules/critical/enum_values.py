"""CRITICAL rules V04.1-V04.2: enum fields hold a declared value."""

from __future__ import annotations

from season_validator.models.context import ValidationContext
from season_validator.models.entities import Block, Season
from season_validator.models.enums import (
    ALL_MODES,
    VALID_BLOCK_PHASES,
    VALID_SEASON_STATUSES,
    EntityType,
    Severity,
)
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class SeasonStatusEnumRule(ValidationRule):
    """season.status must be draft, active or archived."""

    rule_id = "V04.1"
    name = "Season Status Enum"
    severity = Severity.CRITICAL
    entity_type = EntityType.SEASON
    modes = ALL_MODES
    invariant = 4

    def validate(self, entity: Season, context: ValidationContext) -> ValidationIssue | None:
        status = entity.status
        if not status:
            # Missing status is V01's concern
            return None

        if status not in VALID_SEASON_STATUSES:
            allowed = ", ".join(VALID_SEASON_STATUSES)
            return self.issue(
                entity,
                field_path="season.status",
                message=f'Invalid status: "{status}". Must be one of: {allowed}',
                suggested_fix=f"Use one of: {allowed}",
            )
        return None


class BlockPhaseEnumRule(ValidationRule):
    """block.phase must be one of the periodization phases."""

    rule_id = "V04.2"
    name = "Block Phase Enum"
    severity = Severity.CRITICAL
    entity_type = EntityType.BLOCK
    modes = ALL_MODES
    invariant = 4

    def validate(self, entity: Block, context: ValidationContext) -> ValidationIssue | None:
        phase = entity.phase
        if not phase:
            return None

        if phase not in VALID_BLOCK_PHASES:
            allowed = ", ".join(VALID_BLOCK_PHASES)
            return self.issue(
                entity,
                field_path="block.phase",
                message=f'Invalid phase: "{phase}". Must be one of: {allowed}',
                suggested_fix=f"Use one of: {allowed}",
            )
        return None
