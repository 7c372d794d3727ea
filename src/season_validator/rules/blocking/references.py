"""BLOCKING rules V11-V12: parent id lists only reference existing children.

The first dangling id in list order is reported, at its list position.
"""

from __future__ import annotations

from season_validator.models.context import ValidationContext
from season_validator.models.entities import Block, Season
from season_validator.models.enums import CONSISTENCY_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class SeasonBlockReferencesRule(ValidationRule):
    """Every id in ``season.blockIds`` names a block in the plan."""

    rule_id = "V11"
    name = "Season Block References Exist"
    severity = Severity.BLOCKING
    entity_type = EntityType.SEASON
    modes = CONSISTENCY_MODES
    invariant = 11

    def validate(self, entity: Season, context: ValidationContext) -> ValidationIssue | None:
        if not entity.block_ids:
            return None

        for i, block_id in enumerate(entity.block_ids):
            if context.find_block(block_id) is None:
                return self.issue(
                    entity,
                    field_path=f"season.blockIds[{i}]",
                    message=f"Missing block reference: {block_id}",
                    suggested_fix="Remove missing block ID or add the referenced block",
                )
        return None


class BlockWeekReferencesRule(ValidationRule):
    """Every id in ``block.weekIds`` names a week in the plan."""

    rule_id = "V12"
    name = "Block Week References Exist"
    severity = Severity.BLOCKING
    entity_type = EntityType.BLOCK
    modes = CONSISTENCY_MODES
    invariant = 12

    def validate(self, entity: Block, context: ValidationContext) -> ValidationIssue | None:
        if not entity.week_ids:
            return None

        for i, week_id in enumerate(entity.week_ids):
            if context.find_week(week_id) is None:
                return self.issue(
                    entity,
                    field_path=f"block.weekIds[{i}]",
                    message=f"Missing week reference: {week_id}",
                    suggested_fix="Remove missing week ID or add the referenced week",
                )
        return None
