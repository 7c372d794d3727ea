"""INFO rule V14: a block's weekIds agree with the weeks pointing at it.

Load-time consistency warning only. It never blocks save, though like
every issue it blocks publish.
"""

from __future__ import annotations

from season_validator.models.context import ValidationContext
from season_validator.models.entities import Block
from season_validator.models.enums import EntityType, Severity, ValidationMode
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class BlockWeekCountRule(ValidationRule):
    rule_id = "V14"
    name = "Block Week Count Matches Week Records"
    severity = Severity.INFO
    entity_type = EntityType.BLOCK
    modes = (ValidationMode.LOAD,)
    invariant = 14

    def validate(self, entity: Block, context: ValidationContext) -> ValidationIssue | None:
        listed = len(entity.week_ids or ())
        referencing = len(context.weeks_for_block(entity.block_id))
        if listed == referencing:
            return None

        return self.issue(
            entity,
            field_path="block.weekIds",
            message=(
                f'Block "{entity.block_id}" lists {listed} weekIds but '
                f"{referencing} weeks reference this block."
            ),
            suggested_fix="Align block.weekIds with the weeks that reference this block",
        )
