"""CRITICAL rules V02.1-V02.3: entity IDs are unique within their collection.

Every duplicate instance is evaluated on its own, so a pair of records
sharing an ID produces two issues: one per record needing review.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Sequence

from season_validator.models.context import ValidationContext
from season_validator.models.enums import ALL_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class _IdUniquenessRule(ValidationRule):
    severity = Severity.CRITICAL
    modes = ALL_MODES
    invariant = 2

    @abstractmethod
    def collection(self, context: ValidationContext) -> Sequence[Any]:
        """The full collection this rule's entity type is checked against."""
        ...

    def validate(self, entity: Any, context: ValidationContext) -> ValidationIssue | None:
        kind = self.entity_type.value
        own_id = entity.entity_id
        count = sum(1 for other in self.collection(context) if other.entity_id == own_id)

        if count > 1:
            return self.issue(
                entity,
                field_path=f"{kind}.{kind}Id",
                message=f'Duplicate {kind} ID: "{own_id}" (found {count} times)',
                suggested_fix=f"Use a unique {kind} ID",
            )
        return None


class SeasonIdUniquenessRule(_IdUniquenessRule):
    rule_id = "V02.1"
    name = "Season ID Uniqueness"
    entity_type = EntityType.SEASON

    def collection(self, context: ValidationContext) -> Sequence[Any]:
        return context.all_seasons


class BlockIdUniquenessRule(_IdUniquenessRule):
    rule_id = "V02.2"
    name = "Block ID Uniqueness"
    entity_type = EntityType.BLOCK

    def collection(self, context: ValidationContext) -> Sequence[Any]:
        return context.all_blocks


class WeekIdUniquenessRule(_IdUniquenessRule):
    rule_id = "V02.3"
    name = "Week ID Uniqueness"
    entity_type = EntityType.WEEK

    def collection(self, context: ValidationContext) -> Sequence[Any]:
        return context.all_weeks
