"""Validation engine - runs rules over a plan and aggregates the issues."""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from season_validator.exceptions import UnknownModeError
from season_validator.models.context import ValidationContext
from season_validator.models.entities import PlanEntities
from season_validator.models.enums import EntityType, Severity, ValidationMode
from season_validator.models.issue import ValidationIssue, ValidationResult, ValidationSummary
from season_validator.registry import RuleRegistry
from season_validator.rules.base import ValidationRule

logger = logging.getLogger(__name__)

# Collections are validated in this order; workouts are only referenced
_VALIDATED_COLLECTIONS: tuple[tuple[EntityType, str], ...] = (
    (EntityType.SEASON, "seasons"),
    (EntityType.BLOCK, "blocks"),
    (EntityType.WEEK, "weeks"),
)


def run_validation(
    entities: PlanEntities | Mapping[str, Sequence] | None,
    rules: Sequence[ValidationRule],
    mode: ValidationMode | str,
) -> ValidationResult:
    """Run *rules* against *entities* in *mode* and aggregate the issues.

    Seasons are validated first, then blocks, then weeks. For each entity
    every applicable rule runs once, in the order given; issues keep that
    entity-outer, rule-inner order.

    Args:
        entities: The plan's collections. Missing collections count as empty.
        rules: Rules to consider; those not opted into *mode* are skipped.
        mode: Validation mode, as a ValidationMode or its string value.

    Returns:
        A ValidationResult with the ordered issues, severity flags, the
        save/publish gates and summary counts.

    Raises:
        UnknownModeError: If *mode* is not a known validation mode.
    """
    active_mode = _coerce_mode(mode)
    plan = _coerce_entities(entities)
    context = ValidationContext.from_entities(plan, active_mode)

    applicable = [rule for rule in rules if rule.applies_to(active_mode)]
    issues: list[ValidationIssue] = []

    for entity_type, collection_name in _VALIDATED_COLLECTIONS:
        type_rules = [rule for rule in applicable if rule.entity_type == entity_type]
        if not type_rules:
            continue
        for entity in getattr(plan, collection_name):
            for rule in type_rules:
                issue = rule.validate(entity, context)
                if issue is not None:
                    logger.debug(
                        "%s fired on %s %s at %s",
                        rule.rule_id,
                        issue.entity_type.value,
                        issue.entity_id,
                        issue.field_path,
                    )
                    issues.append(issue)

    result = aggregate_issues(issues)
    logger.info(
        "Validation (%s): %d rules, %d issues (critical=%d, blocking=%d, info=%d)",
        active_mode.value,
        len(applicable),
        result.summary.total_count,
        result.summary.critical_count,
        result.summary.blocking_count,
        result.summary.info_count,
    )
    return result


def aggregate_issues(issues: Sequence[ValidationIssue]) -> ValidationResult:
    """Reduce an ordered issue list into severity flags, gates and counts."""
    critical_count = sum(1 for i in issues if i.severity == Severity.CRITICAL)
    blocking_count = sum(1 for i in issues if i.severity == Severity.BLOCKING)
    info_count = sum(1 for i in issues if i.severity == Severity.INFO)

    has_critical = critical_count > 0
    has_blocking = blocking_count > 0
    has_info = info_count > 0

    return ValidationResult(
        issues=tuple(issues),
        has_critical=has_critical,
        has_blocking=has_blocking,
        has_info=has_info,
        can_save=not has_critical,
        can_publish=not (has_critical or has_blocking or has_info),
        summary=ValidationSummary(
            critical_count=critical_count,
            blocking_count=blocking_count,
            info_count=info_count,
            total_count=len(issues),
        ),
    )


def create_empty_result() -> ValidationResult:
    """A passing result with no issues."""
    return ValidationResult()


def _coerce_mode(mode: ValidationMode | str) -> ValidationMode:
    try:
        return ValidationMode(mode)
    except ValueError:
        raise UnknownModeError(mode) from None


def _coerce_entities(
    entities: PlanEntities | Mapping[str, Sequence] | None,
) -> PlanEntities:
    if entities is None:
        return PlanEntities()
    if isinstance(entities, PlanEntities):
        return entities
    return PlanEntities.of(
        seasons=entities.get("seasons"),
        blocks=entities.get("blocks"),
        weeks=entities.get("weeks"),
        workouts=entities.get("workouts"),
    )


class ValidationEngine:
    """Runs the registry's rule catalog over plans.

    Usage:
        engine = ValidationEngine()
        result = engine.validate(plan, ValidationMode.PUBLISH)
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or RuleRegistry()

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    def validate(
        self,
        entities: PlanEntities | Mapping[str, Sequence] | None,
        mode: ValidationMode | str,
    ) -> ValidationResult:
        """Validate *entities* with every registered rule that runs in *mode*."""
        return run_validation(entities, self.registry.get_all_rules(), mode)

    def can_save(self, entities: PlanEntities | Mapping[str, Sequence] | None) -> bool:
        """Shortcut for the save gate."""
        return self.validate(entities, ValidationMode.SAVE).can_save

    def can_publish(self, entities: PlanEntities | Mapping[str, Sequence] | None) -> bool:
        """Shortcut for the publish gate."""
        return self.validate(entities, ValidationMode.PUBLISH).can_publish
