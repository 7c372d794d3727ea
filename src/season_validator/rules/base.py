"""Abstract base class for all plan validation rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from season_validator.models.context import ValidationContext
from season_validator.models.enums import (
    EntityType,
    Severity,
    ValidationMode,
    doc_reference,
)
from season_validator.models.issue import ValidationIssue


class ValidationRule(ABC):
    """Base class for every validation rule.

    Each rule checks one invariant for one entity type. Rules are discovered
    automatically by the RuleRegistry and run by the validation engine.

    Subclasses must define:
        rule_id: catalog identifier (e.g. "V01.1", "V13")
        name: human-readable rule name
        severity: Severity tier (CRITICAL, BLOCKING, INFO)
        entity_type: the single EntityType the rule applies to
        modes: ValidationModes the rule runs in
        invariant: invariant number used for the docs anchor
        validate(): the rule's check

    ``validate`` returns the first violation it finds, or None. It must not
    raise on sparse entities and must not mutate the entity or context.
    """

    rule_id: str
    name: str
    severity: Severity
    entity_type: EntityType
    modes: tuple[ValidationMode, ...]
    invariant: int

    def applies_to(self, mode: ValidationMode) -> bool:
        """True if this rule runs in *mode*."""
        return mode in self.modes

    @abstractmethod
    def validate(self, entity: Any, context: ValidationContext) -> ValidationIssue | None:
        """Check *entity* against this rule.

        Returns a ValidationIssue for the first violation found, or None
        if the entity passes (or the check is owned by another rule).
        """
        ...

    def issue(
        self,
        entity: Any,
        field_path: str,
        message: str,
        suggested_fix: str | None,
        entity_id: str | None = None,
    ) -> ValidationIssue:
        """Build an issue stamped with this rule's id, severity and doc anchor."""
        if entity_id is None:
            entity_id = entity.entity_id or "unknown"
        return ValidationIssue(
            severity=self.severity,
            rule_id=self.rule_id,
            entity_type=self.entity_type,
            entity_id=entity_id,
            field_path=field_path,
            message=message,
            suggested_fix=suggested_fix,
            doc_reference=doc_reference(self.invariant),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.rule_id}>"
