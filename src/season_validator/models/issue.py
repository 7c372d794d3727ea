"""Validation output - single issues and the aggregated result of a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from season_validator.models.enums import EntityType, Severity


@dataclass(frozen=True)
class ValidationIssue:
    """One rule violation for one entity.

    ``field_path`` and ``message`` are consumed verbatim by the UI and by
    tests, so rules build them from fixed templates.
    """

    severity: Severity
    rule_id: str
    entity_type: EntityType
    entity_id: str
    field_path: str
    message: str
    suggested_fix: str | None
    doc_reference: str

    def to_dict(self) -> dict[str, Any]:
        """Wire shape with plain string enum values."""
        return {
            "severity": self.severity.value,
            "rule_id": self.rule_id,
            "entity_type": self.entity_type.value,
            "entity_id": self.entity_id,
            "field_path": self.field_path,
            "message": self.message,
            "suggested_fix": self.suggested_fix,
            "doc_reference": self.doc_reference,
        }


@dataclass(frozen=True)
class ValidationSummary:
    critical_count: int = 0
    blocking_count: int = 0
    info_count: int = 0
    total_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "critical_count": self.critical_count,
            "blocking_count": self.blocking_count,
            "info_count": self.info_count,
            "total_count": self.total_count,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Aggregated outcome of one ``run_validation`` call.

    ``can_save`` is False only when a CRITICAL issue exists. ``can_publish``
    requires a completely clean run: BLOCKING and INFO issues also block it.
    """

    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)
    has_critical: bool = False
    has_blocking: bool = False
    has_info: bool = False
    can_save: bool = True
    can_publish: bool = True
    summary: ValidationSummary = field(default_factory=ValidationSummary)

    def issues_for(self, rule_id: str) -> tuple[ValidationIssue, ...]:
        """Issues raised by one rule, in run order."""
        return tuple(i for i in self.issues if i.rule_id == rule_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "issues": [issue.to_dict() for issue in self.issues],
            "has_critical": self.has_critical,
            "has_blocking": self.has_blocking,
            "has_info": self.has_info,
            "can_save": self.can_save,
            "can_publish": self.can_publish,
            "summary": self.summary.to_dict(),
        }
