"""Data models for season plan validation."""

from season_validator.models.context import ValidationContext
from season_validator.models.entities import (
    Block,
    PlanEntities,
    Season,
    Week,
    Workout,
)
from season_validator.models.enums import (
    BlockPhase,
    EntityType,
    SeasonStatus,
    Severity,
    ValidationMode,
)
from season_validator.models.issue import (
    ValidationIssue,
    ValidationResult,
    ValidationSummary,
)

__all__ = [
    "Block",
    "BlockPhase",
    "EntityType",
    "PlanEntities",
    "Season",
    "SeasonStatus",
    "Severity",
    "ValidationContext",
    "ValidationIssue",
    "ValidationMode",
    "ValidationResult",
    "ValidationSummary",
    "Week",
    "Workout",
]
