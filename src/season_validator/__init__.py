"""Rule-based validation for hierarchical training-season plans."""

from season_validator.engine import (
    ValidationEngine,
    aggregate_issues,
    create_empty_result,
    run_validation,
)
from season_validator.exceptions import (
    PlanLoadError,
    SeasonValidatorError,
    UnknownModeError,
)
from season_validator.registry import (
    RuleRegistry,
    all_rules,
    blocking_rules,
    critical_rules,
)

__all__ = [
    "PlanLoadError",
    "RuleRegistry",
    "SeasonValidatorError",
    "UnknownModeError",
    "ValidationEngine",
    "aggregate_issues",
    "all_rules",
    "blocking_rules",
    "create_empty_result",
    "critical_rules",
    "run_validation",
]
