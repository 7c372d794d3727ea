"""CRITICAL rules V05.1-V05.2: start date strictly before end date.

Only evaluated when both dates parse; malformed dates are V03's concern.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from season_validator.calendar.dates import parse_iso_date, validate_date_range
from season_validator.models.context import ValidationContext
from season_validator.models.enums import ALL_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class _DateRangeRule(ValidationRule):
    severity = Severity.CRITICAL
    modes = ALL_MODES
    invariant = 5

    def validate(self, entity: Any, context: ValidationContext) -> ValidationIssue | None:
        if not entity.start_date or not entity.end_date:
            return None

        start = parse_iso_date(entity.start_date)
        end = parse_iso_date(entity.end_date)
        if not isinstance(start, date) or not isinstance(end, date):
            return None

        check = validate_date_range(start, end)
        if not check.valid:
            return self.issue(
                entity,
                field_path=f"{self.entity_type.value}.startDate",
                message=check.reason,
                suggested_fix="Ensure start date is before end date",
            )
        return None


class SeasonDateRangeRule(_DateRangeRule):
    rule_id = "V05.1"
    name = "Season Date Range"
    entity_type = EntityType.SEASON


class BlockDateRangeRule(_DateRangeRule):
    rule_id = "V05.2"
    name = "Block Date Range"
    entity_type = EntityType.BLOCK
