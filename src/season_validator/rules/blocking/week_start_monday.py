"""BLOCKING rule V10: every week starts on a Monday."""

from __future__ import annotations

from datetime import date

from season_validator.calendar.dates import get_day_of_week, is_monday, parse_iso_date
from season_validator.models.context import ValidationContext
from season_validator.models.entities import Week
from season_validator.models.enums import CONSISTENCY_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class WeekStartMondayRule(ValidationRule):
    rule_id = "V10"
    name = "Week Start Date is Monday"
    severity = Severity.BLOCKING
    entity_type = EntityType.WEEK
    modes = CONSISTENCY_MODES
    invariant = 10

    def validate(self, entity: Week, context: ValidationContext) -> ValidationIssue | None:
        week = entity
        if not week.start_date:
            return None

        start = parse_iso_date(week.start_date)
        if not isinstance(start, date):
            return None

        if not is_monday(start):
            return self.issue(
                week,
                field_path="week.startDate",
                message=(
                    f'Week "{week.week_id}" startDate {week.start_date} is a '
                    f"{get_day_of_week(start)}, expected Monday"
                ),
                suggested_fix="Set week startDate to a Monday",
            )
        return None
