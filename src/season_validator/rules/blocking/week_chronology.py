"""BLOCKING rule V09: weeks in a block are in strictly increasing order.

Weeks are fixed seven-day units, so only start order is checked; there is
no separate overlap test as there is for blocks in V08.
"""

from __future__ import annotations

from datetime import date

from season_validator.calendar.dates import parse_iso_date
from season_validator.models.context import ValidationContext
from season_validator.models.entities import Block
from season_validator.models.enums import CONSISTENCY_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class WeekChronologyRule(ValidationRule):
    rule_id = "V09"
    name = "Weeks in Chronological Order"
    severity = Severity.BLOCKING
    entity_type = EntityType.BLOCK
    modes = CONSISTENCY_MODES
    invariant = 9

    def validate(self, entity: Block, context: ValidationContext) -> ValidationIssue | None:
        block = entity
        week_ids = block.week_ids
        if not week_ids or len(week_ids) < 2:
            return None

        for i in range(1, len(week_ids)):
            previous = context.find_week(week_ids[i - 1])
            current = context.find_week(week_ids[i])
            if previous is None or current is None:
                continue
            if not previous.start_date or not current.start_date:
                continue

            previous_start = parse_iso_date(previous.start_date)
            current_start = parse_iso_date(current.start_date)
            if not isinstance(previous_start, date) or not isinstance(current_start, date):
                continue

            if current_start <= previous_start:
                return self.issue(
                    block,
                    field_path=f"block.weekIds[{i}].startDate",
                    message=(
                        f'Week "{current.week_id}" starts on {current.start_date}, '
                        f'which is not after previous week "{previous.week_id}" '
                        f"startDate {previous.start_date}"
                    ),
                    suggested_fix="Reorder weeks chronologically or adjust week start dates",
                )

        return None
