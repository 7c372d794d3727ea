"""BLOCKING rule V07: a week's seven days lie inside its parent block.

Both outcomes report the week's ``startDate``: the start is the only
anchor a coach moves, since a week is always seven days long.
"""

from __future__ import annotations

from datetime import date

from season_validator.calendar.dates import add_days, format_date, parse_iso_date
from season_validator.models.context import ValidationContext
from season_validator.models.entities import Week
from season_validator.models.enums import (
    CONSISTENCY_MODES,
    WEEK_LENGTH_DAYS,
    EntityType,
    Severity,
)
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class BlockContainsWeeksRule(ValidationRule):
    rule_id = "V07"
    name = "Block Contains Week Dates"
    severity = Severity.BLOCKING
    entity_type = EntityType.WEEK
    modes = CONSISTENCY_MODES
    invariant = 7

    def validate(self, entity: Week, context: ValidationContext) -> ValidationIssue | None:
        week = entity
        if not week.block_id or not week.start_date:
            return None

        block = context.find_block(week.block_id)
        if block is None or not block.start_date or not block.end_date:
            return None

        block_start = parse_iso_date(block.start_date)
        block_end = parse_iso_date(block.end_date)
        week_start = parse_iso_date(week.start_date)
        if not all(isinstance(d, date) for d in (block_start, block_end, week_start)):
            return None

        week_end = add_days(week_start, WEEK_LENGTH_DAYS - 1)  # type: ignore[arg-type]
        if block.week_ids and week.week_id in block.week_ids:
            field_path = f"block.weekIds[{list(block.week_ids).index(week.week_id)}].startDate"
        else:
            field_path = "week.startDate"

        if week_start < block_start:  # type: ignore[operator]
            return self.issue(
                week,
                field_path=field_path,
                message=(
                    f'Week "{week.week_id}" starts before block "{block.block_id}" '
                    f"startDate (week: {week.start_date}, block: {block.start_date})"
                ),
                suggested_fix="Adjust week startDate to be within the block range",
            )

        if week_end > block_end:  # type: ignore[operator]
            return self.issue(
                week,
                field_path=field_path,
                message=(
                    f'Week "{week.week_id}" exceeds block "{block.block_id}" endDate '
                    f"(week end: {format_date(week_end)}, block: {block.end_date})"
                ),
                suggested_fix="Adjust week startDate so the 7-day week fits within the block",
            )

        return None
