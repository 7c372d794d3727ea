"""BLOCKING rule V08: blocks in a season are chronological and disjoint.

Walks ``season.blockIds`` pairwise. A pair is skipped when either block is
missing (V11) or has no parseable start date (V01/V03). The first failing
pair wins.

A block that ends on the day the next one starts counts as overlapping.
"""

from __future__ import annotations

from datetime import date

from season_validator.calendar.dates import parse_iso_date
from season_validator.models.context import ValidationContext
from season_validator.models.entities import Season
from season_validator.models.enums import CONSISTENCY_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class BlockChronologyRule(ValidationRule):
    rule_id = "V08"
    name = "Blocks in Chronological Order"
    severity = Severity.BLOCKING
    entity_type = EntityType.SEASON
    modes = CONSISTENCY_MODES
    invariant = 8

    def validate(self, entity: Season, context: ValidationContext) -> ValidationIssue | None:
        season = entity
        block_ids = season.block_ids
        if not block_ids or len(block_ids) < 2:
            return None

        for i in range(1, len(block_ids)):
            previous = context.find_block(block_ids[i - 1])
            current = context.find_block(block_ids[i])
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
                    season,
                    field_path=f"season.blockIds[{i}].startDate",
                    message=(
                        f'Block "{current.block_id}" starts on {current.start_date}, '
                        f'which is not after previous block "{previous.block_id}" '
                        f"startDate {previous.start_date}"
                    ),
                    suggested_fix="Reorder blocks chronologically or adjust block start dates",
                )

            if previous.end_date:
                previous_end = parse_iso_date(previous.end_date)
                if isinstance(previous_end, date) and previous_end >= current_start:
                    return self.issue(
                        season,
                        field_path=f"season.blockIds[{i}].startDate",
                        message=(
                            f'Block "{current.block_id}" overlaps previous block '
                            f'"{previous.block_id}" (prev end: {previous.end_date}, '
                            f"current start: {current.start_date})"
                        ),
                        suggested_fix="Adjust block dates to remove overlap",
                    )

        return None
