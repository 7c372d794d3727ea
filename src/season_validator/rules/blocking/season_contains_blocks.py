"""BLOCKING rule V06: a block's dates lie inside its parent season.

The start bound is checked before the end bound. The field path points at
the block's slot in ``season.blockIds`` when the season lists it, so the
UI can highlight the row in the season editor.
"""

from __future__ import annotations

from datetime import date

from season_validator.calendar.dates import parse_iso_date
from season_validator.models.context import ValidationContext
from season_validator.models.entities import Block
from season_validator.models.enums import CONSISTENCY_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule


class SeasonContainsBlocksRule(ValidationRule):
    rule_id = "V06"
    name = "Season Contains Block Dates"
    severity = Severity.BLOCKING
    entity_type = EntityType.BLOCK
    modes = CONSISTENCY_MODES
    invariant = 6

    def validate(self, entity: Block, context: ValidationContext) -> ValidationIssue | None:
        block = entity
        if not block.season_id or not block.start_date or not block.end_date:
            return None

        season = context.find_season(block.season_id)
        if season is None or not season.start_date or not season.end_date:
            return None

        season_start = parse_iso_date(season.start_date)
        season_end = parse_iso_date(season.end_date)
        block_start = parse_iso_date(block.start_date)
        block_end = parse_iso_date(block.end_date)
        if not all(
            isinstance(d, date) for d in (season_start, season_end, block_start, block_end)
        ):
            return None

        field_base = _field_base(season.block_ids, block.block_id)

        if block_start < season_start:  # type: ignore[operator]
            return self.issue(
                block,
                field_path=f"{field_base}.startDate",
                message=(
                    f'Block "{block.block_id}" starts before season "{season.season_id}" '
                    f"startDate (block: {block.start_date}, season: {season.start_date})"
                ),
                suggested_fix="Adjust block startDate to be within the season range",
            )

        if block_end > season_end:  # type: ignore[operator]
            return self.issue(
                block,
                field_path=f"{field_base}.endDate",
                message=(
                    f'Block "{block.block_id}" ends after season "{season.season_id}" '
                    f"endDate (block: {block.end_date}, season: {season.end_date})"
                ),
                suggested_fix="Adjust block endDate to be within the season range",
            )

        return None


def _field_base(block_ids: tuple[str, ...] | None, block_id: str | None) -> str:
    """``season.blockIds[i]`` for the first listing of *block_id*, else ``block``."""
    if block_ids and block_id in block_ids:
        return f"season.blockIds[{list(block_ids).index(block_id)}]"
    return "block"
