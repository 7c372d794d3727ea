"""CRITICAL rules V03.1-V03.3: dates use strict ISO-8601.

Only fields that are present are checked (absence belongs to V01). Fields
are checked in order: startDate, endDate, then publishedAt for seasons.
The issue message is the parser's own rejection reason.
"""

from __future__ import annotations

from typing import Any, Callable

from season_validator.calendar.dates import (
    DateValidationError,
    parse_iso_date,
    parse_iso_timestamp,
)
from season_validator.models.context import ValidationContext
from season_validator.models.enums import ALL_MODES, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule

# (attribute, parser, suggested fix)
DateCheck = tuple[str, Callable[[Any], Any], str]


class _DateFormatRule(ValidationRule):
    severity = Severity.CRITICAL
    modes = ALL_MODES
    invariant = 3
    date_checks: tuple[DateCheck, ...] = ()

    def validate(self, entity: Any, context: ValidationContext) -> ValidationIssue | None:
        kind = self.entity_type.value
        for attr, parser, fix in self.date_checks:
            value = getattr(entity, attr, None)
            if not value:
                continue

            result = parser(value)
            if isinstance(result, DateValidationError):
                return self.issue(
                    entity,
                    field_path=f"{kind}.{entity.wire_names[attr]}",
                    message=result.reason,
                    suggested_fix=fix,
                )
        return None


class SeasonDateFormatRule(_DateFormatRule):
    rule_id = "V03.1"
    name = "Season Date Format"
    entity_type = EntityType.SEASON
    date_checks = (
        ("start_date", parse_iso_date, 'Use format: YYYY-MM-DD (e.g., "2026-01-15")'),
        ("end_date", parse_iso_date, 'Use format: YYYY-MM-DD (e.g., "2026-04-19")'),
        ("published_at", parse_iso_timestamp, "Use format: YYYY-MM-DDTHH:MM:SSZ"),
    )


class BlockDateFormatRule(_DateFormatRule):
    rule_id = "V03.2"
    name = "Block Date Format"
    entity_type = EntityType.BLOCK
    date_checks = (
        ("start_date", parse_iso_date, 'Use format: YYYY-MM-DD (e.g., "2026-01-12")'),
        ("end_date", parse_iso_date, 'Use format: YYYY-MM-DD (e.g., "2026-02-01")'),
    )


class WeekDateFormatRule(_DateFormatRule):
    rule_id = "V03.3"
    name = "Week Date Format"
    entity_type = EntityType.WEEK
    date_checks = (
        ("start_date", parse_iso_date, 'Use format: YYYY-MM-DD (e.g., "2026-01-12")'),
    )
