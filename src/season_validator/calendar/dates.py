"""Strict ISO-8601 date handling for plan validation.

Dates must be exact ``YYYY-MM-DD`` and timestamps must carry a timezone.
Nothing here auto-corrects input: ``2026-1-12`` and ``2026-02-30`` are
reported, not normalised.

Parsers return either the parsed value or a ``DateValidationError`` so
callers can branch with ``isinstance`` instead of catching exceptions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Sequence

_ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_ISO_TIMESTAMP_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]{3})?(Z|[+-][0-9]{2}:[0-9]{2})"
)

# Indexed by date.weekday(): Monday == 0
_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


@dataclass(frozen=True)
class DateValidationError:
    """Why a date or timestamp string was rejected."""

    reason: str
    valid: bool = False


@dataclass(frozen=True)
class DateRangeCheck:
    valid: bool
    reason: str = ""


@dataclass(frozen=True)
class ContainmentCheck:
    contained: bool
    reason: str = ""


@dataclass(frozen=True)
class ChronologyCheck:
    ordered: bool
    violation: str = ""


def parse_iso_date(text: Any) -> date | DateValidationError:
    """Parse an exact ``YYYY-MM-DD`` calendar date.

    Rejects other layouts (``2026-1-12``), out-of-range months or days, and
    dates that do not exist on the calendar (``2026-02-30``).
    """
    if not isinstance(text, str) or not _ISO_DATE_PATTERN.fullmatch(text):
        return DateValidationError(
            reason=(
                f'Invalid date format: "{text}". '
                f'Expected YYYY-MM-DD (e.g., "2026-01-15")'
            )
        )

    year, month, day = (int(part) for part in text.split("-"))

    if month < 1 or month > 12:
        return DateValidationError(reason=f"Invalid month: {month}. Must be 01-12")

    if day < 1 or day > 31:
        return DateValidationError(reason=f"Invalid day: {day}. Must be 01-31")

    try:
        return date(year, month, day)
    except ValueError:
        return DateValidationError(
            reason=f"Invalid calendar date: {text} (e.g., Feb 30 doesn't exist)"
        )


def parse_iso_timestamp(text: Any) -> datetime | DateValidationError:
    """Parse an ISO-8601 date-time that includes ``Z`` or a ``±HH:MM`` offset."""
    if not isinstance(text, str) or not _ISO_TIMESTAMP_PATTERN.fullmatch(text):
        return DateValidationError(
            reason=(
                f'Invalid timestamp format: "{text}". '
                f"Expected YYYY-MM-DDTHH:MM:SSZ or with timezone offset"
            )
        )

    # fromisoformat only learned the "Z" suffix in Python 3.11
    normalised = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(normalised)
    except ValueError:
        return DateValidationError(reason=f'Invalid timestamp: "{text}"')


def validate_date_range(start: date, end: date) -> DateRangeCheck:
    """A range is valid only when *start* is strictly before *end*."""
    if start >= end:
        return DateRangeCheck(
            valid=False,
            reason=(
                f"Start date must be before end date "
                f"(start: {format_date(start)}, end: {format_date(end)})"
            ),
        )
    return DateRangeCheck(valid=True)


def is_date_contained(inner: date, outer_start: date, outer_end: date) -> ContainmentCheck:
    """Check that *inner* falls in ``[outer_start, outer_end]`` inclusive."""
    if inner < outer_start:
        return ContainmentCheck(
            contained=False,
            reason=(
                f"Date {format_date(inner)} is before range start "
                f"{format_date(outer_start)}"
            ),
        )
    if inner > outer_end:
        return ContainmentCheck(
            contained=False,
            reason=(
                f"Date {format_date(inner)} is after range end "
                f"{format_date(outer_end)}"
            ),
        )
    return ContainmentCheck(contained=True)


def check_chronological_order(starts: Sequence[date]) -> ChronologyCheck:
    """Check that *starts* is strictly increasing; report the first bad pair."""
    for i in range(len(starts) - 1):
        current, following = starts[i], starts[i + 1]
        if current >= following:
            return ChronologyCheck(
                ordered=False,
                violation=(
                    f"Entity at index {i} ({format_date(current)}) is not before "
                    f"entity at index {i + 1} ({format_date(following)})"
                ),
            )
    return ChronologyCheck(ordered=True)


def get_day_of_week(d: date) -> str:
    """Full English weekday name, e.g. ``"Sunday"``."""
    return _DAY_NAMES[d.weekday()]


def is_monday(d: date) -> bool:
    return d.weekday() == 0


def format_date(d: date) -> str:
    """Format as ``YYYY-MM-DD``."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)
