"""BLOCKING rule V13: week workout slots reference existing workouts.

A slot holds ``None`` (rest day), a bare workout id, or a pinned version
``<workout-id>@v<N>`` where N is a positive integer. Any other value is
reported as a workout that cannot be found. Slots are checked
Monday to Sunday and the first bad slot wins.

For a pinned reference the checks run in order: version syntax, base
workout exists, requested version exists.
"""

from __future__ import annotations

import re

from season_validator.models.context import ValidationContext
from season_validator.models.entities import Week
from season_validator.models.enums import CONSISTENCY_MODES, WEEKDAYS, EntityType, Severity
from season_validator.models.issue import ValidationIssue
from season_validator.rules.base import ValidationRule

VERSION_MARKER = "@v"
VERSION_PATTERN = re.compile(r"(.+)@v([0-9]+)")

_SYNTAX_FIX = "Use format workout-id@vN where N is a positive integer"
_MISSING_WORKOUT_FIX = "Add the workout or update the reference"
_MISSING_VERSION_FIX = "Add the workout version or update the reference"


class WeekWorkoutReferencesRule(ValidationRule):
    rule_id = "V13"
    name = "Week Workout References Exist"
    severity = Severity.BLOCKING
    entity_type = EntityType.WEEK
    modes = CONSISTENCY_MODES
    invariant = 13

    def validate(self, entity: Week, context: ValidationContext) -> ValidationIssue | None:
        week = entity
        if not week.workout_ids:
            return None

        for day in WEEKDAYS:
            reference = week.workout_ids.get(day)
            if reference is None:
                continue

            field_path = f"week.workoutIds.{day}"

            if isinstance(reference, str) and VERSION_MARKER in reference:
                match = VERSION_PATTERN.fullmatch(reference)
                if match is None or int(match.group(2)) <= 0:
                    return self.issue(
                        week,
                        field_path=field_path,
                        message=f"Invalid workout version syntax: {reference}",
                        suggested_fix=_SYNTAX_FIX,
                    )

                base_id = match.group(1)
                version = int(match.group(2))

                if not context.has_workout(base_id):
                    return self.issue(
                        week,
                        field_path=field_path,
                        message=f"Workout not found: {base_id}",
                        suggested_fix=_MISSING_WORKOUT_FIX,
                    )

                if not context.has_workout_version(base_id, version):
                    return self.issue(
                        week,
                        field_path=field_path,
                        message=f"Workout version not found: {reference}",
                        suggested_fix=_MISSING_VERSION_FIX,
                    )

            elif not context.has_workout(reference):
                return self.issue(
                    week,
                    field_path=field_path,
                    message=f"Workout not found: {reference}",
                    suggested_fix=_MISSING_WORKOUT_FIX,
                )

        return None
