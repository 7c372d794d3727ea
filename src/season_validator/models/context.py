"""Read-only cross-entity context shared by every rule in one run."""

from __future__ import annotations

from dataclasses import dataclass, field

from season_validator.models.entities import Block, PlanEntities, Season, Week, Workout
from season_validator.models.enums import ValidationMode


@dataclass(frozen=True)
class ValidationContext:
    """Snapshot of all supplied collections plus the active mode.

    Lookups are first-match linear scans in the order the caller supplied
    the records, so the same duplicate always wins.
    """

    mode: ValidationMode
    all_seasons: tuple[Season, ...] = field(default_factory=tuple)
    all_blocks: tuple[Block, ...] = field(default_factory=tuple)
    all_weeks: tuple[Week, ...] = field(default_factory=tuple)
    all_workouts: tuple[Workout, ...] = field(default_factory=tuple)

    @classmethod
    def from_entities(
        cls, entities: PlanEntities, mode: ValidationMode
    ) -> ValidationContext:
        return cls(
            mode=mode,
            all_seasons=tuple(entities.seasons),
            all_blocks=tuple(entities.blocks),
            all_weeks=tuple(entities.weeks),
            all_workouts=tuple(entities.workouts),
        )

    # -- Lookups ----------------------------------------------------------

    def find_season(self, season_id: str | None) -> Season | None:
        for season in self.all_seasons:
            if season.season_id == season_id:
                return season
        return None

    def find_block(self, block_id: str | None) -> Block | None:
        for block in self.all_blocks:
            if block.block_id == block_id:
                return block
        return None

    def find_week(self, week_id: str | None) -> Week | None:
        for week in self.all_weeks:
            if week.week_id == week_id:
                return week
        return None

    def has_workout(self, workout_id: str) -> bool:
        """True if any version of *workout_id* exists."""
        return any(w.workout_id == workout_id for w in self.all_workouts)

    def has_workout_version(self, workout_id: str, version: int) -> bool:
        return any(
            w.workout_id == workout_id and w.version == version
            for w in self.all_workouts
        )

    def weeks_for_block(self, block_id: str | None) -> tuple[Week, ...]:
        """Weeks whose ``block_id`` back-reference points at *block_id*."""
        return tuple(w for w in self.all_weeks if w.block_id == block_id)
