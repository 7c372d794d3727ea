"""Plan entities: Season → Block → Week → Workout reference.

Entities are frozen snapshots handed to the engine by the caller. Every
field except the key may be ``None`` because the engine's job is to report
sparse or malformed input, not to reject it at construction time.

Each entity maps its Python attribute names to the camelCase wire names
used in ``field_path`` strings (``season.blockIds``, ``week.workoutIds``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from season_validator.models.enums import EntityType

WorkoutSlots = Mapping[str, "str | None"]


@dataclass(frozen=True)
class Season:
    """Top level of a training calendar."""

    season_id: str | None = None
    name: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    block_ids: tuple[str, ...] | None = None
    status: str | None = None
    published_at: str | None = None
    notes: str | None = None

    entity_type: ClassVar[EntityType] = EntityType.SEASON
    wire_names: ClassVar[dict[str, str]] = {
        "season_id": "seasonId",
        "name": "name",
        "start_date": "startDate",
        "end_date": "endDate",
        "block_ids": "blockIds",
        "status": "status",
        "published_at": "publishedAt",
        "notes": "notes",
    }

    @property
    def entity_id(self) -> str | None:
        return self.season_id


@dataclass(frozen=True)
class Block:
    """A periodization block inside a season, made of consecutive weeks."""

    block_id: str | None = None
    season_id: str | None = None
    name: str | None = None
    phase: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    week_ids: tuple[str, ...] | None = None
    event_id: str | None = None
    focus: str | None = None
    notes: str | None = None

    entity_type: ClassVar[EntityType] = EntityType.BLOCK
    wire_names: ClassVar[dict[str, str]] = {
        "block_id": "blockId",
        "season_id": "seasonId",
        "name": "name",
        "phase": "phase",
        "start_date": "startDate",
        "end_date": "endDate",
        "week_ids": "weekIds",
        "event_id": "eventId",
        "focus": "focus",
        "notes": "notes",
    }

    @property
    def entity_id(self) -> str | None:
        return self.block_id


@dataclass(frozen=True)
class Week:
    """Seven-day unit starting on a Monday.

    ``workout_ids`` maps weekday keys (``mon`` .. ``sun``) to a workout
    reference, or ``None`` for a rest day. A reference may pin a version
    with an ``@vN`` suffix, e.g. ``workout-tempo@v2``.
    """

    week_id: str | None = None
    block_id: str | None = None
    name: str | None = None
    start_date: str | None = None
    workout_ids: WorkoutSlots | None = None
    notes: str | None = None

    entity_type: ClassVar[EntityType] = EntityType.WEEK
    wire_names: ClassVar[dict[str, str]] = {
        "week_id": "weekId",
        "block_id": "blockId",
        "name": "name",
        "start_date": "startDate",
        "workout_ids": "workoutIds",
        "notes": "notes",
    }

    @property
    def entity_id(self) -> str | None:
        return self.week_id


@dataclass(frozen=True)
class Workout:
    """A versioned workout definition. Only referenced, never validated."""

    workout_id: str | None = None
    version: int | None = None
    name: str | None = None
    tiers: Mapping[str, Any] | None = None

    entity_type: ClassVar[EntityType] = EntityType.WORKOUT
    wire_names: ClassVar[dict[str, str]] = {
        "workout_id": "workoutId",
        "version": "version",
        "name": "name",
        "tiers": "tiers",
    }

    @property
    def entity_id(self) -> str | None:
        return self.workout_id


PlanEntity = Season | Block | Week


@dataclass(frozen=True)
class PlanEntities:
    """The four entity collections supplied to one validation call."""

    seasons: tuple[Season, ...] = field(default_factory=tuple)
    blocks: tuple[Block, ...] = field(default_factory=tuple)
    weeks: tuple[Week, ...] = field(default_factory=tuple)
    workouts: tuple[Workout, ...] = field(default_factory=tuple)

    @classmethod
    def of(
        cls,
        seasons: list[Season] | tuple[Season, ...] | None = None,
        blocks: list[Block] | tuple[Block, ...] | None = None,
        weeks: list[Week] | tuple[Week, ...] | None = None,
        workouts: list[Workout] | tuple[Workout, ...] | None = None,
    ) -> PlanEntities:
        """Build from any sequences, treating missing collections as empty."""
        return cls(
            seasons=tuple(seasons or ()),
            blocks=tuple(blocks or ()),
            weeks=tuple(weeks or ()),
            workouts=tuple(workouts or ()),
        )
