"""Shared test fixtures: a clean season plan, rest-week slots, contexts."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable

import pytest

from season_validator.models.context import ValidationContext
from season_validator.models.entities import Block, PlanEntities, Season, Week, Workout
from season_validator.models.enums import ValidationMode


def rest_week() -> dict[str, str | None]:
    """Seven rest days."""
    return {
        "mon": None,
        "tue": None,
        "wed": None,
        "thu": None,
        "fri": None,
        "sat": None,
        "sun": None,
    }


@pytest.fixture
def rest_slots() -> dict[str, str | None]:
    return rest_week()


@pytest.fixture
def spring_season() -> Season:
    """Two-block season, 2026-01-05 (Mon) .. 2026-02-01."""
    return Season(
        season_id="2026-spring",
        name="Spring 2026",
        start_date="2026-01-05",
        end_date="2026-02-01",
        block_ids=("block-base-1", "block-build-1"),
        status="draft",
    )


@pytest.fixture
def base_block() -> Block:
    return Block(
        block_id="block-base-1",
        season_id="2026-spring",
        name="Base 1",
        phase="base",
        start_date="2026-01-05",
        end_date="2026-01-18",
        week_ids=("week-1", "week-2"),
    )


@pytest.fixture
def build_block() -> Block:
    return Block(
        block_id="block-build-1",
        season_id="2026-spring",
        name="Build 1",
        phase="build",
        start_date="2026-01-19",
        end_date="2026-02-01",
        week_ids=("week-3", "week-4"),
    )


@pytest.fixture
def plan_weeks() -> tuple[Week, ...]:
    """Four consecutive Monday-start weeks; week-1 has workouts scheduled."""
    week_1_slots = rest_week()
    week_1_slots.update(
        tue="workout-tempo@v2",
        thu="workout-easy",
        sat="workout-long",
    )
    return (
        Week(
            week_id="week-1",
            block_id="block-base-1",
            name="Week 1",
            start_date="2026-01-05",
            workout_ids=week_1_slots,
        ),
        Week(
            week_id="week-2",
            block_id="block-base-1",
            name="Week 2",
            start_date="2026-01-12",
            workout_ids=rest_week(),
        ),
        Week(
            week_id="week-3",
            block_id="block-build-1",
            name="Week 3",
            start_date="2026-01-19",
            workout_ids=rest_week(),
        ),
        Week(
            week_id="week-4",
            block_id="block-build-1",
            name="Week 4",
            start_date="2026-01-26",
            workout_ids=rest_week(),
        ),
    )


@pytest.fixture
def workout_library() -> tuple[Workout, ...]:
    return (
        Workout(workout_id="workout-easy", version=1, name="Easy 40"),
        Workout(workout_id="workout-tempo", version=1, name="Tempo 3x10"),
        Workout(workout_id="workout-tempo", version=2, name="Tempo 2x15"),
        Workout(workout_id="workout-long", version=1, name="Long run 90"),
    )


@pytest.fixture
def valid_plan(
    spring_season: Season,
    base_block: Block,
    build_block: Block,
    plan_weeks: tuple[Week, ...],
    workout_library: tuple[Workout, ...],
) -> PlanEntities:
    """A plan that passes every rule in every mode."""
    return PlanEntities(
        seasons=(spring_season,),
        blocks=(base_block, build_block),
        weeks=plan_weeks,
        workouts=workout_library,
    )


@pytest.fixture
def make_context() -> Callable[..., ValidationContext]:
    """Factory for a publish-mode context over ad-hoc collections."""

    def _make(
        seasons: tuple[Season, ...] | list[Season] = (),
        blocks: tuple[Block, ...] | list[Block] = (),
        weeks: tuple[Week, ...] | list[Week] = (),
        workouts: tuple[Workout, ...] | list[Workout] = (),
        mode: ValidationMode = ValidationMode.PUBLISH,
    ) -> ValidationContext:
        return ValidationContext(
            mode=mode,
            all_seasons=tuple(seasons),
            all_blocks=tuple(blocks),
            all_weeks=tuple(weeks),
            all_workouts=tuple(workouts),
        )

    return _make


@pytest.fixture
def misaligned_plan(valid_plan: PlanEntities) -> PlanEntities:
    """Valid structure with three date problems.

    block-base-1 starts before the season, its weeks are listed out of
    order, and week-3 starts on a Tuesday.
    """
    base, build = valid_plan.blocks
    week_1, week_2, week_3, week_4 = valid_plan.weeks
    return replace(
        valid_plan,
        blocks=(
            replace(base, start_date="2026-01-01", week_ids=("week-2", "week-1")),
            build,
        ),
        weeks=(week_1, week_2, replace(week_3, start_date="2026-01-20"), week_4),
    )


@pytest.fixture
def dangling_plan(valid_plan: PlanEntities) -> PlanEntities:
    """One dangling reference at each level: block, week and workout version."""
    (season,) = valid_plan.seasons
    base, build = valid_plan.blocks
    week_1, *other_weeks = valid_plan.weeks
    slots = dict(week_1.workout_ids or {})
    slots["tue"] = "workout-tempo@v99"
    return replace(
        valid_plan,
        seasons=(replace(season, block_ids=(*season.block_ids, "block-missing")),),
        blocks=(base, replace(build, week_ids=(*build.week_ids, "week-missing"))),
        weeks=(replace(week_1, workout_ids=slots), *other_weeks),
    )


@pytest.fixture
def plan_document() -> dict:
    """The valid plan in its camelCase JSON wire form."""
    slots = rest_week()
    slots.update(tue="workout-tempo@v2", thu="workout-easy", sat="workout-long")
    return {
        "seasons": [
            {
                "seasonId": "2026-spring",
                "name": "Spring 2026",
                "startDate": "2026-01-05",
                "endDate": "2026-02-01",
                "blockIds": ["block-base-1", "block-build-1"],
                "status": "draft",
            }
        ],
        "blocks": [
            {
                "blockId": "block-base-1",
                "seasonId": "2026-spring",
                "name": "Base 1",
                "phase": "base",
                "startDate": "2026-01-05",
                "endDate": "2026-01-18",
                "weekIds": ["week-1", "week-2"],
            },
            {
                "blockId": "block-build-1",
                "seasonId": "2026-spring",
                "name": "Build 1",
                "phase": "build",
                "startDate": "2026-01-19",
                "endDate": "2026-02-01",
                "weekIds": ["week-3", "week-4"],
                "focus": "threshold",
            },
        ],
        "weeks": [
            {
                "weekId": f"week-{n}",
                "blockId": "block-base-1" if n <= 2 else "block-build-1",
                "name": f"Week {n}",
                "startDate": start,
                "workoutIds": slots if n == 1 else rest_week(),
            }
            for n, start in enumerate(
                ["2026-01-05", "2026-01-12", "2026-01-19", "2026-01-26"], start=1
            )
        ],
        "workouts": [
            {"workoutId": "workout-easy", "version": 1, "name": "Easy 40"},
            {"workoutId": "workout-tempo", "version": 1, "name": "Tempo 3x10"},
            {"workoutId": "workout-tempo", "version": 2, "name": "Tempo 2x15"},
            {"workoutId": "workout-long", "version": 1, "name": "Long run 90"},
        ],
    }


@pytest.fixture
def write_plan(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a JSON document to a temp file and return its path."""

    def _write(document: Any, name: str = "plan.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
