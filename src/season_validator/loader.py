"""Build plan entities from the camelCase JSON wire format.

Conversion is shape-only: values are copied as they are, with no checking
or correction, so the engine sees exactly what the author wrote. Unknown
keys are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, TypeVar

from season_validator.exceptions import PlanLoadError
from season_validator.models.entities import Block, PlanEntities, Season, Week, Workout

logger = logging.getLogger(__name__)

_EntityT = TypeVar("_EntityT", Season, Block, Week, Workout)

# Wire fields that hold ordered id lists
_LIST_FIELDS = frozenset({"blockIds", "weekIds"})


def entity_from_dict(cls: type[_EntityT], data: Mapping[str, Any]) -> _EntityT:
    """Map one wire record onto an entity dataclass.

    Raises:
        PlanLoadError: If *data* is not an object, or a week's
            ``workoutIds`` is present but not an object.
    """
    kind = cls.entity_type.value
    if not isinstance(data, Mapping):
        raise PlanLoadError(f"Each {kind} must be a JSON object, got {type(data).__name__}")

    kwargs: dict[str, Any] = {}
    for attr, wire_name in cls.wire_names.items():
        if wire_name not in data:
            continue
        value = data[wire_name]
        if wire_name == "workoutIds" and value is not None and not isinstance(value, Mapping):
            raise PlanLoadError(
                f"{kind}.workoutIds must be a JSON object, got {type(value).__name__}"
            )
        if wire_name in _LIST_FIELDS and isinstance(value, list):
            value = tuple(value)
        kwargs[attr] = value
    return cls(**kwargs)


def entities_from_dict(data: Mapping[str, Any]) -> PlanEntities:
    """Convert ``{"seasons": [...], "blocks": [...], ...}`` into PlanEntities.

    Raises:
        PlanLoadError: If a collection is not a list or holds a malformed
            record.
    """
    return PlanEntities.of(
        seasons=_collection(data, "seasons", Season),
        blocks=_collection(data, "blocks", Block),
        weeks=_collection(data, "weeks", Week),
        workouts=_collection(data, "workouts", Workout),
    )


def _collection(
    data: Mapping[str, Any], key: str, cls: type[_EntityT]
) -> list[_EntityT]:
    records = data.get(key)
    if records is None:
        return []
    if not isinstance(records, list):
        raise PlanLoadError(f"{key} must be a JSON array, got {type(records).__name__}")
    return [entity_from_dict(cls, record) for record in records]


def load_plan(path: str | Path) -> PlanEntities:
    """Read a plan JSON file.

    Raises:
        PlanLoadError: If the file is missing, is not valid JSON, or its
            contents do not have the plan shape.
    """
    plan_path = Path(path)
    logger.info("Loading plan from %s", plan_path)

    try:
        with open(plan_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise PlanLoadError(f"File not found: {plan_path}", str(plan_path)) from None
    except json.JSONDecodeError as exc:
        raise PlanLoadError(f"Invalid JSON syntax: {exc}", str(plan_path)) from exc
    except OSError as exc:
        raise PlanLoadError(f"Could not read plan: {exc}", str(plan_path)) from exc

    if not isinstance(data, dict):
        raise PlanLoadError(
            f"Plan must be a JSON object, got {type(data).__name__}", str(plan_path)
        )

    try:
        plan = entities_from_dict(data)
    except PlanLoadError as exc:
        raise PlanLoadError(f"Malformed plan: {exc}", str(plan_path)) from exc

    logger.debug(
        "Loaded %d seasons, %d blocks, %d weeks, %d workouts",
        len(plan.seasons),
        len(plan.blocks),
        len(plan.weeks),
        len(plan.workouts),
    )
    return plan
