"""Entity ID conventions for plan authoring.

IDs are kebab-case. Blocks, weeks and workouts carry a type prefix
(``block-``, ``week-``, ``workout-``); season IDs are a free slug such as
``2026-spring``.
"""

from __future__ import annotations

import re
import secrets
import time
from dataclasses import dataclass
from typing import Iterable

from season_validator.models.enums import EntityType

_KEBAB_CASE_PATTERN = re.compile(r"[a-z0-9-]+")
_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")

_PREFIXES: dict[EntityType, str] = {
    EntityType.BLOCK: "block-",
    EntityType.WEEK: "week-",
    EntityType.WORKOUT: "workout-",
}


@dataclass(frozen=True)
class IdCheck:
    valid: bool
    reason: str = ""


def validate_id_format(entity_id: str, entity_type: EntityType) -> IdCheck:
    """Check kebab-case and the entity-specific prefix."""
    if not _KEBAB_CASE_PATTERN.fullmatch(entity_id):
        if entity_type == EntityType.SEASON and entity_id == "":
            return IdCheck(valid=False, reason="Season ID cannot be empty")
        return IdCheck(
            valid=False,
            reason=f'ID must be lowercase with hyphens only (kebab-case): "{entity_id}"',
        )

    prefix = _PREFIXES.get(entity_type)
    if prefix is None:
        return IdCheck(valid=True)

    label = entity_type.value.capitalize()
    if not entity_id.startswith(prefix):
        return IdCheck(
            valid=False,
            reason=f'{label} ID must start with "{prefix}": "{entity_id}"',
        )
    if entity_id == prefix:
        return IdCheck(valid=False, reason=f'{label} ID cannot be just "{prefix}"')
    return IdCheck(valid=True)


def check_id_uniqueness(entity_id: str, existing_ids: Iterable[str]) -> IdCheck:
    if entity_id in set(existing_ids):
        return IdCheck(valid=False, reason=f'ID already exists: "{entity_id}"')
    return IdCheck(valid=True)


def to_kebab_case(text: str) -> str:
    """``"Base Block 1"`` → ``"base-block-1"``."""
    return _NON_ALPHANUMERIC.sub("-", text.lower()).strip("-")


def generate_id(
    entity_type: EntityType,
    slug: str | None,
    existing_ids: Iterable[str],
) -> str:
    """Build a unique ID for a new entity.

    Prefers a readable ID derived from *slug*. When there is no slug, or the
    readable ID is taken, falls back to ``<type>-<epoch millis>`` and appends
    a random suffix if even that collides.
    """
    existing = set(existing_ids)

    if slug:
        kebab = to_kebab_case(slug)
        candidate = _PREFIXES.get(entity_type, "") + kebab
        if kebab and candidate not in existing:
            return candidate

    candidate = f"{entity_type.value}-{time.time_ns() // 1_000_000}"
    if candidate in existing:
        candidate = f"{candidate}-{secrets.token_hex(5)[:9]}"
    return candidate


def infer_entity_type(entity_id: str) -> EntityType | None:
    """Best-effort type from the ID prefix. Season IDs cannot be inferred."""
    for entity_type, prefix in _PREFIXES.items():
        if entity_id.startswith(prefix):
            return entity_type
    return None
