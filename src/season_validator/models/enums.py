"""Enumerations and fixed vocabularies for season plan validation.

Enum values are the exact strings callers see in issue payloads, so every
enum is a ``str`` subclass and compares equal to its wire value.
"""

from enum import Enum


class Severity(str, Enum):
    """Issue severity tiers.

    CRITICAL blocks save. BLOCKING and INFO only block publish.
    """

    CRITICAL = "CRITICAL"
    BLOCKING = "BLOCKING"
    INFO = "INFO"


class ValidationMode(str, Enum):
    """When validation runs; each rule opts into the modes it supports."""

    EDIT = "edit"        # Field-level checks while the coach types
    SAVE = "save"        # Pre-save gate, structural (CRITICAL) rules only
    PUBLISH = "publish"  # Full gate before athletes can see the plan
    LOAD = "load"        # Sanity pass when a stored plan is opened


class EntityType(str, Enum):
    """Kinds of plan entity an issue can point at."""

    SEASON = "season"
    BLOCK = "block"
    WEEK = "week"
    WORKOUT = "workout"


class SeasonStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


class BlockPhase(str, Enum):
    """Periodization phase a block belongs to."""

    BASE = "base"
    BUILD = "build"
    PEAK = "peak"
    TAPER = "taper"
    RECOVERY = "recovery"


ALL_MODES: tuple[ValidationMode, ...] = (
    ValidationMode.EDIT,
    ValidationMode.SAVE,
    ValidationMode.PUBLISH,
    ValidationMode.LOAD,
)

# Modes where cross-entity consistency rules run (everything but save)
CONSISTENCY_MODES: tuple[ValidationMode, ...] = (
    ValidationMode.EDIT,
    ValidationMode.PUBLISH,
    ValidationMode.LOAD,
)

VALID_SEASON_STATUSES: tuple[str, ...] = tuple(s.value for s in SeasonStatus)
VALID_BLOCK_PHASES: tuple[str, ...] = tuple(p.value for p in BlockPhase)

# Week slots in calendar order, Monday first
WEEKDAYS: tuple[str, ...] = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

# A week always spans seven days: start .. start + 6
WEEK_LENGTH_DAYS = 7

DOC_REFERENCE_BASE = "/docs/validation-invariants.md"


def doc_reference(invariant: int) -> str:
    """Docs anchor for an invariant number, e.g. ``doc_reference(6)``."""
    return f"{DOC_REFERENCE_BASE}#V{invariant}"
