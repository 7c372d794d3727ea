"""Exception hierarchy for season_validator.

Validation findings are never raised; they come back as ``ValidationIssue``
records. These exceptions cover caller mistakes and I/O failures only.
"""

from __future__ import annotations


class SeasonValidatorError(Exception):
    """Base exception for all season_validator errors."""


class UnknownModeError(SeasonValidatorError, ValueError):
    """A validation mode string that is not edit, save, publish or load."""

    def __init__(self, mode: object) -> None:
        super().__init__(f"Unknown validation mode: {mode!r}")
        self.mode = mode


class PlanLoadError(SeasonValidatorError):
    """A plan file could not be read or is not a JSON object."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
