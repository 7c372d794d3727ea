"""Environment-variable-based configuration for the plan checker CLI."""

from __future__ import annotations

import os

DEFAULT_MODE: str = os.environ.get("SEASON_VALIDATOR_MODE", "publish")
LOG_LEVEL: str = os.environ.get("SEASON_VALIDATOR_LOG_LEVEL", "INFO").upper()
OUTPUT_FORMAT: str = os.environ.get("SEASON_VALIDATOR_FORMAT", "text")
