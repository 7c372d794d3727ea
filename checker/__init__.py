"""Command-line plan checker built on season_validator."""
