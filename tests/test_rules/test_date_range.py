"""Tests for start-before-end rules (V05.1-V05.2)."""

from __future__ import annotations

from dataclasses import replace

from season_validator.models.entities import Block, Season
from season_validator.rules.critical.date_range import BlockDateRangeRule, SeasonDateRangeRule


class TestSeasonDateRangeRule:
    def setup_method(self) -> None:
        self.rule = SeasonDateRangeRule()

    def test_ordered_range_passes(self, spring_season: Season, make_context) -> None:
        assert self.rule.validate(spring_season, make_context()) is None

    def test_zero_length_range(self, spring_season: Season, make_context) -> None:
        season = replace(spring_season, end_date="2026-01-05")
        issue = self.rule.validate(season, make_context())
        assert issue is not None
        assert issue.field_path == "season.startDate"
        assert issue.message == (
            "Start date must be before end date (start: 2026-01-05, end: 2026-01-05)"
        )
        assert issue.suggested_fix == "Ensure start date is before end date"

    def test_malformed_dates_skipped(self, spring_season: Season, make_context) -> None:
        season = replace(spring_season, start_date="2026-13-01")
        assert self.rule.validate(season, make_context()) is None


class TestBlockDateRangeRule:
    def test_reversed_block(self, base_block: Block, make_context) -> None:
        block = replace(base_block, start_date="2026-01-18", end_date="2026-01-05")
        issue = BlockDateRangeRule().validate(block, make_context())
        assert issue is not None
        assert issue.rule_id == "V05.2"
        assert issue.field_path == "block.startDate"

    def test_missing_end_skipped(self, base_block: Block, make_context) -> None:
        block = replace(base_block, end_date=None)
        assert BlockDateRangeRule().validate(block, make_context()) is None
