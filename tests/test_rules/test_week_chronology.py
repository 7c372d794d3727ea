"""Tests for WeekChronologyRule (V09)."""

from __future__ import annotations

from dataclasses import replace

from season_validator.models.entities import Block, Week
from season_validator.rules.blocking.week_chronology import WeekChronologyRule


class TestWeekChronologyRule:
    def setup_method(self) -> None:
        self.rule = WeekChronologyRule()

    def test_ordered_weeks_pass(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        assert self.rule.validate(base_block, make_context(weeks=plan_weeks)) is None

    def test_reversed_weeks(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        block = replace(base_block, week_ids=("week-2", "week-1"))
        issue = self.rule.validate(block, make_context(weeks=plan_weeks))
        assert issue is not None
        assert issue.field_path == "block.weekIds[1].startDate"
        assert issue.entity_id == "block-base-1"
        assert issue.message == (
            'Week "week-1" starts on 2026-01-05, which is not after previous '
            'week "week-2" startDate 2026-01-12'
        )

    def test_same_start_fails(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        weeks = (plan_weeks[0], replace(plan_weeks[1], start_date="2026-01-05"))
        issue = self.rule.validate(base_block, make_context(weeks=weeks))
        assert issue is not None

    def test_dangling_week_skipped(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        assert self.rule.validate(base_block, make_context(weeks=plan_weeks[:1])) is None
