"""Tests for BlockContainsWeeksRule (V07)."""

from __future__ import annotations

from dataclasses import replace

from season_validator.models.entities import Block, Week
from season_validator.rules.blocking.block_contains_weeks import BlockContainsWeeksRule


class TestBlockContainsWeeksRule:
    def setup_method(self) -> None:
        self.rule = BlockContainsWeeksRule()

    def test_last_week_ending_on_block_end(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        context = make_context(blocks=[base_block])
        assert self.rule.validate(plan_weeks[1], context) is None

    def test_week_overruns_block(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        week = replace(plan_weeks[1], start_date="2026-01-14")
        issue = self.rule.validate(week, make_context(blocks=[base_block]))
        assert issue is not None
        assert issue.field_path == "block.weekIds[1].startDate"
        assert issue.message == (
            'Week "week-2" exceeds block "block-base-1" endDate '
            "(week end: 2026-01-20, block: 2026-01-18)"
        )

    def test_week_starts_before_block(
        self, build_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        week = replace(plan_weeks[2], start_date="2026-01-12")
        issue = self.rule.validate(week, make_context(blocks=[build_block]))
        assert issue is not None
        assert issue.field_path == "block.weekIds[0].startDate"
        assert "starts before block" in issue.message

    def test_unlisted_week_uses_own_path(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        week = replace(plan_weeks[1], week_id="week-extra", start_date="2026-01-14")
        issue = self.rule.validate(week, make_context(blocks=[base_block]))
        assert issue is not None
        assert issue.field_path == "week.startDate"

    def test_missing_block_skipped(self, plan_weeks: tuple[Week, ...], make_context) -> None:
        assert self.rule.validate(plan_weeks[0], make_context()) is None
