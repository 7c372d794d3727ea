"""Tests for BlockWeekCountRule (V14)."""

from __future__ import annotations

from dataclasses import replace

from season_validator.models.entities import Block, Week
from season_validator.models.enums import Severity, ValidationMode
from season_validator.rules.info.block_week_count import BlockWeekCountRule


class TestBlockWeekCountRule:
    def setup_method(self) -> None:
        self.rule = BlockWeekCountRule()

    def test_only_runs_on_load(self) -> None:
        assert self.rule.severity == Severity.INFO
        assert self.rule.applies_to(ValidationMode.LOAD)
        assert not self.rule.applies_to(ValidationMode.PUBLISH)
        assert not self.rule.applies_to(ValidationMode.SAVE)

    def test_counts_agree(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        context = make_context(weeks=plan_weeks, mode=ValidationMode.LOAD)
        assert self.rule.validate(base_block, context) is None

    def test_counts_disagree(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        block = replace(base_block, week_ids=("week-1", "week-2", "week-3"))
        context = make_context(weeks=plan_weeks, mode=ValidationMode.LOAD)
        issue = self.rule.validate(block, context)
        assert issue is not None
        assert issue.field_path == "block.weekIds"
        assert issue.message == (
            'Block "block-base-1" lists 3 weekIds but 2 weeks reference this block.'
        )

    def test_no_week_ids_counts_as_zero(
        self, base_block: Block, plan_weeks: tuple[Week, ...], make_context
    ) -> None:
        block = replace(base_block, week_ids=None)
        issue = self.rule.validate(block, make_context(weeks=plan_weeks))
        assert issue is not None
        assert "lists 0 weekIds but 2 weeks" in issue.message
