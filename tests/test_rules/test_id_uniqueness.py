"""Tests for ID uniqueness rules (V02.1-V02.3)."""

from __future__ import annotations

from dataclasses import replace

import pytest

from season_validator.models.entities import Block, Season, Week
from season_validator.rules.critical.id_uniqueness import (
    BlockIdUniquenessRule,
    SeasonIdUniquenessRule,
    WeekIdUniquenessRule,
    _IdUniquenessRule,
)


class TestBlockIdUniquenessRule:
    def setup_method(self) -> None:
        self.rule = BlockIdUniquenessRule()

    def test_unique_ids_pass(self, base_block: Block, build_block: Block, make_context) -> None:
        context = make_context(blocks=[base_block, build_block])
        assert self.rule.validate(base_block, context) is None
        assert self.rule.validate(build_block, context) is None

    def test_each_duplicate_reported(self, base_block: Block, build_block: Block, make_context) -> None:
        twin = replace(build_block, block_id="block-base-1")
        context = make_context(blocks=[base_block, twin])

        first = self.rule.validate(base_block, context)
        second = self.rule.validate(twin, context)
        assert first is not None and second is not None
        assert first.field_path == "block.blockId"
        assert first.message == 'Duplicate block ID: "block-base-1" (found 2 times)'
        assert first.suggested_fix == "Use a unique block ID"
        assert second.entity_id == "block-base-1"


class TestSeasonIdUniquenessRule:
    def test_triplicate_count(self, spring_season: Season, make_context) -> None:
        rule = SeasonIdUniquenessRule()
        context = make_context(seasons=[spring_season] * 3)
        issue = rule.validate(spring_season, context)
        assert issue is not None
        assert issue.rule_id == "V02.1"
        assert issue.field_path == "season.seasonId"
        assert "(found 3 times)" in issue.message


class TestWeekIdUniquenessRule:
    def test_only_own_collection_counts(self, plan_weeks: tuple[Week, ...], make_context) -> None:
        rule = WeekIdUniquenessRule()
        context = make_context(weeks=plan_weeks)
        assert all(rule.validate(week, context) is None for week in plan_weeks)


class TestIdUniquenessBase:
    def test_collection_hook_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            _IdUniquenessRule()  # type: ignore[abstract]
