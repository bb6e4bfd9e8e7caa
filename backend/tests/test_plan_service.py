"""Tests for the plan engine: level thresholds, catalog filtering and score parsing."""

import pytest

from errors import ValidationError
from services.catalog_service import WELLNESS_CATALOG
from services.plan_service import build_plan, classify_level, parse_score


class TestClassifyLevel:
    @pytest.mark.parametrize(
        "score, level",
        [
            (-20, "low"),
            (0, "low"),
            (4, "low"),
            (5, "moderate"),
            (9, "moderate"),
            (10, "high"),
            (1_000_000, "high"),
        ],
    )
    def test_thresholds(self, score, level):
        assert classify_level(score) == level


class TestParseScore:
    def test_plain_integer(self):
        assert parse_score("12") == 12

    def test_sign_and_whitespace(self):
        assert parse_score(" -3 ") == -3
        assert parse_score("+7") == 7

    @pytest.mark.parametrize("raw", ["", "abc", "7.5", "12abc", "0x10", "1_0", "\u0661\u0662", "--3"])
    def test_rejects_non_integers(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            parse_score(raw)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid score"


class TestBuildPlan:
    def test_high_level_picks_first_three_matches(self):
        plan = build_plan(12, WELLNESS_CATALOG)
        assert plan["level"] == "high"
        assert plan["score"] == 12
        # 6 (high) also qualifies but is past the cap
        assert [r["id"] for r in plan["recommendations"]] == [1, 2, 4]

    def test_low_level_includes_entries_tagged_low(self):
        plan = build_plan(0, WELLNESS_CATALOG)
        assert plan["level"] == "low"
        # 3 (low, mild), 4 (all), 5 (moderate, low)
        assert [r["id"] for r in plan["recommendations"]] == [3, 4, 5]

    def test_moderate_level(self):
        plan = build_plan(7, WELLNESS_CATALOG)
        assert plan["level"] == "moderate"
        assert [r["id"] for r in plan["recommendations"]] == [1, 4, 5]

    @pytest.mark.parametrize("score", [-5, 0, 5, 9, 10, 99])
    def test_full_table_is_unfiltered(self, score):
        plan = build_plan(score, WELLNESS_CATALOG)
        assert plan["fullTable"] == WELLNESS_CATALOG
        assert len(plan["recommendations"]) <= 3

    def test_mild_is_never_a_computed_level(self):
        # Entries tagged only "mild" or "all" are reachable solely through "all"
        catalog = [
            {"id": 1, "activity": "a", "source": "s", "priority": ["mild"]},
            {"id": 2, "activity": "b", "source": "s", "priority": ["all"]},
        ]
        for score in (0, 6, 11):
            assert [r["id"] for r in build_plan(score, catalog)["recommendations"]] == [2]

    def test_empty_catalog(self):
        plan = build_plan(3, [])
        assert plan["recommendations"] == []
        assert plan["fullTable"] == []
