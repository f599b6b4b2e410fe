"""Tests for finance/comparison.py: revenue across scenarios."""

from __future__ import annotations

import pytest

from stackplan.config import Scenario
from stackplan.finance.comparison import compare_scenarios, find_baseline


@pytest.fixture
def scenarios(make_unit):
    base = Scenario(
        id="base",
        name="Baseline",
        is_baseline=True,
        units=[
            make_unit(id="1", floor="1", plan_type="A", final_price=1_000_000),
            make_unit(id="2", floor="2", plan_type="A", final_price=1_000_000),
        ],
    )
    alt = Scenario(
        id="alt",
        name="Premium view",
        units=[
            make_unit(id="1", floor="2", plan_type="B", final_price=1_300_000),
            make_unit(id="2", floor="3", plan_type="A", final_price=1_200_000),
        ],
    )
    return [alt, base]


def test_more_than_one_baseline_rejected(scenarios):
    flagged = [s.model_copy(update={"is_baseline": True}) for s in scenarios]
    with pytest.raises(ValueError, match="at most one baseline"):
        find_baseline(flagged)


def test_deltas_against_the_baseline(scenarios):
    comparison = compare_scenarios(scenarios)
    by_id = {c.scenario_id: c.summary for c in comparison.scenarios}
    assert comparison.baseline_id == "base"
    assert by_id["base"].delta_from_baseline == 0
    assert by_id["alt"].delta_from_baseline == 500_000
    assert by_id["alt"].delta_percentage == pytest.approx(25.0)


def test_key_sets_are_unioned_and_zero_filled(scenarios):
    comparison = compare_scenarios(scenarios)
    assert comparison.floors == ["1", "2", "3"]
    assert comparison.plan_types == ["A", "B"]
    by_id = {c.scenario_id: c.summary for c in comparison.scenarios}
    assert by_id["base"].per_floor_revenue == {"1": 1_000_000, "2": 1_000_000, "3": 0}
    assert by_id["alt"].per_floor_revenue == {"1": 0, "2": 1_300_000, "3": 1_200_000}
    assert by_id["base"].per_plan_type_revenue == {"A": 2_000_000, "B": 0}


def test_ranking_by_total_revenue(scenarios):
    assert compare_scenarios(scenarios).ranking == ["alt", "base"]


def test_without_baseline_all_deltas_zero(scenarios):
    unflagged = [s.model_copy(update={"is_baseline": False}) for s in scenarios]
    comparison = compare_scenarios(unflagged)
    assert comparison.baseline_id is None
    assert all(c.summary.delta_from_baseline == 0 for c in comparison.scenarios)


def test_empty_comparison():
    comparison = compare_scenarios([])
    assert comparison.scenarios == []
    assert comparison.ranking == []
