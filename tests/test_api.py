"""Tests for the HTTP layer and narrative text."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from stackplan.api.narrative import (
    format_currency,
    format_delta,
    format_delta_pct,
    generate_comparison_narrative,
    generate_narrative,
)
from stackplan.api.server import _deep_merge, app
from stackplan.finance.comparison import compare_scenarios
from stackplan.finance.revenue import aggregate_revenue


client = TestClient(app)


def _unit(id: str, floor: str = "1", sqft: float = 1_000, base_price: float = 1_200_000, **fields) -> dict:
    return {"id": id, "floor": floor, "sqft": sqft, "base_price": base_price, **fields}


FIVE_PERCENT = {"id": "r5", "name": "Plus 5%", "adjustment": {"type": "percentage", "value": 5}}


class TestEndpoints:
    """Request/response round trips through FastAPI."""

    def test_health(self):
        assert client.get("/health").json() == {"status": "ok"}

    def test_schema(self):
        schema = client.get("/schema").json()
        assert "units" in schema["properties"]

    def test_default_settings(self):
        assert client.get("/settings/defaults").json()["rounding_rule"] == 1_000

    def test_recompute(self):
        resp = client.post("/recompute", json={
            "units": [_unit("a"), _unit("b", sqft=800, base_price=900_000)],
            "rules": [FIVE_PERCENT],
        })
        assert resp.status_code == 200
        units = resp.json()["units"]
        assert [u["final_price"] for u in units] == [1_260_000, 945_000]
        assert units[0]["premiums"][0]["id"] == "r5"

    def test_recompute_rejects_zero_sqft(self):
        resp = client.post("/recompute", json={"units": [_unit("a", sqft=0)]})
        assert resp.status_code == 422

    def test_aggregate(self):
        resp = client.post("/aggregate", json={
            "units": [_unit("a", final_price=1_260_000), _unit("b", final_price=945_000)],
            "baseline_units": [_unit("a", final_price=1_200_000), _unit("b", final_price=900_000)],
        })
        body = resp.json()
        assert body["total_revenue"] == 2_205_000
        assert body["delta_from_baseline"] == 105_000
        assert body["delta_percentage"] == pytest.approx(5.0)

    def test_recompute_scenario_partial(self):
        resp = client.post("/recompute/scenario", json={
            "scenario": {"units": [_unit("a")], "global_settings": {"rounding_rule": 0}},
        })
        body = resp.json()
        assert body["scenario"]["global_settings"]["max_price_per_sqft"] == 1_900
        assert body["revenue_summary"]["total_revenue"] == 1_200_000

    def test_recompute_scenario_invalid(self):
        resp = client.post("/recompute/scenario", json={"scenario": {"global_settings": {"rounding_rule": -5}}})
        assert resp.status_code == 422

    def test_compare(self):
        units = [_unit("a"), _unit("b", sqft=800, base_price=900_000)]
        resp = client.post("/compare", json={"scenarios": [
            {"id": "base", "name": "Baseline", "is_baseline": True, "units": units},
            {"id": "alt", "name": "Plus five", "rules": [FIVE_PERCENT], "units": units},
        ]})
        assert resp.status_code == 200
        body = resp.json()
        assert body["comparison"]["ranking"] == ["alt", "base"]
        assert "SCENARIO COMPARISON" in body["narrative"]

    def test_compare_two_baselines_rejected(self):
        resp = client.post("/compare", json={"scenarios": [
            {"id": "a", "is_baseline": True},
            {"id": "b", "is_baseline": True},
        ]})
        assert resp.status_code == 422

    def test_template(self):
        resp = client.post("/template", json={"units": [_unit("a", plan_type="A")]})
        items = resp.json()
        assert {"category": "planType", "value": "A", "adjustment": 0.0} in items

    def test_stacking(self):
        resp = client.post("/stacking", json={"units": [_unit("a", floor="Garden"), _unit("b", floor="Penthouse")]})
        assert [s["floor"] for s in resp.json()] == ["Penthouse", "Garden"]

    def test_narrative(self):
        resp = client.post("/narrative", json={"scenario": {"name": "Tower", "units": [_unit("a")]}})
        body = resp.json()
        assert "REVENUE SUMMARY — Tower" in body["narrative"]
        assert body["headline_metrics"]["unit_count"] == 1


class TestDeepMerge:
    def test_nested_merge(self):
        base = {"global_settings": {"min_price_per_sqft": 1_100, "rounding_rule": 1_000}, "name": "x"}
        _deep_merge(base, {"global_settings": {"rounding_rule": 500}})
        assert base["global_settings"] == {"min_price_per_sqft": 1_100, "rounding_rule": 500}

    def test_lists_are_replaced(self):
        base = {"units": [1, 2]}
        assert _deep_merge(base, {"units": [3]}) == {"units": [3]}


class TestNarrative:
    """Plain-English formatting."""

    def test_currency(self):
        assert format_currency(1_234_567.6) == "$1,234,568"
        assert format_currency(-500) == "-$500"

    def test_small_deltas_render_as_dash(self):
        assert format_delta(0.4) == "—"
        assert format_delta_pct(0.05) == "—"
        assert format_delta(105_000) == "+$105,000"
        assert format_delta_pct(-5.04) == "-5.0%"

    def test_single_summary(self, make_unit):
        summary = aggregate_revenue([make_unit(floor="Garden", plan_type="A", final_price=1_200_000)])
        text = generate_narrative(summary, "Tower")
        assert "Garden Level" in text
        assert "$1,200,000" in text

    def test_comparison_without_baseline(self, make_unit):
        from stackplan.config import Scenario

        comparison = compare_scenarios([Scenario(id="s", name="Solo", units=[make_unit()])])
        text = generate_comparison_narrative(comparison)
        assert "Highest revenue: Solo" in text
        assert "No baseline scenario is set" in text

    def test_empty_comparison(self):
        assert generate_comparison_narrative(compare_scenarios([])) == "No scenarios to compare."
