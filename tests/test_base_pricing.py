"""Tests for engine/base_pricing.py: category overrides of the base price."""

from __future__ import annotations

import logging

from stackplan.config import BasePricingMode, ListPricingCategory, ListPricingItem
from stackplan.engine.base_pricing import find_base_override, resolve_base_price


def _plan_item(value: str, adjustment: float) -> ListPricingItem:
    return ListPricingItem(category=ListPricingCategory.BASE_PRICING_PLAN, value=value, adjustment=adjustment)


def _floor_item(value: str, adjustment: float) -> ListPricingItem:
    return ListPricingItem(category=ListPricingCategory.BASE_PRICING_FLOOR, value=value, adjustment=adjustment)


def test_plan_override_replaces_base_and_final(make_unit):
    unit = make_unit(plan_type="A", sqft=1_000, base_price_per_sqft=1_200)
    priced, applied = resolve_base_price(unit, [_plan_item("A", 1_500)], BasePricingMode.PLAN)
    assert applied is True
    assert priced.base_price_per_sqft == 1_500
    assert priced.base_price == 1_500_000
    assert priced.final_price == 1_500_000


def test_floor_override_in_floor_mode(make_unit):
    unit = make_unit(floor="3", sqft=800)
    priced, applied = resolve_base_price(unit, [_floor_item("3", 1_300)], BasePricingMode.FLOOR)
    assert applied is True
    assert priced.base_price == 1_300 * 800


def test_inactive_mode_entries_ignored(make_unit):
    unit = make_unit(plan_type="A", floor="3")
    items = [_plan_item("A", 1_500)]
    priced, applied = resolve_base_price(unit, items, BasePricingMode.FLOOR)
    assert applied is False
    assert priced == unit


def test_zero_and_negative_entries_are_placeholders(make_unit):
    unit = make_unit(plan_type="A")
    for adjustment in (0, -100):
        priced, applied = resolve_base_price(unit, [_plan_item("A", adjustment)], BasePricingMode.PLAN)
        assert applied is False
        assert priced.base_price == unit.base_price


def test_no_match_keeps_imported_base(make_unit):
    unit = make_unit(plan_type="B")
    priced, applied = resolve_base_price(unit, [_plan_item("A", 1_500)], BasePricingMode.PLAN)
    assert applied is False
    assert priced.base_price == 1_200_000


def test_duplicate_matches_last_wins_and_warns(make_unit, caplog):
    unit = make_unit(id="dup", plan_type="A")
    items = [_plan_item("A", 1_400), _plan_item("A", 1_600)]
    with caplog.at_level(logging.WARNING, logger="stackplan.engine.base_pricing"):
        override = find_base_override(unit, items, BasePricingMode.PLAN)
    assert override is not None
    assert override.adjustment == 1_600
    assert "dup" in caplog.text
