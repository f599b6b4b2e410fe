"""Shared test fixtures: a small six-floor building and common configs."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from stackplan.config import (
    Adjustment,
    AdjustmentKind,
    GlobalSettings,
    Rule,
    RuleCriteria,
)
from stackplan.models import Unit


@pytest.fixture
def make_unit() -> Callable[..., Unit]:
    """Factory for units already reset to their base price."""

    def _make(
        id: str = "U1",
        floor: str = "1",
        sqft: float = 1_000,
        base_price_per_sqft: float = 1_200,
        base_price: float | None = None,
        final_price: float | None = None,
        **fields,
    ) -> Unit:
        if base_price is None:
            base_price = base_price_per_sqft * sqft
        unit = Unit(
            id=id,
            floor=floor,
            sqft=sqft,
            base_price_per_sqft=base_price_per_sqft,
            base_price=base_price,
            **fields,
        ).reset()
        if final_price is not None:
            unit = unit.model_copy(update={"final_price": final_price})
        return unit

    return _make


@pytest.fixture
def building(make_unit) -> list[Unit]:
    """One unit per floor: Garden, 1-4, Penthouse: 1,000 sqft at $1,200/sqft."""
    floors = ["Garden", "1", "2", "3", "4", "Penthouse"]
    return [
        make_unit(
            id=f"U{i}",
            floor=floor,
            unit="01",
            plan_type="A" if i % 2 == 0 else "B",
            orientation="N" if i < 3 else "S",
            outdoor_sqft=0 if i < 3 else 150,
            bedrooms=2,
            bathrooms=2.0,
        )
        for i, floor in enumerate(floors)
    ]


@pytest.fixture
def building_floors() -> list[str]:
    return ["Garden", "1", "2", "3", "4", "Penthouse"]


@pytest.fixture
def settings() -> GlobalSettings:
    return GlobalSettings(min_price_per_sqft=1_100, max_price_per_sqft=1_900, rounding_rule=1_000)


@pytest.fixture
def unconstrained() -> GlobalSettings:
    """No clamp and no rounding: exposes raw adjustment arithmetic."""
    return GlobalSettings(min_price_per_sqft=0, max_price_per_sqft=0, rounding_rule=0)


@pytest.fixture
def five_percent_rule() -> Rule:
    return Rule(
        id="r-5pct",
        name="Uniform +5%",
        order=1,
        criteria=RuleCriteria(),
        adjustment=Adjustment(type=AdjustmentKind.PERCENTAGE, value=5),
    )
