"""Closed vocabularies shared by rules, list pricing and the engine."""

from __future__ import annotations

from enum import Enum


class AdjustmentKind(str, Enum):
    """How a rule's configured value turns into a dollar amount."""

    FIXED = "fixed"
    PERCENTAGE = "percentage"
    PER_SQFT = "per_sqft"


class ListPricingCategory(str, Enum):
    """Unit attribute a list-pricing entry is keyed by.

    Member order is the processing order of the list pricing stage, so
    premiums come out in the same order on every pass.  The two base pricing
    categories carry a $/sqft replacement instead of a dollar adjustment.
    """

    BASE_PRICING_PLAN = "basePricingPlan"
    BASE_PRICING_FLOOR = "basePricingFloor"
    PLAN_TYPE = "planType"
    ORIENTATION = "orientation"
    FLOOR = "floor"
    BEDROOMS = "bedrooms"
    BATHROOMS = "bathrooms"
    SQFT = "sqft"
    OUTDOOR = "outdoor"

    @property
    def is_base_pricing(self) -> bool:
        return self in (ListPricingCategory.BASE_PRICING_PLAN, ListPricingCategory.BASE_PRICING_FLOOR)


class BasePricingMode(str, Enum):
    """Which unit attribute base-pricing overrides are keyed by."""

    PLAN = "plan"
    FLOOR = "floor"
