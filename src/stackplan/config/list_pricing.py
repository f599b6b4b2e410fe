"""Categorical list pricing: flat adjustments keyed by a unit attribute value."""

from pydantic import BaseModel, Field

from stackplan.models.enums import ListPricingCategory


class ListPricingItem(BaseModel):
    """One list-pricing entry.

    ``value`` is always a string: plan/orientation/floor labels as-is,
    bedroom and bathroom counts as numbers (``"2"``, ``"1.5"``), and size or
    outdoor bands encoded as ``"{min}-{max}"``.  An adjustment of exactly 0
    is a placeholder and never applies.
    """

    category: ListPricingCategory
    value: str
    adjustment: float = Field(
        default=0.0,
        description="Dollars added to the price, or $/sqft for the two base-pricing categories",
    )
