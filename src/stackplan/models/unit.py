"""Unit and premium records: the rows the engine prices."""

from __future__ import annotations

from pydantic import BaseModel, Field

from stackplan.models.enums import AdjustmentKind


class Premium(BaseModel):
    """One itemized adjustment on a unit's price.

    Transient: rebuilt from scratch on every pricing pass.
    """

    id: str
    """``rule.id`` for rules, ``list-{category}-{value}`` for list pricing."""

    name: str
    type: AdjustmentKind
    value: float
    """The configured value (dollars, percent or $/sqft)."""

    amount: float
    """Dollars actually added to the price."""


class Unit(BaseModel):
    """One sellable unit.

    ``sqft`` must be positive; prices are divided by it, so records with a
    zero or missing area are rejected when the unit is built.
    """

    id: str
    floor: str
    unit: str = ""
    plan_type: str = ""
    sqft: float = Field(gt=0, description="Interior area (sqft)")
    orientation: str = ""
    outdoor_sqft: float = Field(default=0.0, ge=0)
    bedrooms: int = Field(default=0, ge=0)
    bathrooms: float = Field(default=0.0, ge=0, description="Half-baths allowed, e.g. 1.5")
    base_price_per_sqft: float = 0.0
    base_price: float = 0.0

    # --- Computed by the engine ---
    final_price: float = 0.0
    final_price_per_sqft: float = 0.0
    premiums: list[Premium] = Field(default_factory=list)

    def reset(self) -> Unit:
        """Copy with the computed fields put back to the imported base price."""
        return self.model_copy(update={
            "final_price": self.base_price,
            "final_price_per_sqft": self.base_price_per_sqft,
            "premiums": [],
        })
