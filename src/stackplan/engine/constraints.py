"""Constraint & rounding stage: $/sqft clamp, then round to the increment."""

from __future__ import annotations

import math

from stackplan.config.settings import GlobalSettings
from stackplan.models.unit import Unit


def round_to_increment(price: float, increment: float) -> float:
    """Round half-up to a multiple of ``increment`` (no-op when it is 0)."""
    if not increment:
        return price
    return math.floor(price / increment + 0.5) * increment


def clamp_price(price: float, sqft: float, settings: GlobalSettings, base_override: bool = False) -> float:
    """Force ``price`` into the settings' $/sqft band.

    Both bounds are tested against the incoming $/sqft.  The minimum is not
    enforced when the unit's base price came from a base-pricing override;
    the maximum always is.
    """
    price_per_sqft = price / sqft
    clamped = price
    if not base_override and settings.min_price_per_sqft and price_per_sqft < settings.min_price_per_sqft:
        clamped = settings.min_price_per_sqft * sqft
    if settings.max_price_per_sqft and price_per_sqft > settings.max_price_per_sqft:
        clamped = settings.max_price_per_sqft * sqft
    return clamped


def apply_constraints(unit: Unit, settings: GlobalSettings, base_override: bool = False) -> Unit:
    """Clamp, round and derive the final $/sqft for one unit."""
    price = clamp_price(unit.final_price, unit.sqft, settings, base_override)
    price = round_to_increment(price, settings.rounding_rule)
    return unit.model_copy(update={
        "final_price": price,
        "final_price_per_sqft": price / unit.sqft,
    })
