"""List-pricing template: one placeholder entry per category value in a unit set.

The rule builder shows this template for editing.  Size and outdoor space
are split into five equal-width bands between the smallest and largest
value; outdoor space collapses to a single band when every unit has the
same amount.
"""

from __future__ import annotations

import math

from stackplan.config.list_pricing import ListPricingItem
from stackplan.engine.floors import order_floors
from stackplan.engine.labels import plain_number
from stackplan.models.enums import ListPricingCategory
from stackplan.models.unit import Unit

BAND_COUNT = 5


def equal_width_bands(values: list[float], count: int = BAND_COUNT) -> list[tuple[float, float]]:
    """``count`` contiguous integer bands covering ``min(values)..max(values)``.

    A single band when all values are equal.  Whole-number values get
    disjoint bands (``800-899``, ``900-999``); when any value is fractional
    each band ends where the next begins, so a value such as ``899.5``
    still falls inside one.
    """
    if not values:
        return []
    low, high = min(values), max(values)
    if low == high:
        return [(low, high)]
    gap = 1 if all(float(value).is_integer() for value in values) else 0
    step = (high - low) / count
    starts = [math.floor(low + step * i) for i in range(count)]
    bands: list[tuple[float, float]] = []
    for i, band_min in enumerate(starts):
        band_max = high if i == count - 1 else max(band_min, starts[i + 1] - gap)
        bands.append((band_min, band_max))
    return bands


def _band_value(band: tuple[float, float]) -> str:
    return f"{plain_number(band[0])}-{plain_number(band[1])}"


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def build_list_pricing_template(
    units: list[Unit],
    existing: list[ListPricingItem] | None = None,
) -> list[ListPricingItem]:
    """Full placeholder set for ``units``, keeping adjustments from ``existing``."""
    if not units:
        return []

    plan_types = _unique([unit.plan_type for unit in units])
    floors = order_floors(unit.floor for unit in units)
    orientations = _unique([unit.orientation for unit in units])
    bedrooms = sorted({unit.bedrooms for unit in units})
    bathrooms = sorted({unit.bathrooms for unit in units})
    size_bands = equal_width_bands([unit.sqft for unit in units])
    outdoor_bands = equal_width_bands([unit.outdoor_sqft for unit in units])

    values: dict[ListPricingCategory, list[str]] = {
        ListPricingCategory.BASE_PRICING_PLAN: plan_types,
        ListPricingCategory.BASE_PRICING_FLOOR: floors,
        ListPricingCategory.PLAN_TYPE: plan_types,
        ListPricingCategory.ORIENTATION: orientations,
        ListPricingCategory.FLOOR: floors,
        ListPricingCategory.BEDROOMS: [plain_number(count) for count in bedrooms],
        ListPricingCategory.BATHROOMS: [plain_number(count) for count in bathrooms],
        ListPricingCategory.SQFT: _unique([_band_value(band) for band in size_bands]),
        ListPricingCategory.OUTDOOR: _unique([_band_value(band) for band in outdoor_bands]),
    }

    kept = {(item.category, item.value): item.adjustment for item in existing or []}
    return [
        ListPricingItem(category=category, value=value, adjustment=kept.get((category, value), 0.0))
        for category in ListPricingCategory
        for value in values[category]
    ]
