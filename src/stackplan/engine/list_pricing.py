"""List pricing adjuster: flat dollar adjustments keyed by unit attributes.

Every active entry whose category value matches the unit adds its
adjustment to ``final_price`` and records a fixed Premium.  Entries are
processed category by category in ``ListPricingCategory`` order, then in
configuration order, so premiums come out the same way on every pass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from stackplan.config.list_pricing import ListPricingItem
from stackplan.engine.labels import count_label, outdoor_band_label, size_band_label
from stackplan.models.enums import AdjustmentKind, ListPricingCategory
from stackplan.models.unit import Premium, Unit

logger = logging.getLogger(__name__)


def parse_band(value: str) -> tuple[float, float] | None:
    """``"800-1200"`` → ``(800.0, 1200.0)``; ``None`` if malformed."""
    parts = value.split("-")
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def _matches_int(value: str, actual: float) -> bool:
    """Integer equality; ``"2"`` and ``"2.0"`` both match two."""
    try:
        parsed = float(value)
    except ValueError:
        return False
    return parsed.is_integer() and actual == parsed


def _matches_float(value: str, actual: float) -> bool:
    try:
        return actual == float(value)
    except ValueError:
        return False


def _in_band(value: str, actual: float) -> bool:
    band = parse_band(value)
    return band is not None and band[0] <= actual <= band[1]


def _band_name(value: str, labeller: Callable[[float, float], str]) -> str:
    band = parse_band(value)
    return labeller(*band) if band is not None else value


_MATCHERS: dict[ListPricingCategory, Callable[[str, Unit], bool]] = {
    ListPricingCategory.PLAN_TYPE: lambda value, unit: unit.plan_type == value,
    ListPricingCategory.ORIENTATION: lambda value, unit: unit.orientation == value,
    ListPricingCategory.FLOOR: lambda value, unit: unit.floor == value,
    ListPricingCategory.BEDROOMS: lambda value, unit: _matches_int(value, unit.bedrooms),
    ListPricingCategory.BATHROOMS: lambda value, unit: _matches_float(value, unit.bathrooms),
    ListPricingCategory.SQFT: lambda value, unit: _in_band(value, unit.sqft),
    ListPricingCategory.OUTDOOR: lambda value, unit: _in_band(value, unit.outdoor_sqft),
}

_NAMERS: dict[ListPricingCategory, Callable[[str], str]] = {
    ListPricingCategory.PLAN_TYPE: lambda value: f"Plan Type: {value}",
    ListPricingCategory.ORIENTATION: lambda value: f"Orientation: {value}",
    ListPricingCategory.FLOOR: lambda value: f"Floor: {value}",
    ListPricingCategory.BEDROOMS: lambda value: count_label(value, "Bedroom"),
    ListPricingCategory.BATHROOMS: lambda value: count_label(value, "Bathroom"),
    ListPricingCategory.SQFT: lambda value: _band_name(value, size_band_label),
    ListPricingCategory.OUTDOOR: lambda value: _band_name(value, outdoor_band_label),
}

_ADJUSTMENT_CATEGORIES = [c for c in ListPricingCategory if not c.is_base_pricing]
if set(_MATCHERS) != set(_ADJUSTMENT_CATEGORIES) or set(_NAMERS) != set(_ADJUSTMENT_CATEGORIES):
    raise RuntimeError("list pricing adjuster does not cover every ListPricingCategory")


def active_list_items(list_pricing: list[ListPricingItem]) -> list[ListPricingItem]:
    """Non-base, non-zero entries in processing order."""
    rank = {category: i for i, category in enumerate(ListPricingCategory)}
    active = [
        item for item in list_pricing
        if not item.category.is_base_pricing and item.adjustment != 0
    ]
    return sorted(active, key=lambda item: rank[item.category])


def list_item_matches(item: ListPricingItem, unit: Unit) -> bool:
    return _MATCHERS[item.category](item.value, unit)


def apply_list_pricing(unit: Unit, items: list[ListPricingItem]) -> Unit:
    """Add every matching list-pricing adjustment to the unit.

    ``items`` must already be filtered and ordered by ``active_list_items``.
    """
    final_price = unit.final_price
    premiums = list(unit.premiums)

    for item in items:
        if not list_item_matches(item, unit):
            continue
        premiums.append(Premium(
            id=f"list-{item.category.value}-{item.value}",
            name=_NAMERS[item.category](item.value),
            type=AdjustmentKind.FIXED,
            value=item.adjustment,
            amount=item.adjustment,
        ))
        final_price += item.adjustment
        logger.debug("Unit %s: list pricing %s=%r %+g", unit.id, item.category.value, item.value, item.adjustment)

    return unit.model_copy(update={"final_price": final_price, "premiums": premiums})
