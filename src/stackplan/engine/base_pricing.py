"""Base pricing resolver: category overrides of a unit's starting $/sqft."""

from __future__ import annotations

import logging
from collections.abc import Callable

from stackplan.config.list_pricing import ListPricingItem
from stackplan.models.enums import BasePricingMode, ListPricingCategory
from stackplan.models.unit import Unit

logger = logging.getLogger(__name__)

# mode → (category the override lives in, unit attribute it is keyed by)
_OVERRIDE_KEYS: dict[BasePricingMode, tuple[ListPricingCategory, Callable[[Unit], str]]] = {
    BasePricingMode.PLAN: (ListPricingCategory.BASE_PRICING_PLAN, lambda unit: unit.plan_type),
    BasePricingMode.FLOOR: (ListPricingCategory.BASE_PRICING_FLOOR, lambda unit: unit.floor),
}

if set(_OVERRIDE_KEYS) != set(BasePricingMode):
    raise RuntimeError("base pricing resolver does not cover every BasePricingMode")


def find_base_override(
    unit: Unit,
    list_pricing: list[ListPricingItem],
    mode: BasePricingMode,
) -> ListPricingItem | None:
    """The base-pricing entry that applies to ``unit``, if any.

    Only strictly positive entries in the active mode's category count.
    When several match, the last one wins and a warning is logged.
    """
    category, attribute = _OVERRIDE_KEYS[mode]
    key = attribute(unit)
    matches = [
        item for item in list_pricing
        if item.category == category and item.value == key and item.adjustment > 0
    ]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "Unit %s: %d %s entries match %r; using the last ($%s/sqft)",
            unit.id, len(matches), category.value, key, matches[-1].adjustment,
        )
    return matches[-1]


def resolve_base_price(
    unit: Unit,
    list_pricing: list[ListPricingItem],
    mode: BasePricingMode,
) -> tuple[Unit, bool]:
    """Apply any base-pricing override to a reset unit.

    Returns the (possibly re-based) unit and whether an override applied.
    An override replaces both base figures and restarts ``final_price``
    from the new base price.
    """
    override = find_base_override(unit, list_pricing, mode)
    if override is None:
        return unit, False

    base_price = override.adjustment * unit.sqft
    logger.debug(
        "Unit %s: base pricing %s=%r → $%s/sqft, base price %s",
        unit.id, override.category.value, override.value, override.adjustment, base_price,
    )
    return unit.model_copy(update={
        "base_price_per_sqft": override.adjustment,
        "base_price": base_price,
        "final_price": base_price,
    }), True
