"""Rule adjuster: ordered conditional adjustments on top of list pricing.

Rules run in ascending ``order``; each sees the price as accumulated by the
rules before it, so percentage rules compound.  A rule with a floor range
scales its value by the unit's 1-based level inside the range and skips
units outside it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from stackplan.config.rules import Rule, RuleCriteria
from stackplan.engine.floors import floor_level
from stackplan.models.enums import AdjustmentKind
from stackplan.models.unit import Premium, Unit

logger = logging.getLogger(__name__)

# (configured value, price so far, unit) → dollars, before the floor multiplier
_ADJUSTERS: dict[AdjustmentKind, Callable[[float, float, Unit], float]] = {
    AdjustmentKind.FIXED: lambda value, price, unit: value,
    AdjustmentKind.PERCENTAGE: lambda value, price, unit: price * (value / 100),
    AdjustmentKind.PER_SQFT: lambda value, price, unit: value * unit.sqft,
}

if set(_ADJUSTERS) != set(AdjustmentKind):
    raise RuntimeError("rule adjuster does not cover every AdjustmentKind")


def active_rules(rules: list[Rule]) -> list[Rule]:
    """Enabled rules in evaluation order (stable on ties)."""
    return sorted((rule for rule in rules if rule.enabled), key=lambda rule: rule.order)


def criteria_match(criteria: RuleCriteria, unit: Unit) -> bool:
    """All set clauses must pass.  The floor range is handled separately."""
    if criteria.plan_types and unit.plan_type not in criteria.plan_types:
        return False
    if criteria.orientations and unit.orientation not in criteria.orientations:
        return False
    if criteria.floors and unit.floor not in criteria.floors:
        return False
    if criteria.size_bands and not any(band.contains(unit.sqft) for band in criteria.size_bands):
        return False
    if criteria.outdoor_bands and not any(band.contains(unit.outdoor_sqft) for band in criteria.outdoor_bands):
        return False
    if criteria.bedroom_counts and unit.bedrooms not in criteria.bedroom_counts:
        return False
    if criteria.bathroom_counts and unit.bathrooms not in criteria.bathroom_counts:
        return False
    return True


def rule_multiplier(rule: Rule, unit: Unit, ordered_floors: list[str]) -> int:
    """How many times the rule applies to the unit: 0 = no match.

    1 for a plain matching rule; the floor level for a floor-range rule.
    """
    if not criteria_match(rule.criteria, unit):
        return 0
    floor_range = rule.criteria.floor_range
    if floor_range is None:
        return 1
    level = floor_level(unit.floor, floor_range.start_floor, floor_range.end_floor, ordered_floors)
    logger.debug(
        "Unit %s on floor %s: level %d in %s..%s",
        unit.id, unit.floor, level, floor_range.start_floor, floor_range.end_floor,
    )
    return level


def apply_rules(unit: Unit, rules: list[Rule], ordered_floors: list[str]) -> Unit:
    """Apply ``rules`` (already filtered and ordered by ``active_rules``) to one unit.

    ``ordered_floors`` is the floor order of the whole unit set being priced;
    floor ranges are resolved against it.
    """
    final_price = unit.final_price
    premiums = list(unit.premiums)

    for rule in rules:
        multiplier = rule_multiplier(rule, unit, ordered_floors)
        if multiplier == 0:
            continue

        kind = rule.adjustment.type
        amount = _ADJUSTERS[kind](rule.adjustment.value, final_price, unit) * multiplier
        if amount == 0:
            continue

        name = rule.name
        if rule.criteria.floor_range is not None and multiplier > 1:
            name = f"{rule.name} (Floor {unit.floor} - {multiplier}x)"
        premiums.append(Premium(
            id=rule.id,
            name=name,
            type=kind,
            value=rule.adjustment.value,
            amount=amount,
        ))
        final_price += amount
        logger.debug("Unit %s: rule %s (%s) %+g", unit.id, rule.id, kind.value, amount)

    return unit.model_copy(update={"final_price": final_price, "premiums": premiums})
