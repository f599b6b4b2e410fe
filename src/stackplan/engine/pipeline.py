"""Recompute entrypoint: base pricing → list pricing → rules → constraints.

Every pass starts from the imported base prices with no premiums, so a
scenario can be re-priced from scratch after any edit without double
counting earlier adjustments.

Entry points:
  - ``recompute_units(units, rules, list_pricing, settings, mode)``
  - ``recompute_scenario(scenario)``
  - ``recompute_non_baseline(scenarios, units)``: after a unit import
"""

from __future__ import annotations

import logging

from stackplan.config.list_pricing import ListPricingItem
from stackplan.config.rules import Rule
from stackplan.config.scenario import Scenario
from stackplan.config.settings import GlobalSettings
from stackplan.engine.base_pricing import resolve_base_price
from stackplan.engine.constraints import apply_constraints
from stackplan.engine.floors import order_floors
from stackplan.engine.list_pricing import active_list_items, apply_list_pricing
from stackplan.engine.rules import active_rules, apply_rules
from stackplan.models.enums import BasePricingMode
from stackplan.models.unit import Unit

logger = logging.getLogger(__name__)


def recompute_units(
    units: list[Unit],
    rules: list[Rule],
    list_pricing: list[ListPricingItem],
    settings: GlobalSettings,
    base_pricing_mode: BasePricingMode = BasePricingMode.PLAN,
) -> list[Unit]:
    """Price every unit and return new records with fresh premiums.

    The inputs are not modified.
    """
    ordered_floors = order_floors(unit.floor for unit in units)
    list_items = active_list_items(list_pricing)
    ordered_rules = active_rules(rules)

    priced: list[Unit] = []
    for unit in units:
        current, base_override = resolve_base_price(unit.reset(), list_pricing, base_pricing_mode)
        current = apply_list_pricing(current, list_items)
        current = apply_rules(current, ordered_rules, ordered_floors)
        current = apply_constraints(current, settings, base_override)
        priced.append(current)

    logger.debug(
        "Priced %d units (%d list items, %d rules, %d floors)",
        len(priced), len(list_items), len(ordered_rules), len(ordered_floors),
    )
    return priced


def recompute_scenario(scenario: Scenario, units: list[Unit] | None = None) -> Scenario:
    """Copy of ``scenario`` with its units re-priced from its own configuration.

    ``units`` replaces the scenario's unit list when given.
    """
    source = scenario.units if units is None else units
    priced = recompute_units(
        source,
        scenario.rules,
        scenario.list_pricing,
        scenario.global_settings,
        scenario.base_pricing_mode,
    )
    return scenario.model_copy(update={"units": priced})


def recompute_non_baseline(scenarios: list[Scenario], units: list[Unit]) -> list[Scenario]:
    """Re-price every non-baseline scenario against a freshly imported unit list.

    Baseline scenarios take the new units at their base prices, with no
    premiums and no constraint pass.
    """
    updated: list[Scenario] = []
    for scenario in scenarios:
        if scenario.is_baseline:
            updated.append(scenario.model_copy(update={"units": [unit.reset() for unit in units]}))
            continue
        logger.info("Recomputing scenario %s (%s) for %d imported units", scenario.id, scenario.name, len(units))
        updated.append(recompute_scenario(scenario, units))
    return updated
