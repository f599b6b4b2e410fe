"""Engine: pure pricing stages and the recompute entrypoint."""

from stackplan.engine.floors import floor_level, order_floors
from stackplan.engine.base_pricing import resolve_base_price
from stackplan.engine.list_pricing import apply_list_pricing
from stackplan.engine.rules import apply_rules
from stackplan.engine.constraints import apply_constraints, round_to_increment
from stackplan.engine.pipeline import recompute_non_baseline, recompute_scenario, recompute_units
from stackplan.engine.templates import build_list_pricing_template
from stackplan.engine.stacking import build_stacking_plan

__all__ = [
    "floor_level",
    "order_floors",
    "resolve_base_price",
    "apply_list_pricing",
    "apply_rules",
    "apply_constraints",
    "round_to_increment",
    "recompute_units",
    "recompute_scenario",
    "recompute_non_baseline",
    "build_list_pricing_template",
    "build_stacking_plan",
]
