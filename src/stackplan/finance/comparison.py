"""Cross-scenario comparison: every scenario's revenue against one baseline.

Floor and plan-type key sets differ between scenarios, so the comparison
unions them (floors in floor order, plan types sorted) and zero-fills each
scenario's breakdown over the union.
"""

from __future__ import annotations

import logging

from stackplan.config.scenario import Scenario
from stackplan.engine.floors import order_floors
from stackplan.finance.revenue import aggregate_revenue
from stackplan.models.results import RevenueSummary, ScenarioComparison, ScenarioRevenue

logger = logging.getLogger(__name__)


def find_baseline(scenarios: list[Scenario]) -> Scenario | None:
    """The single baseline scenario, or ``None``.

    Raises ``ValueError`` when more than one scenario is flagged.
    """
    baselines = [scenario for scenario in scenarios if scenario.is_baseline]
    if len(baselines) > 1:
        ids = ", ".join(scenario.id for scenario in baselines)
        raise ValueError(f"at most one baseline scenario is allowed, got {len(baselines)}: {ids}")
    return baselines[0] if baselines else None


def summarize_scenario(scenario: Scenario, baseline: Scenario | None) -> RevenueSummary:
    """RevenueSummary of one scenario against ``baseline`` (already priced)."""
    baseline_units = baseline.units if baseline is not None else None
    return aggregate_revenue(scenario.units, scenario.is_baseline, baseline_units)


def _zero_fill(values: dict[str, float], keys: list[str]) -> dict[str, float]:
    return {key: values.get(key, 0.0) for key in keys}


def compare_scenarios(scenarios: list[Scenario]) -> ScenarioComparison:
    """Side-by-side revenue of already-priced scenarios."""
    baseline = find_baseline(scenarios)
    if baseline is None and scenarios:
        logger.info("No baseline among %d scenarios; all deltas are 0", len(scenarios))

    floors = order_floors(unit.floor for scenario in scenarios for unit in scenario.units)
    plan_types = sorted({unit.plan_type for scenario in scenarios for unit in scenario.units})

    columns: list[ScenarioRevenue] = []
    for scenario in scenarios:
        summary = summarize_scenario(scenario, baseline)
        summary = summary.model_copy(update={
            "per_floor_revenue": _zero_fill(summary.per_floor_revenue, floors),
            "per_plan_type_revenue": _zero_fill(summary.per_plan_type_revenue, plan_types),
        })
        columns.append(ScenarioRevenue(
            scenario_id=scenario.id,
            name=scenario.name,
            is_baseline=scenario.is_baseline,
            summary=summary,
        ))

    ranking = [
        column.scenario_id
        for column in sorted(columns, key=lambda column: column.summary.total_revenue, reverse=True)
    ]

    return ScenarioComparison(
        baseline_id=baseline.id if baseline is not None else None,
        floors=floors,
        plan_types=plan_types,
        scenarios=columns,
        ranking=ranking,
    )
