"""Narrative generator: plain-English readout of revenue summaries.

Deltas smaller than $1 (or 0.1%) are shown as ``—``, the way the
comparison table renders them.
"""

from __future__ import annotations

from stackplan.engine.labels import floor_label
from stackplan.models.results import RevenueSummary, ScenarioComparison


def format_currency(amount: float) -> str:
    """Whole-dollar CAD figure: ``1234.6`` → ``$1,235``, ``-500`` → ``-$500``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_delta(amount: float) -> str:
    if abs(amount) < 1:
        return "—"
    return f"+{format_currency(amount)}" if amount > 0 else format_currency(amount)


def format_delta_pct(pct: float) -> str:
    if abs(pct) < 0.1:
        return "—"
    return f"{pct:+.1f}%"


def generate_narrative(summary: RevenueSummary, name: str = "Scenario") -> str:
    """Text block: headline revenue, delta, floor and plan-type breakdown, price bands."""
    sections: list[str] = []
    sections.append("=" * 60)
    sections.append(f"REVENUE SUMMARY — {name}")
    sections.append("=" * 60)
    sections.append(f"Total revenue:        {format_currency(summary.total_revenue)}")
    sections.append(f"Delta vs baseline:    {format_delta(summary.delta_from_baseline)}")
    sections.append(f"Delta %:              {format_delta_pct(summary.delta_percentage)}")

    if summary.per_floor_revenue:
        sections.append("\nRevenue by floor:")
        for floor, revenue in summary.per_floor_revenue.items():
            sections.append(f"  {floor_label(floor):20s} {format_currency(revenue):>16s}")

    if summary.per_plan_type_revenue:
        sections.append("\nRevenue by plan type:")
        for plan_type, revenue in summary.per_plan_type_revenue.items():
            sections.append(f"  {plan_type:20s} {format_currency(revenue):>16s}")

    sections.append("\nUnits by price range:")
    for label, count in summary.unit_count_by_price_range.items():
        sections.append(f"  {label:20s} {count:>6d}")

    return "\n".join(sections)


def generate_comparison_narrative(comparison: ScenarioComparison) -> str:
    """Ranked table of scenarios with revenue and delta vs baseline."""
    if not comparison.scenarios:
        return "No scenarios to compare."

    sections: list[str] = []
    sections.append("=" * 60)
    sections.append("SCENARIO COMPARISON")
    sections.append("=" * 60)
    sections.append(f"Comparing {len(comparison.scenarios)} scenarios:\n")

    by_id = {column.scenario_id: column for column in comparison.scenarios}
    header = f"{'Scenario':25s}  {'Revenue':>16s}  {'Delta':>14s}  {'Delta %':>8s}"
    sections.append(header)
    sections.append("-" * len(header))
    for scenario_id in comparison.ranking:
        column = by_id[scenario_id]
        name = f"{column.name} (baseline)" if column.is_baseline else column.name
        s = column.summary
        sections.append(
            f"{name:25s}  {format_currency(s.total_revenue):>16s}  "
            f"{format_delta(s.delta_from_baseline):>14s}  {format_delta_pct(s.delta_percentage):>8s}"
        )

    best = by_id[comparison.ranking[0]]
    sections.append(f"\nHighest revenue: {best.name} at {format_currency(best.summary.total_revenue)}")
    if comparison.baseline_id is None:
        sections.append("No baseline scenario is set; deltas are not computed.")

    return "\n".join(sections)
