"""Revenue aggregation: totals, baseline delta and breakdowns for one scenario.

  total_revenue      = Σ final_price
  delta_from_baseline = total_revenue − baseline total   (0 for the baseline)
  delta_percentage    = delta / baseline total × 100     (0 if baseline total ≤ 0)

Floor and plan-type breakdowns only contain keys present in this scenario's
units; a comparison view unions them across scenarios.
"""

from __future__ import annotations

import numpy as np

from stackplan.engine.floors import order_floors
from stackplan.models.results import PRICE_BAND_EDGES, PRICE_BAND_LABELS, RevenueSummary
from stackplan.models.unit import Unit


def total_revenue(units: list[Unit]) -> float:
    return float(sum(unit.final_price for unit in units))


def revenue_by_floor(units: list[Unit]) -> dict[str, float]:
    """Revenue per floor, keys in floor order."""
    floors = order_floors(unit.floor for unit in units)
    totals = {floor: 0.0 for floor in floors}
    for unit in units:
        totals[unit.floor] += unit.final_price
    return totals


def revenue_by_plan_type(units: list[Unit]) -> dict[str, float]:
    """Revenue per plan type, keys sorted."""
    totals = {plan_type: 0.0 for plan_type in sorted({unit.plan_type for unit in units})}
    for unit in units:
        totals[unit.plan_type] += unit.final_price
    return totals


def count_by_price_band(units: list[Unit]) -> dict[str, int]:
    """Unit counts in the four fixed price bands.

    Lower edges are inclusive: a $1,000,000 unit lands in ``$1M-$1.5M``.
    """
    prices = np.array([unit.final_price for unit in units], dtype=float)
    band_index = np.digitize(prices, PRICE_BAND_EDGES)
    counts = np.bincount(band_index, minlength=len(PRICE_BAND_LABELS))
    return {label: int(count) for label, count in zip(PRICE_BAND_LABELS, counts)}


def aggregate_revenue(
    units: list[Unit],
    is_baseline: bool = False,
    baseline_units: list[Unit] | None = None,
) -> RevenueSummary:
    """Summarize one scenario's priced units.

    The baseline's own delta is 0 by definition and never computed by
    comparing it with itself.  With no baseline to compare against
    (``baseline_units`` is ``None``) the delta is also 0.
    """
    total = total_revenue(units)

    delta = 0.0
    delta_pct = 0.0
    if not is_baseline and baseline_units is not None:
        baseline_total = total_revenue(baseline_units)
        delta = total - baseline_total
        delta_pct = (delta / baseline_total) * 100 if baseline_total > 0 else 0.0

    return RevenueSummary(
        total_revenue=total,
        delta_from_baseline=delta,
        delta_percentage=delta_pct,
        per_floor_revenue=revenue_by_floor(units),
        per_plan_type_revenue=revenue_by_plan_type(units),
        unit_count_by_price_range=count_by_price_band(units),
    )
