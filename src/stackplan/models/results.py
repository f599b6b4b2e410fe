"""Result types: what the engine and revenue aggregation hand back."""

from __future__ import annotations

from pydantic import BaseModel, Field

from stackplan.models.unit import Unit


# Fixed price-band boundaries (dollars) and their labels.
PRICE_BAND_EDGES: tuple[float, ...] = (1_000_000.0, 1_500_000.0, 2_000_000.0)
PRICE_BAND_LABELS: tuple[str, ...] = ("Under $1M", "$1M-$1.5M", "$1.5M-$2M", "Over $2M")


class RevenueSummary(BaseModel):
    """Aggregate over one scenario's priced units."""

    total_revenue: float = 0.0
    delta_from_baseline: float = 0.0
    """total_revenue − baseline total.  Always 0 for the baseline itself."""

    delta_percentage: float = 0.0
    """delta / baseline total × 100, or 0 when the baseline total is not positive."""

    per_floor_revenue: dict[str, float] = Field(default_factory=dict)
    """Keys are the floors present in this scenario, in floor order."""

    per_plan_type_revenue: dict[str, float] = Field(default_factory=dict)
    """Keys are the plan types present in this scenario, sorted."""

    unit_count_by_price_range: dict[str, int] = Field(
        default_factory=lambda: {label: 0 for label in PRICE_BAND_LABELS},
    )


class FloorStack(BaseModel):
    """One floor of the stacking plan."""

    floor: str
    label: str
    units: list[Unit]
    unit_count: int
    revenue: float


class ScenarioRevenue(BaseModel):
    """One scenario's column in a comparison."""

    scenario_id: str
    name: str
    is_baseline: bool
    summary: RevenueSummary


class ScenarioComparison(BaseModel):
    """Side-by-side revenue view across scenarios.

    Each scenario's floor and plan-type maps are zero-filled over the union
    key sets, so every column has the same rows.
    """

    baseline_id: str | None = None
    floors: list[str] = Field(default_factory=list)
    plan_types: list[str] = Field(default_factory=list)
    scenarios: list[ScenarioRevenue] = Field(default_factory=list)
    ranking: list[str] = Field(default_factory=list)
    """Scenario ids by total revenue, highest first."""
