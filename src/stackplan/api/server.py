"""FastAPI server: HTTP access to the pricing engine.

Run with:
    uvicorn stackplan.api.server:app --reload --port 8000

Or:
    python -m stackplan.api.server

Endpoints:
    GET  /health  liveness
    GET  /schema  JSON Schema for Scenario
    GET  /settings/defaults  default GlobalSettings
    POST /recompute  price a unit list (recompute entrypoint)
    POST /recompute/scenario  price a partial or full Scenario
    POST /aggregate  RevenueSummary for priced units (aggregate entrypoint)
    POST /compare  revenue comparison across scenarios
    POST /template  list-pricing placeholder template for a unit list
    POST /stacking  floor-grouped stacking plan
    POST /narrative  plain-English revenue readout of a scenario
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from stackplan.config.list_pricing import ListPricingItem
from stackplan.config.rules import Rule
from stackplan.config.scenario import Scenario
from stackplan.config.settings import GlobalSettings
from stackplan.engine.pipeline import recompute_scenario, recompute_units
from stackplan.engine.stacking import build_stacking_plan
from stackplan.engine.templates import build_list_pricing_template
from stackplan.finance.comparison import compare_scenarios, summarize_scenario
from stackplan.finance.revenue import aggregate_revenue
from stackplan.models.enums import BasePricingMode
from stackplan.models.results import FloorStack, RevenueSummary, ScenarioComparison
from stackplan.models.unit import Unit
from stackplan.api.narrative import generate_comparison_narrative, generate_narrative

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Stackplan Pricing Engine API",
    version="1.0",
    description=(
        "Deterministic unit pricing for real-estate scenarios: base pricing, "
        "list pricing, ordered rules and global constraints, plus revenue "
        "summaries and cross-scenario comparison."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class RecomputeRequest(BaseModel):
    """Request body for /recompute."""
    units: list[Unit]
    rules: list[Rule] = Field(default_factory=list)
    list_pricing: list[ListPricingItem] = Field(default_factory=list)
    global_settings: GlobalSettings = Field(default_factory=GlobalSettings)
    base_pricing_mode: BasePricingMode = BasePricingMode.PLAN


class RecomputeResponse(BaseModel):
    units: list[Unit]


class ScenarioRequest(BaseModel):
    """Request body for /recompute/scenario and /narrative."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'units': [...], 'global_settings': {'rounding_rule': 500}}",
    )
    baseline: Scenario | None = Field(
        default=None,
        description="Priced baseline scenario for the revenue delta (optional)",
    )


class ScenarioResponse(BaseModel):
    scenario: Scenario
    revenue_summary: RevenueSummary


class AggregateRequest(BaseModel):
    """Request body for /aggregate."""
    units: list[Unit]
    is_baseline: bool = False
    baseline_units: list[Unit] | None = None


class CompareRequest(BaseModel):
    """Request body for /compare."""
    scenarios: list[Scenario]
    recompute: bool = Field(
        default=True,
        description="Re-price every scenario from its own configuration before comparing",
    )


class CompareResponse(BaseModel):
    comparison: ScenarioComparison
    narrative: str = ""


class UnitsRequest(BaseModel):
    """Request body for /template and /stacking."""
    units: list[Unit]
    existing: list[ListPricingItem] = Field(
        default_factory=list,
        description="Current list pricing; matching entries keep their adjustment (/template only)",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def get_default_scenario() -> dict[str, Any]:
    return Scenario(id="default").model_dump(mode="json")


def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = get_default_scenario()
    _deep_merge(defaults, overrides)
    try:
        return Scenario(**defaults)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    """API root: name, version and where to look next."""
    return {
        "name": "Stackplan Pricing Engine API",
        "version": "1.0",
        "docs": "GET /docs (interactive Swagger UI)",
        "schema": "GET /schema",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario: rules, list pricing, settings and units."""
    return Scenario.model_json_schema()


@app.get("/settings/defaults")
def get_default_settings():
    return GlobalSettings().model_dump()


@app.post("/recompute", response_model=RecomputeResponse)
def recompute(req: RecomputeRequest):
    """Price a unit list from scratch.

    Applies base pricing, list pricing, rules and global constraints in that
    order and returns every unit with fresh premiums.
    """
    units = recompute_units(
        req.units, req.rules, req.list_pricing, req.global_settings, req.base_pricing_mode,
    )
    return RecomputeResponse(units=units)


@app.post("/recompute/scenario", response_model=ScenarioResponse)
def recompute_scenario_endpoint(req: ScenarioRequest):
    """Re-price a scenario and summarize its revenue against an optional baseline."""
    scenario = recompute_scenario(_build_scenario(req.scenario))
    summary = summarize_scenario(scenario, req.baseline)
    return ScenarioResponse(scenario=scenario, revenue_summary=summary)


@app.post("/aggregate", response_model=RevenueSummary)
def aggregate(req: AggregateRequest):
    """Revenue totals, baseline delta and breakdowns for priced units."""
    return aggregate_revenue(req.units, req.is_baseline, req.baseline_units)


@app.post("/compare", response_model=CompareResponse)
def compare(req: CompareRequest):
    """Compare scenarios against the single baseline among them.

    Returns 422 when more than one scenario is flagged as baseline.
    """
    scenarios = [recompute_scenario(s) for s in req.scenarios] if req.recompute else req.scenarios
    try:
        comparison = compare_scenarios(scenarios)
    except ValueError as exc:
        logger.warning("Rejected comparison: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return CompareResponse(
        comparison=comparison,
        narrative=generate_comparison_narrative(comparison),
    )


@app.post("/template", response_model=list[ListPricingItem])
def list_pricing_template(req: UnitsRequest):
    """Placeholder list-pricing entries for every category value in the units."""
    return build_list_pricing_template(req.units, req.existing)


@app.post("/stacking", response_model=list[FloorStack])
def stacking_plan(req: UnitsRequest):
    """Units grouped by floor, top floor first, with per-floor revenue."""
    return build_stacking_plan(req.units)


@app.post("/narrative")
def narrative(req: ScenarioRequest):
    """Re-price a scenario and return only the plain-English revenue readout."""
    scenario = recompute_scenario(_build_scenario(req.scenario))
    summary = summarize_scenario(scenario, req.baseline)
    return {
        "narrative": generate_narrative(summary, scenario.name),
        "headline_metrics": {
            "total_revenue": summary.total_revenue,
            "delta_from_baseline": summary.delta_from_baseline,
            "delta_percentage": round(summary.delta_percentage, 2),
            "unit_count": len(scenario.units),
        },
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "stackplan.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
