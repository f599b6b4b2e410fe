"""Records: shared vocabularies, priced units and revenue results."""

from stackplan.models.enums import AdjustmentKind, BasePricingMode, ListPricingCategory
from stackplan.models.unit import Premium, Unit
from stackplan.models.results import (
    PRICE_BAND_EDGES,
    PRICE_BAND_LABELS,
    FloorStack,
    RevenueSummary,
    ScenarioComparison,
    ScenarioRevenue,
)

__all__ = [
    "AdjustmentKind",
    "BasePricingMode",
    "ListPricingCategory",
    "Premium",
    "Unit",
    "PRICE_BAND_EDGES",
    "PRICE_BAND_LABELS",
    "FloorStack",
    "RevenueSummary",
    "ScenarioComparison",
    "ScenarioRevenue",
]
