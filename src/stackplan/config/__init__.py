"""Configuration models: everything a pricing pass reads."""

from stackplan.models.enums import AdjustmentKind, BasePricingMode, ListPricingCategory
from stackplan.config.settings import GlobalSettings
from stackplan.config.rules import Adjustment, Band, FloorRange, Rule, RuleCriteria
from stackplan.config.list_pricing import ListPricingItem
from stackplan.config.scenario import Scenario

__all__ = [
    "AdjustmentKind",
    "BasePricingMode",
    "ListPricingCategory",
    "GlobalSettings",
    "Adjustment",
    "Band",
    "FloorRange",
    "Rule",
    "RuleCriteria",
    "ListPricingItem",
    "Scenario",
]
