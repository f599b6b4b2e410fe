"""Top-level scenario: bundles one what-if pricing configuration."""

from pydantic import BaseModel, Field

from stackplan.models.enums import BasePricingMode
from stackplan.config.list_pricing import ListPricingItem
from stackplan.config.rules import Rule
from stackplan.config.settings import GlobalSettings
from stackplan.models.unit import Unit


class Scenario(BaseModel):
    """Named, versioned pricing configuration plus its priced units.

    At most one scenario in a project is flagged ``is_baseline``; revenue
    deltas of all others are measured against it.
    """

    id: str
    name: str = "Untitled scenario"
    version: str = "1.0"
    created_by: str = ""
    rules: list[Rule] = Field(default_factory=list)
    global_settings: GlobalSettings = Field(default_factory=GlobalSettings)
    list_pricing: list[ListPricingItem] = Field(default_factory=list)
    base_pricing_mode: BasePricingMode = BasePricingMode.PLAN
    units: list[Unit] = Field(default_factory=list)
    is_baseline: bool = False
