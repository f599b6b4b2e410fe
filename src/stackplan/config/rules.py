"""Conditional pricing rules: authored in the rule builder, read-only here."""

from pydantic import BaseModel, Field, model_validator

from stackplan.models.enums import AdjustmentKind


class Band(BaseModel):
    """Inclusive numeric range, used for unit size and outdoor space."""

    min: float = Field(ge=0)
    max: float = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "Band":
        if self.min > self.max:
            raise ValueError(f"band min ({self.min}) exceeds max ({self.max})")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class FloorRange(BaseModel):
    """Contiguous span of floors.  Switches a rule to incremental floor pricing:
    1× at ``start_floor``, 2× on the next floor up, and so on through ``end_floor``."""

    start_floor: str
    end_floor: str


class RuleCriteria(BaseModel):
    """Match conditions.  Clauses are AND'd; values inside one clause are OR'd.

    An unset or empty clause places no constraint on the unit.
    """

    plan_types: list[str] | None = None
    orientations: list[str] | None = None
    floors: list[str] | None = None
    bedroom_counts: list[int] | None = None
    bathroom_counts: list[float] | None = None
    size_bands: list[Band] | None = None
    outdoor_bands: list[Band] | None = None
    floor_range: FloorRange | None = None


class Adjustment(BaseModel):
    type: AdjustmentKind = AdjustmentKind.FIXED
    value: float = Field(default=0.0, description="Dollars, percent, or $/sqft depending on type")


class Rule(BaseModel):
    """One user-authored conditional adjustment."""

    id: str
    name: str
    enabled: bool = True
    order: int = Field(default=0, description="Evaluation order, ascending; ties keep list order")
    criteria: RuleCriteria = Field(default_factory=RuleCriteria)
    adjustment: Adjustment = Field(default_factory=Adjustment)
