"""Global price constraints: applied last, after list pricing and rules."""

from pydantic import BaseModel, Field, model_validator


class GlobalSettings(BaseModel):
    """Per-scenario $/sqft band and rounding increment.

    A value of ``0`` means the setting is not configured and its check is
    skipped.
    """

    min_price_per_sqft: float = Field(
        default=1_100.0, ge=0,
        description="Floor on final $/sqft. Not enforced for units whose base "
                    "price came from a base-pricing override.",
    )
    max_price_per_sqft: float = Field(default=1_900.0, ge=0, description="Ceiling on final $/sqft")
    rounding_rule: float = Field(
        default=1_000.0, ge=0,
        description="Final price is rounded half-up to a multiple of this (e.g. 1000)",
    )

    @model_validator(mode="after")
    def _check_band(self) -> "GlobalSettings":
        if self.min_price_per_sqft and self.max_price_per_sqft and self.min_price_per_sqft > self.max_price_per_sqft:
            raise ValueError(
                f"min_price_per_sqft ({self.min_price_per_sqft}) exceeds "
                f"max_price_per_sqft ({self.max_price_per_sqft})"
            )
        return self
