"""Price quote models."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, model_validator


class PriceBreakdown(BaseModel):
    """Quote split into material costs and surcharges (EUR)."""
    model_config = ConfigDict(frozen=True)

    steel_cost: int
    glass_cost: int
    base_fee: int
    mechanism_surcharge: int
    side_panel_surcharge: int
    handle_cost: int
    total_price: int

    # Diagnostics, rounded to 2 decimals
    steel_length_meters: float
    glass_area_sq_meters: float

    @property
    def component_sum(self) -> int:
        return (
            self.steel_cost
            + self.glass_cost
            + self.base_fee
            + self.mechanism_surcharge
            + self.side_panel_surcharge
            + self.handle_cost
        )

    @model_validator(mode="after")
    def _check_total(self) -> PriceBreakdown:
        if self.total_price != self.component_sum:
            raise ValueError(
                f"total_price {self.total_price} does not equal the sum of "
                f"its components ({self.component_sum})"
            )
        return self
