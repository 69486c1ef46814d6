"""Manufacturing constants and the price list."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .options import HandleType


class ManufacturingParams(BaseModel):
    """Fixed shop dimensions, all in millimeters."""
    frame_profile_width: float = 80.0   # Wall frame profile, each side
    side_panel_min_width: float = 200.0
    side_panel_max_width: float = 800.0
    leaf_min_width: float = 700.0
    leaf_max_width: float = 1200.0
    min_height: float = 1800.0
    max_height: float = 3000.0

    profile_width: float = 40.0         # 40x40 square tube face
    profile_depth: float = 40.0
    rail_height_slim: float = 20.0      # Grid dividers
    rail_height_robust: float = 40.0    # Top/bottom rails
    glass_thickness: float = 7.0        # 33.1 laminated safety glass
    glass_offset: float = 15.0          # Glass inset inside the profile


def _default_handle_prices() -> dict[HandleType, int]:
    return {
        HandleType.BAR: 85,
        HandleType.CORNER: 75,
        HandleType.CRESCENT: 95,
        HandleType.OVAL: 90,
        HandleType.LEVER: 65,
        HandleType.U_GRIP: 55,
        HandleType.NONE: 0,
    }


class PriceList(BaseModel):
    """Unit prices and flat surcharges (EUR)."""
    steel_per_meter: float = 45.0
    glass_per_sqm: float = 140.0
    base_fee: int = 650
    side_panel_surcharge: int = 250     # Per panel
    double_leaf_surcharge: int = 350
    pivot_surcharge: int = 450
    handle_prices: dict[HandleType, int] = Field(default_factory=_default_handle_prices)

    def handle_price(self, handle: HandleType | str) -> int:
        try:
            return self.handle_prices.get(HandleType(handle), 0)
        except ValueError:
            return 0
