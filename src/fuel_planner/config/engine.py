"""Engine tunables — speed penalty curve, speed bounds, calendar constants."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

OPTIMAL_SPEED_KMH = 80.0
EFFICIENCY_DROP_FACTOR = 0.00005
EFFICIENCY_FLOOR = 0.5
DAYS_PER_WEEK = 7.0
DAYS_PER_YEAR = 365.25


class EngineSettings(BaseModel):
    """Tunable constants shared by every calculation.

    The defaults reproduce the reference calculator: efficiency peaks at
    80 km/h, drops by ``0.00005 × Δv²`` and never falls below half of the
    nominal figure.  Speed bounds are disabled unless both or either of
    ``min_speed_kmh`` / ``max_speed_kmh`` are set.
    """

    model_config = ConfigDict(frozen=True)

    # --- Speed penalty curve ---
    optimal_speed_kmh: float = Field(
        default=OPTIMAL_SPEED_KMH, gt=0, allow_inf_nan=False,
        description="Cruising speed at which the nominal efficiency applies (km/h)",
    )
    efficiency_drop_factor: float = Field(
        default=EFFICIENCY_DROP_FACTOR, ge=0, allow_inf_nan=False,
        description="Quadratic penalty coefficient: factor = 1 − k × (v − v_opt)²",
    )
    efficiency_floor: float = Field(
        default=EFFICIENCY_FLOOR, gt=0, le=1.0,
        description="Lowest fraction of nominal efficiency the penalty can reach",
    )

    # --- Optional speed validation ---
    min_speed_kmh: float | None = Field(
        default=None, ge=0, allow_inf_nan=False,
        description="Reject speeds below this bound. None = no lower bound.",
    )
    max_speed_kmh: float | None = Field(
        default=None, gt=0, allow_inf_nan=False,
        description="Reject speeds above this bound. None = no upper bound.",
    )

    # --- Calendar ---
    days_per_week: float = Field(default=DAYS_PER_WEEK, gt=0, description="Days in one week")
    days_per_year: float = Field(
        default=DAYS_PER_YEAR, gt=0,
        description="Average year length in days (leap-year corrected). "
                    "A month is always days_per_year / 12.",
    )

    @model_validator(mode="after")
    def _check_speed_bounds(self) -> "EngineSettings":
        if (
            self.min_speed_kmh is not None
            and self.max_speed_kmh is not None
            and self.min_speed_kmh > self.max_speed_kmh
        ):
            raise ValueError("min_speed_kmh must not exceed max_speed_kmh")
        return self

    @property
    def speed_bounds_enabled(self) -> bool:
        return self.min_speed_kmh is not None or self.max_speed_kmh is not None

    @property
    def days_per_month(self) -> float:
        return self.days_per_year / 12
