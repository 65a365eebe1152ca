"""Vehicle inputs — raw numbers the profile is built from."""

from pydantic import BaseModel, Field


class VehicleConfig(BaseModel):
    """Caller-supplied vehicle figures, validated again by the engine."""

    fuel_price_per_liter: float = Field(default=20.0, gt=0, description="Fuel price per liter (currency/L)")
    max_fuel_tank_liters: float = Field(default=45.0, gt=0, description="Fuel tank capacity (L)")
    efficiency_samples: float | list[float] = Field(
        default_factory=lambda: [15.0],
        description="Measured efficiency (km/L). A list of samples is averaged "
                    "into one working efficiency.",
    )
