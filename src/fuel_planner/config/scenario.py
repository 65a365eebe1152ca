"""Top-level scenario — bundles every input of one calculator run."""

from pydantic import BaseModel, Field

from fuel_planner.config.engine import EngineSettings
from fuel_planner.config.plan import LongTermPlanParams, SingleTripConfig
from fuel_planner.config.vehicle import VehicleConfig


class Scenario(BaseModel):
    """Complete input bundle for one calculation.

    ``single_trip`` and ``plan`` are optional: a missing section simply
    produces no report for it, the vehicle profile is always computed.
    """

    vehicle: VehicleConfig = Field(default_factory=VehicleConfig)
    single_trip: SingleTripConfig | None = Field(default_factory=SingleTripConfig)
    plan: LongTermPlanParams | None = Field(default_factory=LongTermPlanParams)
    currency: str = Field(default="EGP", description="Currency label for every report; overrides plan.currency")
    settings: EngineSettings = Field(default_factory=EngineSettings)
    include_speed_sweep: bool = Field(
        default=False,
        description="Also re-run the plan over the default speed grid (cost-vs-speed curve data)",
    )

    def plan_in_currency(self) -> LongTermPlanParams | None:
        """The plan section relabelled with the scenario currency."""
        if self.plan is None or self.plan.currency == self.currency:
            return self.plan
        return self.plan.model_copy(update={"currency": self.currency})
