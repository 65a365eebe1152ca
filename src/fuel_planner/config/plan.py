"""Trip and plan inputs — durations, frequencies and expense lists."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from fuel_planner.errors import InvalidInput

TIME_UNITS: tuple[str, ...] = ("day", "week", "month", "year")


def normalize_unit(unit: object) -> str:
    """Map ``"Weeks"``, ``"week"``, ``" days "`` … onto the singular unit name."""
    if not isinstance(unit, str):
        raise InvalidInput(f"time unit must be a string, got {unit!r}", field="unit")
    text = unit.strip().lower()
    if text.endswith("s") and text[:-1] in TIME_UNITS:
        text = text[:-1]
    if text not in TIME_UNITS:
        raise InvalidInput(
            f"unknown time unit {unit!r}; expected one of {', '.join(TIME_UNITS)}",
            field="unit",
        )
    return text


TimeUnit = Annotated[Literal["day", "week", "month", "year"], BeforeValidator(normalize_unit)]


class Duration(BaseModel):
    """A quantity of time units — a plan length or a trip frequency."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(ge=0, allow_inf_nan=False, description="Number of units")
    unit: TimeUnit = Field(description="day, week, month or year (plurals accepted)")


class TripExpense(BaseModel):
    """A cost paid once per trip (tolls, snacks, …)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Display label")
    cost: float = Field(ge=0, allow_inf_nan=False, description="Cost per trip (currency)")


class RecurringExpense(BaseModel):
    """A cost paid once every ``period`` regardless of how many trips are made."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Display label")
    cost: float = Field(ge=0, allow_inf_nan=False, description="Cost per period (currency)")
    period: TimeUnit = Field(default="month", description="How often the cost repeats")


class SingleTripConfig(BaseModel):
    """One trip to price."""

    model_config = ConfigDict(frozen=True)

    distance_km: float = Field(default=150.0, ge=0, allow_inf_nan=False, description="Trip distance (km)")
    average_speed_kmh: float | None = Field(
        default=None, ge=0, allow_inf_nan=False,
        description="Average cruising speed (km/h). None = the optimal speed.",
    )


class LongTermPlanParams(BaseModel):
    """A recurring-trip scenario: how far, how often, for how long, at what cost."""

    model_config = ConfigDict(frozen=True)

    distance_per_trip_km: float = Field(default=20.0, ge=0, allow_inf_nan=False, description="Distance of one trip (km)")
    plan_duration: Duration = Field(
        default_factory=lambda: Duration(value=1, unit="month"),
        description="How long the plan runs",
    )
    trip_frequency: Duration = Field(
        default_factory=lambda: Duration(value=5, unit="week"),
        description="Trips per unit of time, e.g. {value: 5, unit: week} = 5 trips a week. "
                    "The unit should not be coarser than the plan duration's unit.",
    )
    average_speed_kmh: float = Field(default=80.0, ge=0, allow_inf_nan=False, description="Average cruising speed (km/h)")
    recurring_expenses: list[RecurringExpense] = Field(
        default_factory=lambda: [
            RecurringExpense(name="Parking", cost=550, period="month"),
            RecurringExpense(name="Mobile Data", cost=50, period="month"),
        ],
        description="Costs charged once per period across the plan",
    )
    trip_expenses: list[TripExpense] = Field(
        default_factory=lambda: [TripExpense(name="Snacks", cost=20)],
        description="Costs charged once per trip",
    )
    income_percentage: float = Field(
        default=10.0, ge=0, allow_inf_nan=False,
        description="Target share of monthly income spent on this plan (%). 0 = skip the income estimate.",
    )
    currency: str = Field(default="EGP", description="Currency label for standalone plan reports; a Scenario replaces it with its own")
