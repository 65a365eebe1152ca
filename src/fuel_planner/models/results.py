"""Result types — the contract between engine, API, and display layer.

Engine operations return typed breakdowns (every intermediate number) and
``Report`` objects: ordered rows of (name, value, unit) ready for display.
Nothing here is rounded; display precision is the renderer's choice.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ═══════════════════════════════════════════════════════════════════════════
# Vehicle profile
# ═══════════════════════════════════════════════════════════════════════════

class VehicleProfile(BaseModel):
    """Immutable vehicle figures one calculation session works from.

    Only the three measured inputs are stored; tank cost, range and
    consumption are derived on every read.
    """

    model_config = ConfigDict(frozen=True)

    fuel_price_per_liter: float = Field(gt=0, allow_inf_nan=False)
    max_fuel_tank_liters: float = Field(gt=0, allow_inf_nan=False)
    avg_efficiency_km_per_liter: float = Field(gt=0, allow_inf_nan=False)
    """Arithmetic mean of the supplied efficiency samples (km/L)."""

    @computed_field
    @property
    def fill_tank_cost(self) -> float:
        """price × capacity."""
        return self.fuel_price_per_liter * self.max_fuel_tank_liters

    @computed_field
    @property
    def theoretical_range_km(self) -> float:
        """capacity × efficiency — distance on one full tank at the optimal speed."""
        return self.max_fuel_tank_liters * self.avg_efficiency_km_per_liter

    @computed_field
    @property
    def consumption_l_per_100km(self) -> float:
        return 100.0 / self.avg_efficiency_km_per_liter


# ═══════════════════════════════════════════════════════════════════════════
# Display reports
# ═══════════════════════════════════════════════════════════════════════════

class ReportRow(BaseModel):
    """One labelled figure in a report."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    unit: str = ""


class Report(BaseModel):
    """An ordered list of rows; order is display order."""

    title: str
    rows: list[ReportRow] = Field(default_factory=list)

    def get(self, name: str) -> ReportRow:
        for row in self.rows:
            if row.name == name:
                return row
        raise KeyError(name)

    def value(self, name: str) -> float:
        return self.get(name).value

    def names(self) -> list[str]:
        return [row.name for row in self.rows]

    def as_dict(self) -> dict[str, dict[str, float | str]]:
        """``{name: {"value": ..., "unit": ...}}`` in row order."""
        return {row.name: {"value": row.value, "unit": row.unit} for row in self.rows}


# ═══════════════════════════════════════════════════════════════════════════
# Breakdowns
# ═══════════════════════════════════════════════════════════════════════════

class SingleTripBreakdown(BaseModel):
    """All numbers behind one trip estimate."""

    distance_km: float
    speed_kmh: float
    adjusted_efficiency: float
    """Speed-adjusted efficiency (km/L)."""
    liters_needed: float
    """distance / adjusted_efficiency."""
    cost: float
    """liters_needed × fuel price."""


class LongTermPlanBreakdown(BaseModel):
    """All intermediate and final totals of a long-term plan."""

    # --- Calendar ---
    plan_duration_value: float
    plan_duration_unit: str
    total_days_in_plan: float
    """plan value × days per plan unit."""
    trips_per_day: float
    """frequency value ÷ days per frequency unit."""
    total_trips: float
    """total_days_in_plan × trips_per_day (fractional trips allowed)."""
    total_months: float
    """total_days_in_plan ÷ days per month."""

    # --- Fuel ---
    speed_kmh: float
    adjusted_efficiency: float
    total_distance_km: float
    total_liters: float
    total_fuel_cost: float

    # --- Expenses ---
    total_recurring_cost: float
    """Σ cost × (plan days ÷ period days) — fractional periods are charged pro rata."""
    total_trip_expense_cost: float
    """(Σ per-trip costs) × total_trips."""

    # --- Totals ---
    grand_total: float
    avg_monthly_cost: float
    """grand_total ÷ total_months, or 0 for an empty plan."""
    required_income: float
    """Monthly income at which avg_monthly_cost equals income_percentage % of it, or 0."""
    income_percentage: float
    currency: str


# ═══════════════════════════════════════════════════════════════════════════
# Speed sweep
# ═══════════════════════════════════════════════════════════════════════════

class SpeedSweepPoint(BaseModel):
    """Plan totals at one average speed."""

    speed_kmh: float
    adjusted_efficiency: float
    total_liters: float
    total_fuel_cost: float
    grand_total: float


class SpeedSweepResult(BaseModel):
    """Cost-vs-speed curve data for one plan."""

    currency: str
    points: list[SpeedSweepPoint] = Field(default_factory=list)
    cheapest_speed_kmh: float | None = None
    """Speed with the lowest grand total (first one on ties); None for an empty sweep."""


# ═══════════════════════════════════════════════════════════════════════════
# Full calculator run
# ═══════════════════════════════════════════════════════════════════════════

class CalculationResult(BaseModel):
    """Everything one ``run_calculator`` call produces."""

    profile: VehicleProfile
    vehicle_report: Report
    single_trip: SingleTripBreakdown | None = None
    single_trip_report: Report | None = None
    long_term: LongTermPlanBreakdown | None = None
    long_term_report: Report | None = None
    speed_sweep: SpeedSweepResult | None = None

    def reports(self) -> list[Report]:
        """Every report produced, in display order."""
        return [
            r for r in (self.vehicle_report, self.single_trip_report, self.long_term_report)
            if r is not None
        ]
