"""Shared test fixtures — the reference vehicle and plan used throughout."""

from __future__ import annotations

import pytest

from fuel_planner.config import (
    Duration,
    EngineSettings,
    LongTermPlanParams,
    RecurringExpense,
    Scenario,
    SingleTripConfig,
    TripExpense,
    VehicleConfig,
)
from fuel_planner.engine.profile import create_vehicle_profile
from fuel_planner.models.results import VehicleProfile


@pytest.fixture
def settings() -> EngineSettings:
    """Optimal speed at 75 km/h so hand calculations stay round."""
    return EngineSettings(optimal_speed_kmh=75)


@pytest.fixture
def bounded_settings() -> EngineSettings:
    return EngineSettings(min_speed_kmh=50, max_speed_kmh=120)


@pytest.fixture
def profile() -> VehicleProfile:
    # 20/L, 45 L tank, 15 km/L
    return create_vehicle_profile(20, 45, [15])


@pytest.fixture
def plan() -> LongTermPlanParams:
    return LongTermPlanParams(
        distance_per_trip_km=20,
        plan_duration=Duration(value=1, unit="month"),
        trip_frequency=Duration(value=5, unit="week"),
        average_speed_kmh=75,
        recurring_expenses=[RecurringExpense(name="Parking", cost=550, period="month")],
        trip_expenses=[],
        income_percentage=0,
        currency="EGP",
    )


@pytest.fixture
def full_plan() -> LongTermPlanParams:
    return LongTermPlanParams(
        distance_per_trip_km=20,
        plan_duration=Duration(value=3, unit="months"),
        trip_frequency=Duration(value=5, unit="weeks"),
        average_speed_kmh=75,
        recurring_expenses=[
            RecurringExpense(name="Parking", cost=550, period="month"),
            RecurringExpense(name="Mobile Data", cost=50, period="month"),
            RecurringExpense(name="Insurance", cost=3_652.5, period="year"),
        ],
        trip_expenses=[
            TripExpense(name="Snacks", cost=20),
            TripExpense(name="Toll", cost=5),
        ],
        income_percentage=10,
        currency="EGP",
    )


@pytest.fixture
def scenario(settings: EngineSettings, full_plan: LongTermPlanParams) -> Scenario:
    return Scenario(
        vehicle=VehicleConfig(fuel_price_per_liter=20, max_fuel_tank_liters=45, efficiency_samples=[14, 16]),
        single_trip=SingleTripConfig(distance_km=150, average_speed_kmh=75),
        plan=full_plan,
        currency="EGP",
        settings=settings,
    )
