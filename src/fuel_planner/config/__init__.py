"""Configuration models — every calculator input type."""

from fuel_planner.config.engine import EngineSettings
from fuel_planner.config.vehicle import VehicleConfig
from fuel_planner.config.plan import (
    TIME_UNITS,
    Duration,
    LongTermPlanParams,
    RecurringExpense,
    SingleTripConfig,
    TimeUnit,
    TripExpense,
    normalize_unit,
)
from fuel_planner.config.scenario import Scenario

__all__ = [
    "EngineSettings",
    "VehicleConfig",
    "TIME_UNITS",
    "TimeUnit",
    "Duration",
    "TripExpense",
    "RecurringExpense",
    "SingleTripConfig",
    "LongTermPlanParams",
    "Scenario",
    "normalize_unit",
]
