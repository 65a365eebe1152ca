"""Engine — pure fuel-cost calculations."""

from fuel_planner.engine.profile import create_vehicle_profile, profile_from_config, vehicle_profile
from fuel_planner.engine.efficiency import efficiency_factor, speed_adjusted_efficiency
from fuel_planner.engine.single_trip import compute_single_trip, single_trip_cost
from fuel_planner.engine.time_units import days_per_unit, rate_per_day, to_days
from fuel_planner.engine.long_term import compute_long_term_plan, long_term_plan
from fuel_planner.engine.speed_sweep import DEFAULT_SWEEP_SPEEDS, speed_sweep
from fuel_planner.engine.orchestrator import run_calculator

__all__ = [
    "create_vehicle_profile",
    "profile_from_config",
    "vehicle_profile",
    "efficiency_factor",
    "speed_adjusted_efficiency",
    "compute_single_trip",
    "single_trip_cost",
    "days_per_unit",
    "to_days",
    "rate_per_day",
    "compute_long_term_plan",
    "long_term_plan",
    "DEFAULT_SWEEP_SPEEDS",
    "speed_sweep",
    "run_calculator",
]
