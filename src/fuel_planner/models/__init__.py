"""Result models — calculator output contracts."""

from fuel_planner.models.results import (
    CalculationResult,
    LongTermPlanBreakdown,
    Report,
    ReportRow,
    SingleTripBreakdown,
    SpeedSweepPoint,
    SpeedSweepResult,
    VehicleProfile,
)

__all__ = [
    "CalculationResult",
    "LongTermPlanBreakdown",
    "Report",
    "ReportRow",
    "SingleTripBreakdown",
    "SpeedSweepPoint",
    "SpeedSweepResult",
    "VehicleProfile",
]
