"""Single-trip cost.

    liters = distance / adjusted_efficiency(speed)
    cost   = liters × fuel price
"""

from __future__ import annotations

import logging

from fuel_planner.config.engine import EngineSettings
from fuel_planner.config.plan import SingleTripConfig
from fuel_planner.engine.efficiency import check_speed, speed_adjusted_efficiency
from fuel_planner.engine.validation import require_finite_results, require_non_negative
from fuel_planner.models.results import Report, ReportRow, SingleTripBreakdown, VehicleProfile

logger = logging.getLogger(__name__)


def compute_single_trip(
    profile: VehicleProfile,
    distance_km: object,
    speed_kmh: object | None = None,
    settings: EngineSettings | None = None,
) -> SingleTripBreakdown:
    """Fuel and cost for one trip; ``speed_kmh=None`` means the optimal speed."""
    s = settings or EngineSettings()
    distance = require_non_negative("distance_km", distance_km)
    speed = check_speed(s.optimal_speed_kmh if speed_kmh is None else speed_kmh, s)

    adjusted_efficiency = speed_adjusted_efficiency(profile, speed, s)
    liters_needed = distance / adjusted_efficiency
    cost = liters_needed * profile.fuel_price_per_liter
    require_finite_results(liters_needed=liters_needed, cost=cost)

    logger.debug(
        "Single trip: %.2f km at %.1f km/h -> %.4f L, cost %.4f",
        distance, speed, liters_needed, cost,
    )
    return SingleTripBreakdown(
        distance_km=distance,
        speed_kmh=speed,
        adjusted_efficiency=adjusted_efficiency,
        liters_needed=liters_needed,
        cost=cost,
    )


def single_trip_report(breakdown: SingleTripBreakdown, currency: str = "EGP") -> Report:
    return Report(
        title="Single Trip",
        rows=[
            ReportRow(name="Trip Distance", value=breakdown.distance_km, unit="km"),
            ReportRow(name="Average Speed", value=breakdown.speed_kmh, unit="km/h"),
            ReportRow(name="Adjusted Efficiency", value=breakdown.adjusted_efficiency, unit="km/L"),
            ReportRow(name="Fuel Required", value=breakdown.liters_needed, unit="L"),
            ReportRow(name="Estimated Cost", value=breakdown.cost, unit=currency),
        ],
    )


def single_trip_cost(
    profile: VehicleProfile,
    distance_km: object,
    speed_kmh: object | None = None,
    currency: str = "EGP",
    settings: EngineSettings | None = None,
) -> Report:
    """Single-trip report: distance, speed, adjusted efficiency, liters, cost."""
    breakdown = compute_single_trip(profile, distance_km, speed_kmh, settings)
    return single_trip_report(breakdown, currency)


def single_trip_from_config(
    profile: VehicleProfile,
    trip: SingleTripConfig,
    settings: EngineSettings | None = None,
) -> SingleTripBreakdown:
    return compute_single_trip(profile, trip.distance_km, trip.average_speed_kmh, settings)
