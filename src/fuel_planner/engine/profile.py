"""Vehicle profile — construction from raw inputs and the profile report."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from numbers import Real

from pydantic import ValidationError

from fuel_planner.config.engine import EngineSettings
from fuel_planner.config.vehicle import VehicleConfig
from fuel_planner.engine.validation import require_number, require_positive
from fuel_planner.errors import InvalidInput, invalid_input_from
from fuel_planner.models.results import Report, ReportRow, VehicleProfile

logger = logging.getLogger(__name__)


def mean_efficiency(samples: object) -> float:
    """Working efficiency from one reading or a sequence of readings (km/L)."""
    if isinstance(samples, Real) and not isinstance(samples, bool):
        mean = float(samples)
    elif isinstance(samples, Iterable) and not isinstance(samples, (str, bytes)):
        values = [
            require_number(f"efficiency_samples[{i}]", sample)
            for i, sample in enumerate(samples)
        ]
        if not values:
            raise InvalidInput("at least one efficiency sample is required", field="efficiency_samples")
        mean = math.fsum(values) / len(values)
    else:
        raise InvalidInput(
            f"must be a number or a list of numbers, got {samples!r}",
            field="efficiency_samples",
        )

    if math.isnan(mean) or math.isinf(mean) or mean <= 0:
        raise InvalidInput(
            f"average fuel efficiency must be a positive number, got {mean}",
            field="efficiency_samples",
        )
    return mean


def create_vehicle_profile(
    fuel_price_per_liter: object,
    max_fuel_tank_liters: object,
    efficiency_samples: object,
) -> VehicleProfile:
    """Validate the raw vehicle figures and freeze them into a profile.

    Raises ``InvalidInput`` when price or capacity is missing, not a number
    or not positive, or when the efficiency samples do not average to a
    positive number.
    """
    price = require_positive("fuel_price_per_liter", fuel_price_per_liter)
    capacity = require_positive("max_fuel_tank_liters", max_fuel_tank_liters)
    efficiency = mean_efficiency(efficiency_samples)

    try:
        profile = VehicleProfile(
            fuel_price_per_liter=price,
            max_fuel_tank_liters=capacity,
            avg_efficiency_km_per_liter=efficiency,
        )
    except ValidationError as exc:
        raise invalid_input_from(exc) from exc

    logger.debug(
        "Vehicle profile: %.4f/L, %.2f L tank, %.4f km/L",
        price, capacity, efficiency,
    )
    return profile


def profile_from_config(vehicle: VehicleConfig) -> VehicleProfile:
    return create_vehicle_profile(
        vehicle.fuel_price_per_liter,
        vehicle.max_fuel_tank_liters,
        vehicle.efficiency_samples,
    )


def vehicle_profile(
    profile: VehicleProfile,
    currency: str = "EGP",
    settings: EngineSettings | None = None,
) -> Report:
    """Profile report: price, tank, fill cost, efficiency, range, consumption."""
    s = settings or EngineSettings()
    optimal = f"{s.optimal_speed_kmh:g}"
    return Report(
        title="Vehicle Profile",
        rows=[
            ReportRow(name="Fuel Price", value=profile.fuel_price_per_liter, unit=f"{currency}/L"),
            ReportRow(name="Tank Capacity", value=profile.max_fuel_tank_liters, unit="L"),
            ReportRow(name="Cost to Fill Tank", value=profile.fill_tank_cost, unit=currency),
            ReportRow(
                name="Avg. Efficiency",
                value=profile.avg_efficiency_km_per_liter,
                unit=f"km/L at {optimal} km/h",
            ),
            ReportRow(name="Avg. Range", value=profile.theoretical_range_km, unit="km"),
            ReportRow(name="Fuel Consumption", value=profile.consumption_l_per_100km, unit="L/100km"),
        ],
    )
