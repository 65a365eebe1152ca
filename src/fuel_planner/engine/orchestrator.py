"""Calculator orchestrator — one scenario in, every requested report out.

The vehicle profile is always built and reported.  The single-trip and
long-term sections run only when the scenario carries them.  Any
``InvalidInput`` aborts the whole run; there are no partial results.
"""

from __future__ import annotations

import logging

from fuel_planner.config.scenario import Scenario
from fuel_planner.engine.long_term import compute_long_term_plan, long_term_report
from fuel_planner.engine.profile import profile_from_config, vehicle_profile
from fuel_planner.engine.single_trip import single_trip_from_config, single_trip_report
from fuel_planner.engine.speed_sweep import speed_sweep
from fuel_planner.models.results import CalculationResult

logger = logging.getLogger(__name__)


def run_calculator(scenario: Scenario) -> CalculationResult:
    """Run every calculation ``scenario`` asks for."""
    settings = scenario.settings
    profile = profile_from_config(scenario.vehicle)

    result = CalculationResult(
        profile=profile,
        vehicle_report=vehicle_profile(profile, scenario.currency, settings),
    )

    if scenario.single_trip is not None:
        trip = single_trip_from_config(profile, scenario.single_trip, settings)
        result.single_trip = trip
        result.single_trip_report = single_trip_report(trip, scenario.currency)

    params = scenario.plan_in_currency()
    if params is not None:
        plan = compute_long_term_plan(profile, params, settings)
        result.long_term = plan
        result.long_term_report = long_term_report(plan)
        if scenario.include_speed_sweep:
            result.speed_sweep = speed_sweep(profile, params, settings=settings)

    logger.info(
        "Calculated %d report(s)%s",
        len(result.reports()),
        " with speed sweep" if result.speed_sweep is not None else "",
    )
    return result
