"""Cost-vs-speed sweep — the same plan re-run at a grid of average speeds.

Only ``average_speed_kmh`` changes between points; the profile and every
other plan input are shared read-only, so points are independent.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from fuel_planner.config.engine import EngineSettings
from fuel_planner.config.plan import LongTermPlanParams
from fuel_planner.engine.long_term import compute_long_term_plan
from fuel_planner.models.results import SpeedSweepPoint, SpeedSweepResult, VehicleProfile

# 30, 40, …, 140 km/h
DEFAULT_SWEEP_SPEEDS: tuple[float, ...] = tuple(float(v) for v in np.arange(30, 141, 10))


def default_speeds(settings: EngineSettings | None = None) -> list[float]:
    """The default grid, clipped to the speed bounds when they are enabled."""
    s = settings or EngineSettings()
    grid = np.asarray(DEFAULT_SWEEP_SPEEDS, dtype=float)
    if s.min_speed_kmh is not None:
        grid = grid[grid >= s.min_speed_kmh]
    if s.max_speed_kmh is not None:
        grid = grid[grid <= s.max_speed_kmh]
    return [float(v) for v in grid]


def speed_sweep(
    profile: VehicleProfile,
    params: LongTermPlanParams,
    speeds: Iterable[float] | None = None,
    settings: EngineSettings | None = None,
) -> SpeedSweepResult:
    """Plan totals at each speed of ``speeds`` (default grid if None).

    Explicit speeds are validated like any other speed, so an out-of-bounds
    point raises ``InvalidInput``.
    """
    s = settings or EngineSettings()
    grid = default_speeds(s) if speeds is None else list(speeds)

    points: list[SpeedSweepPoint] = []
    for speed in grid:
        plan = compute_long_term_plan(
            profile, params.model_copy(update={"average_speed_kmh": speed}), s,
        )
        points.append(SpeedSweepPoint(
            speed_kmh=plan.speed_kmh,
            adjusted_efficiency=plan.adjusted_efficiency,
            total_liters=plan.total_liters,
            total_fuel_cost=plan.total_fuel_cost,
            grand_total=plan.grand_total,
        ))

    cheapest = None
    if points:
        totals = np.array([p.grand_total for p in points])
        cheapest = points[int(np.argmin(totals))].speed_kmh

    return SpeedSweepResult(currency=params.currency, points=points, cheapest_speed_kmh=cheapest)
