"""Speed-adjusted efficiency — the quadratic penalty curve.

    factor     = 1 − k × (v − v_opt)²
    efficiency = nominal × max(factor, floor)

Efficiency peaks at the optimal cruising speed and degrades symmetrically
on both sides.  The floor (50 % by default) keeps extreme speeds from
driving efficiency to zero or below.

Speed policy: any finite, non-negative speed is accepted unless
``EngineSettings.min_speed_kmh`` / ``max_speed_kmh`` are set, in which case
speeds outside the bounds raise ``InvalidInput``.
"""

from __future__ import annotations

from fuel_planner.config.engine import EngineSettings
from fuel_planner.engine.validation import require_non_negative
from fuel_planner.errors import InvalidInput
from fuel_planner.models.results import VehicleProfile

_DEFAULT_SETTINGS = EngineSettings()


def check_speed(speed_kmh: object, settings: EngineSettings | None = None) -> float:
    """Validate a cruising speed against the configured policy."""
    s = settings or _DEFAULT_SETTINGS
    speed = require_non_negative("speed_kmh", speed_kmh)
    too_slow = s.min_speed_kmh is not None and speed < s.min_speed_kmh
    too_fast = s.max_speed_kmh is not None and speed > s.max_speed_kmh
    if too_slow or too_fast:
        low = s.min_speed_kmh if s.min_speed_kmh is not None else 0.0
        high = s.max_speed_kmh if s.max_speed_kmh is not None else float("inf")
        raise InvalidInput(
            f"speed must be between {low:g} and {high:g} km/h, got {speed:g}",
            field="speed_kmh",
        )
    return speed


def efficiency_factor(speed_kmh: object, settings: EngineSettings | None = None) -> float:
    """Fraction of nominal efficiency left at ``speed_kmh`` (floored)."""
    s = settings or _DEFAULT_SETTINGS
    speed = check_speed(speed_kmh, s)
    delta = speed - s.optimal_speed_kmh
    # huge deltas overflow to inf here and land on the floor
    penalty = s.efficiency_drop_factor * delta * delta if s.efficiency_drop_factor else 0.0
    factor = 1 - penalty
    return max(factor, s.efficiency_floor)


def speed_adjusted_efficiency(
    profile: VehicleProfile,
    speed_kmh: object,
    settings: EngineSettings | None = None,
) -> float:
    """Effective km/L when cruising at ``speed_kmh``."""
    return profile.avg_efficiency_km_per_liter * efficiency_factor(speed_kmh, settings)
