"""Time-unit normalizer — day / week / month / year onto a common day count.

A month is ``days_per_year / 12`` (30.4375 days by default) everywhere, so
a 12-month plan and a 1-year plan produce the same totals.
"""

from __future__ import annotations

from fuel_planner.config.engine import EngineSettings
from fuel_planner.config.plan import Duration, normalize_unit
from fuel_planner.engine.validation import require_non_negative

_DEFAULT_SETTINGS = EngineSettings()


def days_per_unit(unit: str, settings: EngineSettings | None = None) -> float:
    """Day count of one ``unit`` (plurals accepted)."""
    s = settings or _DEFAULT_SETTINGS
    unit = normalize_unit(unit)
    if unit == "day":
        return 1.0
    if unit == "week":
        return s.days_per_week
    if unit == "month":
        return s.days_per_month
    return s.days_per_year


def to_days(duration: Duration, settings: EngineSettings | None = None) -> float:
    """Length of ``duration`` in days."""
    value = require_non_negative("duration.value", duration.value)
    return value * days_per_unit(duration.unit, settings)


def rate_per_day(frequency: Duration, settings: EngineSettings | None = None) -> float:
    """Events per day for a frequency like ``{value: 5, unit: week}``."""
    value = require_non_negative("frequency.value", frequency.value)
    return value / days_per_unit(frequency.unit, settings)


def occurrences(period: str, days: float, settings: EngineSettings | None = None) -> float:
    """How many (possibly fractional) ``period``s fit into ``days``."""
    return days / days_per_unit(period, settings)


def is_coarser(unit: str, than: str, settings: EngineSettings | None = None) -> bool:
    """True when one ``unit`` lasts longer than one ``than``."""
    return days_per_unit(unit, settings) > days_per_unit(than, settings)


def plural(unit: str, value: float) -> str:
    """``"month"`` → ``"months"`` unless ``value`` is exactly 1."""
    unit = normalize_unit(unit)
    return unit if value == 1 else f"{unit}s"
