"""Numeric precondition checks shared by the engine operations."""

from __future__ import annotations

import math
from numbers import Real

from fuel_planner.errors import InvalidInput


def require_number(name: str, value: object) -> float:
    """Return ``value`` as a finite float, or raise ``InvalidInput``."""
    if value is None:
        raise InvalidInput("is required", field=name)
    # bool is an int subclass; True is not a price.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(f"must be a number, got {value!r}", field=name)
    number = float(value)
    if not math.isfinite(number):
        raise InvalidInput(f"must be finite, got {number}", field=name)
    return number


def require_positive(name: str, value: object) -> float:
    number = require_number(name, value)
    if number <= 0:
        raise InvalidInput(f"must be greater than 0, got {number}", field=name)
    return number


def require_non_negative(name: str, value: object) -> float:
    number = require_number(name, value)
    if number < 0:
        raise InvalidInput(f"must not be negative, got {number}", field=name)
    return number


def require_finite_results(**results: float) -> None:
    """Raise ``InvalidInput`` for the first computed total that overflowed."""
    for name, value in results.items():
        if not math.isfinite(value):
            raise InvalidInput(
                f"result is out of range ({value}); the inputs are too large",
                field=name,
            )
