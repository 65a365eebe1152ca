"""Tests for engine/time_units.py — day counts and unit normalization."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from fuel_planner.config import Duration, EngineSettings, normalize_unit
from fuel_planner.engine import time_units
from fuel_planner.errors import InvalidInput


class TestDaysPerUnit:

    def test_default_day_counts(self):
        assert time_units.days_per_unit("day") == 1
        assert time_units.days_per_unit("week") == 7
        assert time_units.days_per_unit("month") == 30.4375
        assert time_units.days_per_unit("year") == 365.25

    def test_month_is_a_twelfth_of_a_year(self):
        s = EngineSettings(days_per_year=365)
        assert time_units.days_per_unit("month", s) == 365 / 12

    def test_plural_and_case_accepted(self):
        assert time_units.days_per_unit("Weeks") == 7
        assert time_units.days_per_unit(" days ") == 1

    def test_unknown_unit_rejected(self):
        with pytest.raises(InvalidInput, match="unknown time unit"):
            time_units.days_per_unit("fortnight")


class TestConversions:

    def test_to_days(self):
        assert time_units.to_days(Duration(value=3, unit="week")) == 21

    def test_rate_per_day(self):
        assert math.isclose(time_units.rate_per_day(Duration(value=5, unit="week")), 5 / 7)

    def test_occurrences_fractional(self):
        # Half a year of days holds 0.5 yearly occurrences
        assert time_units.occurrences("year", 365.25 / 2) == 0.5

    def test_twelve_months_equal_one_year(self):
        twelve_months = time_units.to_days(Duration(value=12, unit="months"))
        one_year = time_units.to_days(Duration(value=1, unit="year"))
        assert math.isclose(twelve_months, one_year)

    def test_is_coarser(self):
        assert time_units.is_coarser("week", "day")
        assert not time_units.is_coarser("week", "month")
        assert not time_units.is_coarser("month", "month")

    def test_plural(self):
        assert time_units.plural("month", 1) == "month"
        assert time_units.plural("month", 3) == "months"
        assert time_units.plural("weeks", 0) == "weeks"


class TestDurationModel:

    def test_unit_normalized_on_input(self):
        assert Duration(value=2, unit="Months").unit == "month"

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValidationError):
            Duration(value=2, unit="decade")

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError):
            Duration(value=-1, unit="day")

    def test_normalize_rejects_non_string(self):
        with pytest.raises(InvalidInput):
            normalize_unit(7)
