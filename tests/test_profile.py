"""Tests for engine/profile.py — construction rules and the profile report."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from fuel_planner.config import EngineSettings, VehicleConfig
from fuel_planner.engine.profile import (
    create_vehicle_profile,
    mean_efficiency,
    profile_from_config,
    vehicle_profile,
)
from fuel_planner.errors import InvalidInput
from fuel_planner.models.results import VehicleProfile


# ═══════════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════════

class TestCreateVehicleProfile:

    def test_single_sample_list(self):
        p = create_vehicle_profile(20, 45, [15])
        assert p.avg_efficiency_km_per_liter == 15
        assert p.fuel_price_per_liter == 20
        assert p.max_fuel_tank_liters == 45

    def test_scalar_efficiency(self):
        p = create_vehicle_profile(20, 45, 12.5)
        assert p.avg_efficiency_km_per_liter == 12.5

    def test_samples_are_averaged(self):
        # (14 + 15 + 16 + 19) / 4 = 16
        p = create_vehicle_profile(20, 45, [14, 15, 16, 19])
        assert p.avg_efficiency_km_per_liter == 16

    def test_tuple_of_samples(self):
        p = create_vehicle_profile(20, 45, (10.0, 20.0))
        assert p.avg_efficiency_km_per_liter == 15

    def test_zero_price_rejected(self):
        with pytest.raises(InvalidInput) as exc:
            create_vehicle_profile(0, 45, [15])
        assert exc.value.field == "fuel_price_per_liter"

    def test_negative_capacity_rejected(self):
        with pytest.raises(InvalidInput) as exc:
            create_vehicle_profile(20, -1, [15])
        assert exc.value.field == "max_fuel_tank_liters"

    def test_missing_price_rejected(self):
        with pytest.raises(InvalidInput, match="required"):
            create_vehicle_profile(None, 45, [15])

    def test_non_numeric_price_rejected(self):
        with pytest.raises(InvalidInput, match="must be a number"):
            create_vehicle_profile("20", 45, [15])

    def test_bool_capacity_rejected(self):
        with pytest.raises(InvalidInput):
            create_vehicle_profile(20, True, [15])

    def test_nan_price_rejected(self):
        with pytest.raises(InvalidInput, match="finite"):
            create_vehicle_profile(float("nan"), 45, [15])

    def test_infinite_capacity_rejected(self):
        with pytest.raises(InvalidInput, match="finite"):
            create_vehicle_profile(20, float("inf"), [15])

    def test_empty_samples_rejected(self):
        with pytest.raises(InvalidInput) as exc:
            create_vehicle_profile(20, 45, [])
        assert exc.value.field == "efficiency_samples"

    def test_zero_efficiency_rejected(self):
        with pytest.raises(InvalidInput):
            create_vehicle_profile(20, 45, 0)

    def test_samples_averaging_to_negative_rejected(self):
        with pytest.raises(InvalidInput, match="positive"):
            create_vehicle_profile(20, 45, [5, -15])

    def test_nan_sample_rejected(self):
        with pytest.raises(InvalidInput):
            create_vehicle_profile(20, 45, [15, float("nan")])

    def test_string_samples_rejected(self):
        with pytest.raises(InvalidInput):
            create_vehicle_profile(20, 45, "15,16")

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            create_vehicle_profile(0, 45, [15])

    def test_profile_is_immutable(self):
        p = create_vehicle_profile(20, 45, [15])
        with pytest.raises(ValidationError):
            p.fuel_price_per_liter = 30  # type: ignore[misc]

    def test_from_config(self):
        p = profile_from_config(VehicleConfig(fuel_price_per_liter=18, max_fuel_tank_liters=50, efficiency_samples=[12, 14]))
        assert p == VehicleProfile(fuel_price_per_liter=18, max_fuel_tank_liters=50, avg_efficiency_km_per_liter=13)


def test_mean_efficiency_uses_exact_sum():
    # Naive summation of ten 0.1s drifts; fsum does not.
    assert mean_efficiency([0.1] * 10) == 0.1


# ═══════════════════════════════════════════════════════════════════════════
# Derived fields and report
# ═══════════════════════════════════════════════════════════════════════════

class TestVehicleProfileReport:

    def test_derived_fields(self, profile: VehicleProfile):
        assert profile.fill_tank_cost == 900       # 20 × 45
        assert profile.theoretical_range_km == 675  # 45 × 15
        assert math.isclose(profile.consumption_l_per_100km, 100 / 15)

    def test_report_rows_in_order(self, profile: VehicleProfile):
        report = vehicle_profile(profile, "EGP")
        assert report.names() == [
            "Fuel Price",
            "Tank Capacity",
            "Cost to Fill Tank",
            "Avg. Efficiency",
            "Avg. Range",
            "Fuel Consumption",
        ]

    def test_report_values(self, profile: VehicleProfile):
        report = vehicle_profile(profile, "EGP")
        assert report.value("Fuel Price") == 20
        assert report.value("Tank Capacity") == 45
        assert report.value("Cost to Fill Tank") == 900
        assert report.value("Avg. Efficiency") == 15
        assert report.value("Avg. Range") == 675

    def test_currency_is_a_label_only(self, profile: VehicleProfile):
        egp = vehicle_profile(profile, "EGP")
        usd = vehicle_profile(profile, "USD")
        assert egp.get("Cost to Fill Tank").unit == "EGP"
        assert usd.get("Cost to Fill Tank").unit == "USD"
        assert egp.get("Fuel Price").unit == "EGP/L"
        assert [r.value for r in egp.rows] == [r.value for r in usd.rows]

    def test_efficiency_unit_names_optimal_speed(self, profile: VehicleProfile):
        report = vehicle_profile(profile, "EGP", EngineSettings(optimal_speed_kmh=75))
        assert report.get("Avg. Efficiency").unit == "km/L at 75 km/h"
        default = vehicle_profile(profile, "EGP")
        assert default.get("Avg. Efficiency").unit == "km/L at 80 km/h"

    def test_report_lookup_unknown_row(self, profile: VehicleProfile):
        with pytest.raises(KeyError):
            vehicle_profile(profile).get("Nope")
