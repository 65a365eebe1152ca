"""Tests for engine/orchestrator.py — one scenario, every report."""

from __future__ import annotations

import pytest

from fuel_planner.config import Scenario, VehicleConfig
from fuel_planner.engine.orchestrator import run_calculator
from fuel_planner.errors import InvalidInput


def test_all_reports(scenario: Scenario):
    result = run_calculator(scenario)
    assert [r.title for r in result.reports()] == ["Vehicle Profile", "Single Trip", "Long-Term Plan"]
    # samples [14, 16] average to 15
    assert result.profile.avg_efficiency_km_per_liter == 15
    assert result.single_trip is not None
    assert result.single_trip.cost == 200
    assert result.long_term is not None
    assert result.speed_sweep is None


def test_default_scenario_runs():
    result = run_calculator(Scenario())
    assert result.vehicle_report.value("Cost to Fill Tank") == 900
    assert result.long_term_report is not None


def test_sections_are_optional(scenario: Scenario):
    vehicle_only = scenario.model_copy(update={"single_trip": None, "plan": None})
    result = run_calculator(vehicle_only)
    assert [r.title for r in result.reports()] == ["Vehicle Profile"]
    assert result.single_trip is None
    assert result.long_term is None


def test_speed_sweep_on_request(scenario: Scenario):
    result = run_calculator(scenario.model_copy(update={"include_speed_sweep": True}))
    assert result.speed_sweep is not None
    # 70 and 80 km/h tie around the 75 km/h optimum; the first one wins
    assert result.speed_sweep.cheapest_speed_kmh == 70


def test_invalid_vehicle_aborts_run(scenario: Scenario):
    bad = scenario.model_copy(update={"vehicle": VehicleConfig(efficiency_samples=[])})
    with pytest.raises(InvalidInput):
        run_calculator(bad)


def test_currency_label_propagates(scenario: Scenario):
    result = run_calculator(scenario.model_copy(update={"currency": "USD"}))
    assert result.vehicle_report.get("Cost to Fill Tank").unit == "USD"
    assert result.single_trip_report is not None
    assert result.single_trip_report.get("Estimated Cost").unit == "USD"
    assert result.long_term_report is not None
    assert result.long_term_report.get("Grand Total Cost").unit == "USD"
    assert result.long_term.currency == "USD"


def test_currency_reaches_speed_sweep(scenario: Scenario):
    result = run_calculator(scenario.model_copy(update={"currency": "USD", "include_speed_sweep": True}))
    assert result.speed_sweep is not None
    assert result.speed_sweep.currency == "USD"
