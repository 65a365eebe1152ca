"""Long-term plan — recurring trips, recurring expenses, per-trip expenses.

Everything is reconciled on a day basis:

    total_days   = plan value × days(plan unit)
    trips/day    = frequency value ÷ days(frequency unit)
    total_trips  = total_days × trips/day

Recurring expenses are charged per (fractional) occurrence of their period
across the plan's days; per-trip expenses once per trip.  The monthly
average divides by ``total_days ÷ days(month)`` so month-based and
year-based plans agree.
"""

from __future__ import annotations

import logging
import math

from fuel_planner.config.engine import EngineSettings
from fuel_planner.config.plan import LongTermPlanParams
from fuel_planner.engine import time_units
from fuel_planner.engine.efficiency import check_speed, speed_adjusted_efficiency
from fuel_planner.engine.validation import require_finite_results, require_non_negative
from fuel_planner.models.results import (
    LongTermPlanBreakdown,
    Report,
    ReportRow,
    VehicleProfile,
)

logger = logging.getLogger(__name__)


def compute_long_term_plan(
    profile: VehicleProfile,
    params: LongTermPlanParams,
    settings: EngineSettings | None = None,
) -> LongTermPlanBreakdown:
    """Compute every total of a long-term plan.

    Parameters
    ----------
    profile : VehicleProfile
        Vehicle figures.
    params : LongTermPlanParams
        Trip distance, plan length, trip frequency, speed and expense lists.
    settings : EngineSettings | None
        Tunables. None = defaults.

    Returns
    -------
    LongTermPlanBreakdown
        All intermediate and final totals, unrounded.
    """
    s = settings or EngineSettings()

    distance_per_trip = require_non_negative("distance_per_trip_km", params.distance_per_trip_km)
    plan_value = require_non_negative("plan_duration.value", params.plan_duration.value)
    require_non_negative("trip_frequency.value", params.trip_frequency.value)
    income_percentage = require_non_negative("income_percentage", params.income_percentage)
    speed = check_speed(params.average_speed_kmh, s)

    if time_units.is_coarser(params.trip_frequency.unit, params.plan_duration.unit, s):
        logger.warning(
            "Trip frequency per %s is coarser than a plan measured in %ss; "
            "the result uses fractional trips",
            params.trip_frequency.unit, params.plan_duration.unit,
        )

    # ── Calendar ───────────────────────────────────────────────────────
    total_days = time_units.to_days(params.plan_duration, s)
    trips_per_day = time_units.rate_per_day(params.trip_frequency, s)
    total_trips = total_days * trips_per_day
    total_months = time_units.occurrences("month", total_days, s)

    # ── Fuel ───────────────────────────────────────────────────────────
    adjusted_efficiency = speed_adjusted_efficiency(profile, speed, s)
    total_distance = distance_per_trip * total_trips
    total_liters = total_distance / adjusted_efficiency
    total_fuel_cost = total_liters * profile.fuel_price_per_liter

    # ── Expenses ───────────────────────────────────────────────────────
    total_recurring_cost = math.fsum(
        require_non_negative(f"recurring_expenses[{i}].cost", expense.cost)
        * time_units.occurrences(expense.period, total_days, s)
        for i, expense in enumerate(params.recurring_expenses)
    )
    per_trip_cost = math.fsum(
        require_non_negative(f"trip_expenses[{i}].cost", expense.cost)
        for i, expense in enumerate(params.trip_expenses)
    )
    total_trip_expense_cost = per_trip_cost * total_trips

    # ── Totals ─────────────────────────────────────────────────────────
    grand_total = total_fuel_cost + total_recurring_cost + total_trip_expense_cost
    avg_monthly_cost = grand_total / total_months if total_months > 0 else 0.0
    required_income = (
        avg_monthly_cost / income_percentage * 100
        if income_percentage > 0 and avg_monthly_cost > 0
        else 0.0
    )
    require_finite_results(
        total_days_in_plan=total_days,
        total_trips=total_trips,
        total_distance_km=total_distance,
        total_liters=total_liters,
        total_fuel_cost=total_fuel_cost,
        total_recurring_cost=total_recurring_cost,
        total_trip_expense_cost=total_trip_expense_cost,
        grand_total=grand_total,
        avg_monthly_cost=avg_monthly_cost,
        required_income=required_income,
    )

    logger.debug(
        "Long-term plan: %.2f days, %.2f trips, %.2f km, grand total %.2f %s",
        total_days, total_trips, total_distance, grand_total, params.currency,
    )

    return LongTermPlanBreakdown(
        plan_duration_value=plan_value,
        plan_duration_unit=params.plan_duration.unit,
        total_days_in_plan=total_days,
        trips_per_day=trips_per_day,
        total_trips=total_trips,
        total_months=total_months,
        speed_kmh=speed,
        adjusted_efficiency=adjusted_efficiency,
        total_distance_km=total_distance,
        total_liters=total_liters,
        total_fuel_cost=total_fuel_cost,
        total_recurring_cost=total_recurring_cost,
        total_trip_expense_cost=total_trip_expense_cost,
        grand_total=grand_total,
        avg_monthly_cost=avg_monthly_cost,
        required_income=required_income,
        income_percentage=income_percentage,
        currency=params.currency,
    )


def long_term_report(breakdown: LongTermPlanBreakdown) -> Report:
    cur = breakdown.currency
    period_unit = time_units.plural(breakdown.plan_duration_unit, breakdown.plan_duration_value)
    return Report(
        title="Long-Term Plan",
        rows=[
            ReportRow(name="Planning Period", value=breakdown.plan_duration_value, unit=period_unit),
            ReportRow(name="Total Trips", value=breakdown.total_trips, unit="trips"),
            ReportRow(name="Total Distance", value=breakdown.total_distance_km, unit="km"),
            ReportRow(name="Total Fuel Needed", value=breakdown.total_liters, unit="L"),
            ReportRow(name="Total Fuel Cost", value=breakdown.total_fuel_cost, unit=cur),
            ReportRow(name="Total Recurring Expenses", value=breakdown.total_recurring_cost, unit=cur),
            ReportRow(name="Total Per-Trip Expenses", value=breakdown.total_trip_expense_cost, unit=cur),
            ReportRow(name="Grand Total Cost", value=breakdown.grand_total, unit=cur),
            ReportRow(name="Avg. Monthly Cost", value=breakdown.avg_monthly_cost, unit=cur),
            ReportRow(
                name="Required Monthly Income",
                value=breakdown.required_income,
                unit=f"{cur} ({breakdown.income_percentage:g}% target)",
            ),
        ],
    )


def long_term_plan(
    profile: VehicleProfile,
    params: LongTermPlanParams,
    settings: EngineSettings | None = None,
) -> Report:
    """Long-term plan report, from planning period down to required income."""
    return long_term_report(compute_long_term_plan(profile, params, settings))
