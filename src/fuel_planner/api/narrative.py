"""Narrative generator — plain-text rendering of calculator results.

Numbers are shown with two decimals and thousands separators
(``1,234.50``); units follow the value.
"""

from __future__ import annotations

import math

from fuel_planner.models.results import CalculationResult, Report, SpeedSweepResult


def format_value(value: float) -> str:
    """``1234.5`` → ``"1,234.50"``; non-finite values are shown as-is."""
    if not math.isfinite(value):
        return str(value)
    return f"{value:,.2f}"


def format_report(report: Report) -> str:
    """One ``label: value unit`` line per row under a banner title."""
    width = max((len(row.name) for row in report.rows), default=0)
    lines = ["=" * 60, report.title.upper(), "=" * 60]
    for row in report.rows:
        lines.append(f"{row.name:<{width}} : {format_value(row.value)} {row.unit}".rstrip())
    return "\n".join(lines)


def format_speed_sweep(sweep: SpeedSweepResult) -> str:
    lines = ["=" * 60, "COST VS SPEED", "=" * 60]
    for p in sweep.points:
        marker = "  <- cheapest" if p.speed_kmh == sweep.cheapest_speed_kmh else ""
        lines.append(
            f"{p.speed_kmh:>6.0f} km/h : {format_value(p.adjusted_efficiency)} km/L, "
            f"{format_value(p.grand_total)} {sweep.currency}{marker}"
        )
    return "\n".join(lines)


def generate_narrative(result: CalculationResult) -> str:
    """Render every report of ``result``, then a short verdict on the plan."""
    sections = [format_report(report) for report in result.reports()]

    plan = result.long_term
    if plan is not None:
        verdict = [
            "",
            f"Over {format_value(plan.total_days_in_plan)} days you make "
            f"{format_value(plan.total_trips)} trips and spend "
            f"{format_value(plan.grand_total)} {plan.currency} in total.",
        ]
        if plan.grand_total > 0:
            fuel_share = plan.total_fuel_cost / plan.grand_total * 100
            verdict.append(f"Fuel is {fuel_share:.1f}% of the total cost.")
        if plan.required_income > 0:
            verdict.append(
                f"To keep this plan at {plan.income_percentage:g}% of income you need "
                f"{format_value(plan.required_income)} {plan.currency} a month."
            )
        sections.append("\n".join(verdict))

    if result.speed_sweep is not None and result.speed_sweep.points:
        sections.append(format_speed_sweep(result.speed_sweep))

    return "\n\n".join(sections)
