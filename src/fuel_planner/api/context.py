"""Context manifest — makes the calculator API self-describing.

Two detail levels:
  - ``compact``: input sections with parameter schemas only
  - ``full``:    adds the formulas and the speed/time-unit conventions
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from fuel_planner.config import (
    Duration,
    EngineSettings,
    LongTermPlanParams,
    RecurringExpense,
    Scenario,
    SingleTripConfig,
    TripExpense,
    VehicleConfig,
)


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one input section (e.g. vehicle, plan)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EndpointInfo(BaseModel):
    """Description of one API endpoint."""
    method: str
    path: str
    description: str


class CalculatorContext(BaseModel):
    """Self-describing context for API clients."""
    name: str
    version: str
    description: str
    key_formulas: list[dict[str, str]]
    conventions: str
    input_sections: list[SectionSchema]
    endpoints: list[EndpointInfo]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        if field_info.is_required():
            default_val = None
        elif field_info.default_factory is not None:
            default_val = field_info.default_factory()
        else:
            default_val = field_info.default
        if isinstance(default_val, BaseModel):
            default_val = default_val.model_dump()
        elif isinstance(default_val, list):
            default_val = [v.model_dump() if isinstance(v, BaseModel) else v for v in default_val]

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    for m in getattr(field_info, "metadata", ()):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_KEY_FORMULAS = [
    {
        "name": "Speed-adjusted efficiency",
        "formula": "avg_efficiency × max(1 − efficiency_drop_factor × (speed − optimal_speed)², efficiency_floor)",
        "meaning": "Efficiency peaks at the optimal speed and never drops below the floor fraction",
    },
    {
        "name": "Single-trip cost",
        "formula": "distance / adjusted_efficiency × fuel_price",
        "meaning": "Fuel cost of one trip at the given average speed",
    },
    {
        "name": "Total trips",
        "formula": "plan_value × days(plan_unit) × frequency_value / days(frequency_unit)",
        "meaning": "Plan length and trip frequency reconciled on a day basis",
    },
    {
        "name": "Recurring cost",
        "formula": "Σ cost × total_days / days(period)",
        "meaning": "Each recurring expense is charged pro rata per occurrence of its period",
    },
    {
        "name": "Required income",
        "formula": "avg_monthly_cost / income_percentage × 100",
        "meaning": "Monthly income at which the plan costs the target share of income",
    },
]

_CONVENTIONS = """
Time units: day = 1, week = 7, month = 365.25 / 12 = 30.4375, year = 365.25 days.
Plurals ("weeks") are accepted. Fractional trips and fractional expense periods are
kept, never rounded.

Speed: any non-negative speed is accepted by default and relies on the efficiency
floor. Set settings.min_speed_kmh / settings.max_speed_kmh to reject speeds outside
a range (e.g. 50–120 km/h).

Currency: a display label only, never converted.
"""

_ENDPOINTS = [
    EndpointInfo(method="GET", path="/context", description="This manifest"),
    EndpointInfo(method="GET", path="/schema", description="JSON Schema of the Scenario input"),
    EndpointInfo(method="GET", path="/scenario/defaults", description="Default Scenario as JSON"),
    EndpointInfo(method="POST", path="/calculate", description="Run every report for a partial or full Scenario"),
    EndpointInfo(method="POST", path="/calculate/speed-sweep", description="Plan totals across a speed grid"),
    EndpointInfo(method="POST", path="/calculate/narrative", description="Plain-text rendering of all reports"),
]

_INPUT_SECTIONS: list[tuple[str, type[BaseModel], str]] = [
    ("vehicle", VehicleConfig, "Fuel price, tank capacity and measured efficiency"),
    ("single_trip", SingleTripConfig, "One trip to price (omit or null to skip)"),
    ("plan", LongTermPlanParams, "Recurring-trip plan (omit or null to skip)"),
    ("plan.plan_duration / plan.trip_frequency", Duration, "A value and a time unit"),
    ("plan.recurring_expenses[]", RecurringExpense, "Cost repeating every period"),
    ("plan.trip_expenses[]", TripExpense, "Cost paid once per trip"),
    ("settings", EngineSettings, "Speed penalty curve, speed bounds and calendar constants"),
]


def build_context(detail_level: Literal["compact", "full"] = "full") -> CalculatorContext:
    """Build the self-describing context manifest."""
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]
    full = detail_level == "full"
    return CalculatorContext(
        name="Fuel Planner",
        version="1.0",
        description=(
            "Fuel-cost calculator: vehicle profile, single-trip cost, long-term "
            "recurring-trip projection and cost-vs-speed sweep."
        ),
        key_formulas=_KEY_FORMULAS if full else [],
        conventions=_CONVENTIONS.strip() if full else "",
        input_sections=sections,
        endpoints=_ENDPOINTS,
    )


def get_scenario_schema() -> dict:
    """Return the full JSON Schema for Scenario."""
    return Scenario.model_json_schema()


def get_default_scenario() -> dict:
    """Return default Scenario as a JSON-serializable dict."""
    return Scenario().model_dump()
