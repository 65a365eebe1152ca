"""FastAPI server — HTTP access to the fuel-cost calculator.

Run with:
    uvicorn fuel_planner.api.server:app --reload --port 8000

Or:
    python -m fuel_planner.api.server

Endpoints:
    GET  /context                — self-describing manifest (inputs + formulas)
    GET  /schema                 — full JSON Schema for Scenario inputs
    GET  /scenario/defaults      — complete default scenario as JSON
    POST /calculate              — run every report (partial or full Scenario)
    POST /calculate/speed-sweep  — plan totals across a speed grid
    POST /calculate/narrative    — plain-text rendering + headline numbers
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from fuel_planner.api.context import build_context, get_default_scenario, get_scenario_schema
from fuel_planner.api.narrative import generate_narrative
from fuel_planner.config.scenario import Scenario
from fuel_planner.engine.orchestrator import run_calculator
from fuel_planner.engine.profile import profile_from_config
from fuel_planner.engine.speed_sweep import speed_sweep
from fuel_planner.errors import InvalidInput

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Fuel Planner API",
    version="1.0",
    description=(
        "Fuel-cost calculator: vehicle profile, single-trip cost, long-term "
        "recurring-trip projection and cost-vs-speed sweep. "
        "Start by calling GET /context to see every input."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /calculate. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults; "
                    "set 'single_trip' or 'plan' to null to skip that report. "
                    "Example: {'vehicle': {'fuel_price_per_liter': 17.5}, 'plan': {'average_speed_kmh': 100}}",
    )


class SpeedSweepRequest(BaseModel):
    """Request body for /calculate/speed-sweep."""
    scenario: dict[str, Any] = Field(default_factory=dict)
    speeds: list[float] | None = Field(
        default=None,
        description="Speeds to evaluate (km/h). Default: 30, 40, …, 140, clipped to any speed bounds.",
    )


class CalculateResponse(BaseModel):
    """Response from /calculate."""
    result: dict[str, Any]
    reports: dict[str, dict[str, dict[str, Any]]]
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = get_default_scenario()
    _deep_merge(defaults, overrides)
    try:
        return Scenario(**defaults)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "Fuel Planner API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for input schemas only, 'full' adds formulas and conventions",
    ),
):
    """Self-describing context manifest."""
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all inputs with types, defaults, constraints."""
    return get_scenario_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return get_default_scenario()


@app.post("/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest):
    """Run every report the scenario asks for.

    Example minimal request:
    ```json
    {"scenario": {"vehicle": {"efficiency_samples": [14, 16]}, "single_trip": {"distance_km": 300}}}
    ```
    """
    scenario = _build_scenario(req.scenario)
    result = run_calculator(scenario)
    reports = {report.title: report.as_dict() for report in result.reports()}
    return CalculateResponse(
        result=result.model_dump(),
        reports=reports,
        narrative=generate_narrative(result),
    )


@app.post("/calculate/speed-sweep")
def calculate_speed_sweep(req: SpeedSweepRequest):
    """Re-run the scenario's plan at each speed — data for a cost-vs-speed chart."""
    scenario = _build_scenario(req.scenario)
    if scenario.plan is None:
        raise InvalidInput("a plan is required for a speed sweep", field="plan")
    profile = profile_from_config(scenario.vehicle)
    sweep = speed_sweep(profile, scenario.plan_in_currency(), req.speeds, scenario.settings)
    return sweep.model_dump()


@app.post("/calculate/narrative")
def calculate_narrative(req: CalculateRequest):
    """Run the scenario and return only the plain-text rendering."""
    scenario = _build_scenario(req.scenario)
    result = run_calculator(scenario)
    return {
        "narrative": generate_narrative(result),
        "headline_metrics": {
            "fill_tank_cost": round(result.profile.fill_tank_cost, 2),
            "single_trip_cost": round(result.single_trip.cost, 2) if result.single_trip else None,
            "plan_grand_total": round(result.long_term.grand_total, 2) if result.long_term else None,
            "plan_avg_monthly_cost": round(result.long_term.avg_monthly_cost, 2) if result.long_term else None,
        },
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "fuel_planner.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
