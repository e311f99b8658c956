"""FastAPI server — JSON surface for the battery noise lab.

Run with:
    uvicorn battery_lab.api.server:app --reload --port 8000

Or:
    python -m battery_lab.api.server

Endpoints:
    GET  /scenario/defaults    — complete default scenario as JSON
    GET  /schema               — full JSON Schema for Scenario inputs
    POST /simulate/lifetime    — white-vs-colored population lifetime study
    POST /simulate/discharge   — one discharge curve + residual analysis
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from battery_lab import __version__
from battery_lab.api.narrative import generate_discharge_narrative, generate_lifetime_narrative
from battery_lab.config.scenario import Scenario
from battery_lab.engine.orchestrator import run_discharge_experiment, run_lifetime_experiment
from battery_lab.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Battery Noise Lab API",
    version=__version__,
    description=(
        "Stochastic battery-health lab: compare cell lifetimes under white vs "
        "correlated (AR(1)) noise, and test whether a discharge curve's "
        "residuals are structured or noise-like."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate/lifetime. Missing fields use defaults."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. "
                    "Example: {'lifetime': {'unit_count': 100}, 'simulation': {'random_seed': 7}}",
    )


class DischargeRequest(SimulateRequest):
    """Request body for /simulate/discharge."""
    stressed: bool = Field(
        default=False,
        description="Amplify the configured noise to push the curve into a chaotic regime",
    )


class SimulateResponse(BaseModel):
    """Result model dump plus its plain-English narrative."""
    result: dict[str, Any]
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults.

    Raises ``HTTPException(422)`` when the merged scenario is invalid.
    """
    defaults = Scenario().model_dump()
    _deep_merge(defaults, overrides)
    try:
        return Scenario(**defaults)
    except ValidationError as exc:
        logger.info("rejected scenario: %s", exc.errors(include_url=False))
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_input=False),
        ) from exc


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
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all input parameters with types, defaults, constraints."""
    return Scenario.model_json_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return Scenario().model_dump()


@app.post("/simulate/lifetime", response_model=SimulateResponse)
def simulate_lifetime(req: SimulateRequest):
    """Run the white-vs-colored Monte-Carlo lifetime study.

    Example minimal request:
    ```json
    {"scenario": {"lifetime": {"unit_count": 50, "correlation": 0.9}}}
    ```
    """
    scenario = _build_scenario(req.scenario)
    try:
        result = run_lifetime_experiment(scenario)
    except InvalidConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return SimulateResponse(
        result=result.model_dump(),
        narrative=generate_lifetime_narrative(result),
    )


@app.post("/simulate/discharge", response_model=SimulateResponse)
def simulate_discharge_curve(req: DischargeRequest):
    """Simulate one discharge curve and classify its residuals."""
    scenario = _build_scenario(req.scenario)
    try:
        result = run_discharge_experiment(scenario, stressed=req.stressed)
    except InvalidConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return SimulateResponse(
        result=result.model_dump(),
        narrative=generate_discharge_narrative(result),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "battery_lab.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
