"""FastAPI application for the e-signature ROI calculator."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import BackgroundTasks, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from esign_roi import __version__
from esign_roi.assumptions import AssumptionOverrides, apply_overrides, get_default_catalog
from esign_roi.config.settings import Settings
from esign_roi.engine.calculator import ROICalculator
from esign_roi.engine.serialization import (
    cost_assumptions_to_dict,
    input_params_from_dict,
    result_to_dict,
)
from esign_roi.models.inputs import CostAssumptions
from esign_roi.persistence import (
    CalculationTracker,
    RequestMetadata,
    SessionStore,
    create_supabase_client,
)

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="E-Signature ROI API", version=__version__)

# CORS — allow the calculator front-end
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

calculator = ROICalculator()

# None when Supabase is not configured; collaborators degrade on their own.
db_client = create_supabase_client(settings)

tracker = CalculationTracker(
    client=db_client,
    table=settings.tracking_table,
    timeout_seconds=settings.db_timeout_seconds,
    max_retries=settings.tracking_max_retries,
    retry_backoff_seconds=settings.tracking_retry_backoff_seconds,
)

session_store = SessionStore(
    client=db_client,
    table=settings.sessions_table,
    user_id=settings.anonymous_user_id,
    timeout_seconds=settings.db_timeout_seconds,
)


class CalculateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input_params: dict[str, Any] = Field(alias="inputParams")
    cost_assumptions: Optional[AssumptionOverrides] = Field(default=None, alias="costAssumptions")
    track: bool = True


class TrackCalculationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input_params: Optional[dict[str, Any]] = Field(default=None, alias="inputParams")
    results: Optional[dict[str, Any]] = None


class SaveCalculationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_name: str = Field(alias="sessionName", min_length=1)
    input_params: dict[str, Any] = Field(alias="inputParams")
    results: dict[str, Any]


@app.get("/api/assumptions")
async def get_assumptions():
    """Stock cost assumptions with their display metadata."""
    catalog = get_default_catalog()
    return {
        "catalog": catalog.model_dump(),
        "defaults": cost_assumptions_to_dict(CostAssumptions()),
    }


@app.post("/api/calculate")
async def calculate(body: CalculateRequest, request: Request, background_tasks: BackgroundTasks):
    """Run the ROI engine; tracking happens after the response is sent."""
    inputs = input_params_from_dict(body.input_params)
    assumptions = apply_overrides(CostAssumptions(), body.cost_assumptions)
    result = calculator.calculate(inputs, assumptions)

    payload = result_to_dict(result)
    payload["assumptions"] = cost_assumptions_to_dict(assumptions)

    if body.track and tracker.enabled:
        tracked_results = {
            "annualCosts": payload["annualCosts"],
            "roiMetrics": payload["roiMetrics"],
            "benefits": payload["benefits"],
        }
        background_tasks.add_task(
            tracker.track,
            body.input_params,
            tracked_results,
            RequestMetadata.from_headers(request.headers),
        )

    return payload


@app.post("/api/track-calculation")
async def track_calculation(body: TrackCalculationRequest, request: Request):
    """Record a calculation made by the front-end."""
    if not body.input_params or not body.results:
        logger.error(
            "Missing required fields: inputParams=%s, results=%s",
            bool(body.input_params),
            bool(body.results),
        )
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request: missing inputParams or results"},
        )

    outcome = await tracker.track(
        body.input_params,
        body.results,
        RequestMetadata.from_headers(request.headers),
    )
    status_code, content = outcome.to_response()
    return JSONResponse(status_code=status_code, content=content)


@app.post("/api/calculations")
async def save_calculation(body: SaveCalculationRequest):
    """Save a named calculation session."""
    if not session_store.enabled:
        raise HTTPException(status_code=503, detail="Saved sessions are not configured")

    saved = await session_store.save(body.session_name, body.input_params, body.results)
    if saved is None:
        raise HTTPException(status_code=502, detail="Failed to save calculation")
    return saved.to_dict()


@app.get("/api/calculations")
async def list_calculations():
    """Saved sessions, most recent first."""
    saved = await session_store.load()
    return [s.to_dict() for s in saved]


@app.delete("/api/calculations/{calculation_id}")
async def delete_calculation(calculation_id: str):
    deleted = await session_store.delete(calculation_id)
    return {"deleted": deleted}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("esign_roi.main:app", host="0.0.0.0", port=8000)
