from __future__ import annotations

import logging
import os
import uuid
from typing import Any

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from concrete_estimator.dictionaries import DEFAULT_RATES
from concrete_estimator.estimator import EstimateEngine
from concrete_estimator.form_parser import parse_estimate_form
from concrete_estimator.logging_config import set_request_id, setup_logging
from concrete_estimator.models.estimate import EstimateRequest, EstimateTotals
from concrete_estimator.models.rates import RateProfile
from concrete_estimator.summary import build_summary, completion_percentage, cost_shares
from concrete_estimator.takeoff import TakeoffRequest, TakeoffResult, run_takeoff


class CostShareResponse(BaseModel):
    label: str
    amount: float
    percentage: float


class EstimateResponse(BaseModel):
    request_id: str
    totals: EstimateTotals
    cost_shares: list[CostShareResponse]
    completion_percentage: int
    summary: str


# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")

# Setup logging
setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)
logger = logging.getLogger(__name__)

app = FastAPI(title="Concrete Cutting Estimator API", version="0.1.0")

estimate_engine = EstimateEngine()


def _price(request: EstimateRequest) -> EstimateResponse:
    request_id = uuid.uuid4().hex
    set_request_id(request_id)

    totals = estimate_engine.estimate(request)
    logger.info(
        "Estimate computed",
        extra={
            "job_name": request.project.job_name,
            "line_items_count": request.item_count,
            "grand_total": totals.grand_total,
        },
    )
    return EstimateResponse(
        request_id=request_id,
        totals=totals,
        cost_shares=[
            CostShareResponse(label=share.label, amount=share.amount, percentage=share.percentage)
            for share in cost_shares(totals)
        ],
        completion_percentage=completion_percentage(request, totals),
        summary=build_summary(request, totals),
    )


@app.post("/v1/estimates:compute", response_model=EstimateResponse)
async def compute_estimate(request: EstimateRequest) -> EstimateResponse:
    return _price(request)


@app.post("/v1/estimates:compute-form", response_model=EstimateResponse)
async def compute_estimate_from_form(form: dict[str, Any] = Body(...)) -> EstimateResponse:
    try:
        request = parse_estimate_form(form)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        logger.warning("Rejected estimate form", extra={"errors": errors})
        raise HTTPException(status_code=422, detail=errors)
    return _price(request)


@app.get("/v1/rates/default", response_model=RateProfile)
async def default_rates() -> RateProfile:
    return DEFAULT_RATES


@app.post("/v1/takeoff", response_model=TakeoffResult)
async def takeoff(request: TakeoffRequest) -> TakeoffResult:
    return run_takeoff(request)


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok"})
