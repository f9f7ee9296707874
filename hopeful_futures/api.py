"""
Hopeful Futures JSON API (FastAPI).
Three thin routes: validate the body, delegate to an agent, return the record.
Upstream failures never surface here; agents always return fallback content.
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from hopeful_futures import config
from hopeful_futures.agents import run_job_search_agent, run_simplify_agent, run_training_plan_agent
from hopeful_futures.schemas.job_listing import JobSearchRequest
from hopeful_futures.schemas.simplified_job import SimplifyJobRequest
from hopeful_futures.schemas.training_plan import TrainingPlanRequest
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Hopeful Futures API", version="0.1.0")


class BadRequestError(Exception):
    """Malformed request body; answered with 400 and the message verbatim."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@app.exception_handler(BadRequestError)
async def _bad_request_handler(request: Request, exc: BadRequestError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=400)


async def _json_object(request: Request) -> dict[str, Any]:
    try:
        payload = await request.json()
    except ValueError:
        raise BadRequestError("Invalid JSON body.")
    if not isinstance(payload, dict):
        raise BadRequestError("Invalid JSON body.")
    return payload


def _validate(model: type[BaseModel], payload: dict[str, Any], message: str) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.info("Request validation failed for %s: %s", model.__name__, e)
        raise BadRequestError(message)


def _provided(value: Any) -> bool:
    """Truthy the way the form client sees it: an empty list still counts."""
    return isinstance(value, (list, dict)) or bool(value)


def _respond(record: BaseModel) -> JSONResponse:
    return JSONResponse(record.model_dump(mode="json", by_alias=True, exclude_none=True))


@app.post("/api/search-jobs")
async def search_jobs(request: Request) -> JSONResponse:
    payload = await _json_object(request)
    location: Optional[Any] = payload.get("location")
    if not isinstance(location, str) or not location.strip():
        raise BadRequestError("Location is required.")
    search = _validate(JobSearchRequest, payload, "Location is required.")
    return _respond(await run_job_search_agent(search))


@app.post("/api/simplify-job")
async def simplify_job(request: Request) -> JSONResponse:
    payload = await _json_object(request)
    description = payload.get("jobDescription")
    if not isinstance(description, str) or not description:
        raise BadRequestError("jobDescription is required.")
    simplify = _validate(SimplifyJobRequest, payload, "Invalid request body.")
    return _respond(await run_simplify_agent(simplify))


@app.post("/api/training-plan")
async def training_plan(request: Request) -> JSONResponse:
    payload = await _json_object(request)
    if not _provided(payload.get("jobTitle")) and not _provided(payload.get("currentSkills")):
        raise BadRequestError("Provide at least jobTitle or currentSkills.")
    plan_request = _validate(TrainingPlanRequest, payload, "Invalid request body.")
    return _respond(await run_training_plan_agent(plan_request))


@app.get("/api/health")
async def health() -> dict[str, Any]:
    return {"status": "ok", "geminiConfigured": bool(config.GEMINI_API_KEY)}
