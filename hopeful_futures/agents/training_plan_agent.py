"""Training Plan Agent: phased skills plan for a target job."""

from typing import Optional

import httpx
from pydantic import ValidationError

from hopeful_futures import config
from hopeful_futures.schemas.simplified_job import Provider
from hopeful_futures.schemas.training_plan import TrainingPlan, TrainingPlanRequest
from hopeful_futures.services.fallbacks import (
    FALLBACK_ENCOURAGEMENT,
    FALLBACK_SUCCESS_METRICS,
    FALLBACK_SUMMARY,
    fallback_training_phases,
    fallback_training_plan,
)
from hopeful_futures.services.gemini_client import (
    GenerativeCallError,
    UnparsableResponseError,
    generate_json,
)
from hopeful_futures.services.prompt_builder import build_training_plan_prompt
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)


def backfill_training_plan(parsed: dict) -> TrainingPlan:
    """Build a plan from model output; absent or empty parts come from the static plan."""
    plan = TrainingPlan(
        summary=parsed.get("summary") or FALLBACK_SUMMARY,
        phases=parsed.get("phases"),
        success_metrics=parsed.get("successMetrics"),
        encouragement=parsed.get("encouragement") or FALLBACK_ENCOURAGEMENT,
        provider=Provider.GEMINI,
    )
    updates = {}
    if not plan.phases:
        updates["phases"] = fallback_training_phases()
    if not plan.success_metrics:
        updates["success_metrics"] = list(FALLBACK_SUCCESS_METRICS)
    return plan.model_copy(update=updates) if updates else plan


async def run_training_plan_agent(
    request: TrainingPlanRequest,
    client: Optional[httpx.AsyncClient] = None,
) -> TrainingPlan:
    """Return a Gemini plan, or the static fallback plan on any failure."""
    if not config.GEMINI_API_KEY:
        logger.info("GEMINI_API_KEY is not set; serving fallback training plan")
        return fallback_training_plan()

    try:
        parsed = await generate_json(
            build_training_plan_prompt(request),
            model=config.GEMINI_TRAINING_MODEL,
            temperature=config.TRAINING_PLAN_TEMPERATURE,
            client=client,
            expect=dict,
        )
        if not isinstance(parsed, dict):
            raise UnparsableResponseError("Expected a JSON object for the training plan")
        return backfill_training_plan(parsed)
    except GenerativeCallError as e:
        logger.warning("Training plan via Gemini failed: %s", e)
    except ValidationError as e:
        logger.warning("Training plan failed validation: %s", e)
    except Exception as e:
        logger.exception("Training plan error: %s", e)
    return fallback_training_plan()
