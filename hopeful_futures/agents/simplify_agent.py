"""Simplify Agent: plain-language rewrite of a job posting."""

from typing import Optional

import httpx
from pydantic import ValidationError

from hopeful_futures import config
from hopeful_futures.schemas.simplified_job import Provider, SimplifiedJob, SimplifyJobRequest
from hopeful_futures.services.fallbacks import fallback_simplified_job
from hopeful_futures.services.gemini_client import (
    GenerativeCallError,
    UnparsableResponseError,
    generate_json,
)
from hopeful_futures.services.prompt_builder import build_simplify_prompt
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)


async def run_simplify_agent(
    request: SimplifyJobRequest,
    client: Optional[httpx.AsyncClient] = None,
) -> SimplifiedJob:
    """Return a Gemini summary, or the static fallback record on any failure."""
    if not config.GEMINI_API_KEY:
        logger.info("GEMINI_API_KEY is not set; serving fallback simplified job")
        return fallback_simplified_job()

    try:
        parsed = await generate_json(
            build_simplify_prompt(request),
            model=config.GEMINI_SIMPLIFY_MODEL,
            temperature=config.SIMPLIFY_TEMPERATURE,
            client=client,
            expect=dict,
        )
        if not isinstance(parsed, dict):
            raise UnparsableResponseError("Expected a JSON object for the simplified job")
        return SimplifiedJob(
            job_title=parsed.get("jobTitle") or request.job_title or "Job Opportunity",
            simplified_description=parsed.get("simplifiedDescription") or "",
            key_qualifications=parsed.get("keyQualifications"),
            accommodations=parsed.get("accommodations"),
            training_suggestions=parsed.get("trainingSuggestions"),
            tone=parsed.get("tone"),
            provider=Provider.GEMINI,
        )
    except GenerativeCallError as e:
        logger.warning("Simplify job via Gemini failed: %s", e)
    except ValidationError as e:
        logger.warning("Simplified job failed validation: %s", e)
    except Exception as e:
        logger.exception("Simplify job error: %s", e)
    return fallback_simplified_job()
