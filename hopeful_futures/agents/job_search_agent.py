"""Job Search Agent: Gemini-generated listings with the template catalog as fallback."""

import random
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from hopeful_futures import config
from hopeful_futures.catalogs import CATALOGS, Catalogs
from hopeful_futures.schemas.job_listing import JobListing, JobSearchRequest, JobSearchResponse
from hopeful_futures.services.fallbacks import fallback_job_listings
from hopeful_futures.services.gemini_client import GenerativeCallError, generate_json
from hopeful_futures.services.prompt_builder import build_job_search_prompt
from hopeful_futures.utils.helpers import new_job_id, normalize_location, split_city_state
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _job_items(parsed: Any) -> List[dict]:
    """Accept a bare array or an object wrapping it under 'jobs'."""
    if isinstance(parsed, dict):
        parsed = parsed.get("jobs")
    if not isinstance(parsed, list):
        return []
    return [item for item in parsed if isinstance(item, dict)]


def backfill_job(item: dict, index: int, location: str) -> JobListing:
    """Fill every missing field of a model-produced listing with a default."""
    return JobListing(
        id=_text(item.get("id"), "") or new_job_id(index),
        title=_text(item.get("title"), "Job Opportunity"),
        employer=_text(item.get("employer"), "Employer"),
        description=_text(item.get("description"), "No description available."),
        pay=_text(item.get("pay"), "Salary not specified"),
        location=_text(item.get("location"), location),
    )


def deduplicate_jobs(jobs: List[JobListing]) -> List[JobListing]:
    """Remove listings whose id was already seen."""
    seen: set[str] = set()
    result: List[JobListing] = []
    for job in jobs:
        if job.id not in seen:
            seen.add(job.id)
            result.append(job)
    return result


async def generate_jobs_with_gemini(
    request: JobSearchRequest,
    location: str,
    catalogs: Catalogs = CATALOGS,
    client: Optional[httpx.AsyncClient] = None,
) -> List[JobListing]:
    _, state = split_city_state(location)
    prompt = build_job_search_prompt(
        location,
        interests=request.interests,
        disabilities=request.disabilities,
        medical_conditions=request.medical_conditions,
        nearby_cities=catalogs.nearby_cities(state),
    )
    parsed = await generate_json(
        prompt,
        model=config.GEMINI_JOB_MODEL,
        temperature=config.JOB_SEARCH_TEMPERATURE,
        client=client,
    )
    return [backfill_job(item, i, location) for i, item in enumerate(_job_items(parsed))]


async def run_job_search_agent(
    request: JobSearchRequest,
    catalogs: Catalogs = CATALOGS,
    client: Optional[httpx.AsyncClient] = None,
    rng: Optional[random.Random] = None,
) -> JobSearchResponse:
    """
    Produce up to five listings for the request. Gemini is tried only when a key
    is configured; any failure or an empty result serves the fallback catalog.
    """
    location = normalize_location(request.location)
    jobs: List[JobListing] = []

    if config.GEMINI_API_KEY:
        try:
            jobs = await generate_jobs_with_gemini(request, location, catalogs, client)
        except GenerativeCallError as e:
            logger.warning("Gemini job generation failed for %s: %s", location, e)
        except ValidationError as e:
            logger.warning("Gemini job listings failed validation for %s: %s", location, e)
        except Exception as e:
            logger.exception("Unexpected error generating jobs for %s: %s", location, e)
    else:
        logger.info("GEMINI_API_KEY is not set; serving fallback jobs for %s", location)

    jobs = deduplicate_jobs(jobs)[: config.MAX_JOB_LISTINGS]
    fallback_used = not jobs
    if fallback_used:
        jobs = fallback_job_listings(location, rng=rng)

    logger.info(
        "Job Search Agent finished: location=%s returned=%s fallback=%s",
        location,
        len(jobs),
        fallback_used,
    )
    return JobSearchResponse(jobs=jobs, fallback_used=fallback_used)
