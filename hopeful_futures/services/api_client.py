"""Async client for the Hopeful Futures JSON API, used by the results view."""

from typing import Any, Optional

import httpx

from hopeful_futures import config
from hopeful_futures.schemas.job_listing import JobListing, JobSearchResponse
from hopeful_futures.schemas.profile import Profile
from hopeful_futures.schemas.simplified_job import SimplifiedJob
from hopeful_futures.schemas.training_plan import TrainingPlan
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)


def job_search_payload(profile: Profile) -> dict[str, Any]:
    return {
        "location": profile.location,
        "interests": list(profile.interests),
        "disabilities": list(profile.disabilities),
        "medicalConditions": list(profile.medical_conditions),
    }


def simplify_payload(job: JobListing, profile: Profile) -> dict[str, Any]:
    return {
        "jobTitle": job.title,
        "jobDescription": job.description,
        "audienceProfile": {
            "interests": list(profile.interests),
            "disabilities": list(profile.disabilities),
            "medicalConditions": list(profile.medical_conditions),
            "location": job.location or profile.location,
        },
    }


def training_plan_payload(job: JobListing, profile: Profile) -> dict[str, Any]:
    return {
        "jobTitle": job.title,
        "interests": list(profile.interests),
        "disabilities": list(profile.disabilities),
        "medicalConditions": list(profile.medical_conditions),
        "location": job.location or profile.location,
    }


class HopefulFuturesClient:
    """
    Thin wrapper over httpx.AsyncClient. Raises httpx errors on transport
    failure or non-2xx status; the aggregator turns those into fallbacks.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or config.API_BASE_URL,
            timeout=config.HTTP_TIMEOUT_SECONDS if timeout is None else timeout,
        )

    async def __aenter__(self) -> "HopefulFuturesClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        response = await self._client.post(path, json=payload)
        response.raise_for_status()
        return response.json()

    async def search_jobs(self, profile: Profile) -> JobSearchResponse:
        data = await self._post("/api/search-jobs", job_search_payload(profile))
        return JobSearchResponse.model_validate(data)

    async def simplify_job(self, job: JobListing, profile: Profile) -> SimplifiedJob:
        data = await self._post("/api/simplify-job", simplify_payload(job, profile))
        return SimplifiedJob.model_validate(data)

    async def training_plan(self, job: JobListing, profile: Profile) -> TrainingPlan:
        data = await self._post("/api/training-plan", training_plan_payload(job, profile))
        return TrainingPlan.model_validate(data)
