"""Result Aggregator: job search, then concurrent per-listing enrichment.

All writes happen on the event loop thread. Enrichment writes are keyed by
listing id, and simplify and training-plan results land in separate maps, so
completion order does not matter.
"""

import asyncio
from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol

from hopeful_futures.schemas.job_listing import JobListing, JobSearchResponse
from hopeful_futures.schemas.profile import Profile
from hopeful_futures.schemas.simplified_job import SimplifiedJob
from hopeful_futures.schemas.training_plan import TrainingPlan
from hopeful_futures.services.fallbacks import (
    fallback_job_listings,
    fallback_simplified_job,
    fallback_training_plan,
)
from hopeful_futures.utils.logger import get_logger

logger = get_logger(__name__)

NO_LISTINGS_MESSAGE = (
    "We couldn't find job listings for your profile right now. "
    "Please try again in a little while or adjust your location."
)


class ResultsBackend(Protocol):
    async def search_jobs(self, profile: Profile) -> JobSearchResponse: ...

    async def simplify_job(self, job: JobListing, profile: Profile) -> SimplifiedJob: ...

    async def training_plan(self, job: JobListing, profile: Profile) -> TrainingPlan: ...


class AggregatorState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    PARTIAL = "partial"
    COMPLETE = "complete"


class ResultsAggregator:
    """
    Drives one results view. `error` is an overlay: it may be set while listings
    or enrichments are present. After close(), late results are discarded.
    """

    def __init__(
        self,
        profile: Optional[Profile],
        backend: ResultsBackend,
        on_update: Optional[Callable[["ResultsAggregator"], None]] = None,
    ) -> None:
        self.profile = profile
        self.backend = backend
        self.on_update = on_update
        self.state = AggregatorState.IDLE
        self.error: Optional[str] = None
        self.jobs: List[JobListing] = []
        self.fallback_used = False
        self.simplified: Dict[str, SimplifiedJob] = {}
        self.training_plans: Dict[str, TrainingPlan] = {}
        self._mounted = True

    @property
    def loading(self) -> bool:
        return self.state in (AggregatorState.LOADING, AggregatorState.PARTIAL)

    @property
    def mounted(self) -> bool:
        return self._mounted

    def close(self) -> None:
        """Stop accepting results; in-flight calls finish but their output is dropped."""
        self._mounted = False

    def is_enriched(self, job_id: str) -> bool:
        return job_id in self.simplified and job_id in self.training_plans

    def _notify(self) -> None:
        if not self._mounted or self.on_update is None:
            return
        try:
            self.on_update(self)
        except Exception as e:
            logger.exception("Results update callback failed: %s", e)

    def _set_state(self, state: AggregatorState) -> None:
        self.state = state
        self._notify()

    async def _search(self, profile: Profile) -> JobSearchResponse:
        try:
            return await self.backend.search_jobs(profile)
        except Exception as e:
            logger.warning("Job search request failed, using fallback listings: %s", e)
            return JobSearchResponse(jobs=fallback_job_listings(profile.location), fallback_used=True)

    async def _enrich_simplified(self, job: JobListing, profile: Profile) -> None:
        try:
            result = await self.backend.simplify_job(job, profile)
        except Exception as e:
            logger.warning("Simplify request failed for %s: %s", job.id, e)
            result = fallback_simplified_job()
        if not self._mounted:
            return
        self.simplified[job.id] = result
        self._notify()

    async def _enrich_training(self, job: JobListing, profile: Profile) -> None:
        try:
            result = await self.backend.training_plan(job, profile)
        except Exception as e:
            logger.warning("Training plan request failed for %s: %s", job.id, e)
            result = fallback_training_plan()
        if not self._mounted:
            return
        self.training_plans[job.id] = result
        self._notify()

    async def run(self) -> None:
        """Search, then enrich every listing concurrently; returns once all calls settled."""
        profile = self.profile
        if profile is None or not self._mounted:
            return
        self._set_state(AggregatorState.LOADING)

        response = await self._search(profile)
        if not self._mounted:
            return
        self.jobs = list(response.jobs)
        self.fallback_used = response.fallback_used
        if not self.jobs:
            self.error = NO_LISTINGS_MESSAGE
            self._set_state(AggregatorState.COMPLETE)
            return

        self._set_state(AggregatorState.PARTIAL)
        await asyncio.gather(
            *(self._enrich_simplified(job, profile) for job in self.jobs),
            *(self._enrich_training(job, profile) for job in self.jobs),
        )
        if not self._mounted:
            return
        logger.info(
            "Results aggregated: listings=%s simplified=%s plans=%s",
            len(self.jobs),
            len(self.simplified),
            len(self.training_plans),
        )
        self._set_state(AggregatorState.COMPLETE)
