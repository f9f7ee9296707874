"""
Tests for the results aggregator: fan-out, incremental updates, error overlay and mounted guard.
"""
import asyncio

import httpx
import pytest

from hopeful_futures.api import app
from hopeful_futures.schemas.job_listing import JobListing, JobSearchResponse
from hopeful_futures.schemas.profile import Profile
from hopeful_futures.services.api_client import HopefulFuturesClient
from hopeful_futures.services.fallbacks import fallback_simplified_job, fallback_training_plan
from hopeful_futures.services.results_aggregator import (
    NO_LISTINGS_MESSAGE,
    AggregatorState,
    ResultsAggregator,
)


def make_jobs(count):
    return [
        JobListing(
            id=f"job-{i}",
            title=f"Job {i}",
            employer="Employer",
            description="Description",
            pay="$15/hr",
            location="Austin, TX",
        )
        for i in range(count)
    ]


class FakeBackend:
    """In-memory backend with per-listing delays and optional failures."""

    def __init__(self, jobs, delays=None, fail_simplify=(), search_error=None):
        self.jobs = jobs
        self.delays = delays or {}
        self.fail_simplify = set(fail_simplify)
        self.search_error = search_error
        self.calls = []

    async def search_jobs(self, profile):
        self.calls.append(("search", None))
        if self.search_error is not None:
            raise self.search_error
        return JobSearchResponse(jobs=self.jobs, fallback_used=False)

    async def simplify_job(self, job, profile):
        self.calls.append(("simplify", job.id))
        await asyncio.sleep(self.delays.get(("simplify", job.id), 0))
        if job.id in self.fail_simplify:
            raise httpx.ConnectError("backend down")
        return fallback_simplified_job().model_copy(update={"job_title": job.title})

    async def training_plan(self, job, profile):
        self.calls.append(("training", job.id))
        await asyncio.sleep(self.delays.get(("training", job.id), 0))
        return fallback_training_plan()


@pytest.fixture
def profile():
    return Profile(name="Jordan", location="Austin, TX", interests=["Music"])


@pytest.mark.asyncio
@pytest.mark.parametrize("order", ["forward", "reverse", "interleaved"])
async def test_all_listings_enriched_regardless_of_completion_order(profile, order):
    jobs = make_jobs(3)
    delays = {}
    for i, job in enumerate(jobs):
        if order == "forward":
            delays[("simplify", job.id)] = delays[("training", job.id)] = 0.01 * i
        elif order == "reverse":
            delays[("simplify", job.id)] = delays[("training", job.id)] = 0.01 * (3 - i)
        else:
            delays[("simplify", job.id)] = 0.01 * i
            delays[("training", job.id)] = 0.01 * (3 - i)
    aggregator = ResultsAggregator(profile, FakeBackend(jobs, delays))

    await aggregator.run()

    assert aggregator.loading is False
    assert aggregator.state == AggregatorState.COMPLETE
    assert aggregator.error is None
    for job in jobs:
        assert aggregator.is_enriched(job.id)
        assert aggregator.simplified[job.id].job_title == job.title


@pytest.mark.asyncio
async def test_updates_arrive_incrementally(profile):
    snapshots = []

    def on_update(agg):
        snapshots.append((agg.state, len(agg.simplified), len(agg.training_plans), agg.loading))

    aggregator = ResultsAggregator(profile, FakeBackend(make_jobs(2)), on_update=on_update)
    await aggregator.run()

    assert snapshots[0] == (AggregatorState.LOADING, 0, 0, True)
    assert snapshots[1] == (AggregatorState.PARTIAL, 0, 0, True)
    assert any(state == AggregatorState.PARTIAL and 0 < s + t < 4 for state, s, t, _ in snapshots)
    assert snapshots[-1] == (AggregatorState.COMPLETE, 2, 2, False)


@pytest.mark.asyncio
async def test_failed_call_becomes_fallback_without_stopping_others(profile):
    jobs = make_jobs(3)
    aggregator = ResultsAggregator(profile, FakeBackend(jobs, fail_simplify={"job-1"}))

    await aggregator.run()

    assert aggregator.error is None
    assert aggregator.simplified["job-1"].job_title == "Community Support Assistant"
    assert aggregator.simplified["job-0"].job_title == "Job 0"
    assert all(aggregator.is_enriched(j.id) for j in jobs)


@pytest.mark.asyncio
async def test_zero_listings_sets_informational_error(profile):
    backend = FakeBackend([])
    aggregator = ResultsAggregator(profile, backend)

    await aggregator.run()

    assert aggregator.error == NO_LISTINGS_MESSAGE
    assert aggregator.jobs == []
    assert aggregator.loading is False
    assert [c[0] for c in backend.calls] == ["search"]


@pytest.mark.asyncio
async def test_search_failure_serves_fallback_listings(profile):
    aggregator = ResultsAggregator(profile, FakeBackend([], search_error=httpx.ConnectError("down")))

    await aggregator.run()

    assert aggregator.fallback_used is True
    assert len(aggregator.jobs) == 5
    assert all(aggregator.is_enriched(j.id) for j in aggregator.jobs)


@pytest.mark.asyncio
async def test_no_profile_stays_idle():
    backend = FakeBackend(make_jobs(1))
    aggregator = ResultsAggregator(None, backend)

    await aggregator.run()

    assert aggregator.state == AggregatorState.IDLE
    assert backend.calls == []


@pytest.mark.asyncio
async def test_close_discards_in_flight_results(profile):
    release = asyncio.Event()
    updates = []

    class SlowBackend(FakeBackend):
        async def simplify_job(self, job, profile):
            await release.wait()
            return await super().simplify_job(job, profile)

        async def training_plan(self, job, profile):
            await release.wait()
            return await super().training_plan(job, profile)

    aggregator = ResultsAggregator(profile, SlowBackend(make_jobs(2)), on_update=lambda agg: updates.append(agg.state))
    task = asyncio.create_task(aggregator.run())
    while aggregator.state != AggregatorState.PARTIAL:
        await asyncio.sleep(0)

    aggregator.close()
    seen = len(updates)
    release.set()
    await task

    assert aggregator.simplified == {}
    assert aggregator.training_plans == {}
    assert len(updates) == seen
    assert aggregator.state == AggregatorState.PARTIAL


@pytest.mark.asyncio
async def test_end_to_end_against_api_without_key(profile):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        backend = HopefulFuturesClient(client=http)
        aggregator = ResultsAggregator(profile, backend)
        await aggregator.run()

    assert len(aggregator.jobs) == 5
    assert aggregator.fallback_used is True
    assert all(aggregator.is_enriched(j.id) for j in aggregator.jobs)
    assert all(p.provider == "fallback" for p in aggregator.training_plans.values())


@pytest.mark.asyncio
async def test_failing_update_callback_does_not_stall_aggregation(profile):
    def on_update(agg):
        raise RuntimeError("redraw failed")

    aggregator = ResultsAggregator(profile, FakeBackend(make_jobs(2)), on_update=on_update)
    await aggregator.run()

    assert aggregator.state == AggregatorState.COMPLETE
    assert aggregator.loading is False
    assert all(aggregator.is_enriched(j.id) for j in aggregator.jobs)
