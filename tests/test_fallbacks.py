"""
Tests for fallback content and the read-only catalogs.
"""
import dataclasses
import random

import pytest

from hopeful_futures.catalogs import CATALOGS
from hopeful_futures.services.fallbacks import (
    JOB_TEMPLATES,
    fallback_job_listings,
    fallback_simplified_job,
    fallback_training_plan,
)


def test_fallback_jobs_pick_five_unique_templates():
    jobs = fallback_job_listings("Austin, TX")

    assert len(jobs) == 5
    assert len({j.id for j in jobs}) == 5
    assert len({j.title for j in jobs}) == 5
    assert {j.title for j in jobs} <= {t[0] for t in JOB_TEMPLATES}
    assert all(j.location == "Austin, TX" for j in jobs)


def test_fallback_jobs_normalize_location():
    jobs = fallback_job_listings("Portland, Oregon, United States", count=3)
    assert len(jobs) == 3
    assert all(j.location == "Portland, Oregon" for j in jobs)


def test_fallback_jobs_selection_follows_rng():
    first = fallback_job_listings("Reno", rng=random.Random(7))
    second = fallback_job_listings("Reno", rng=random.Random(7))
    assert [j.title for j in first] == [j.title for j in second]
    assert {j.id for j in first}.isdisjoint({j.id for j in second})


def test_fallback_records_are_fully_populated():
    simplified = fallback_simplified_job()
    plan = fallback_training_plan()

    assert simplified.provider == "fallback"
    assert simplified.tone == "encouraging"
    assert simplified.key_qualifications and simplified.accommodations and simplified.training_suggestions
    assert plan.provider == "fallback"
    assert len(plan.phases) == 3
    assert all(p.steps and p.resources for p in plan.phases)
    assert plan.success_metrics and plan.encouragement


def test_fallback_records_are_fresh_copies():
    plan = fallback_training_plan()
    plan.success_metrics.append("changed")
    assert "changed" not in fallback_training_plan().success_metrics


def test_catalogs_resolve_states():
    assert CATALOGS.resolve_state("TX") == "texas"
    assert CATALOGS.resolve_state("New York") == "new york"
    assert CATALOGS.resolve_state("") is None
    assert CATALOGS.resolve_state("Ontario") is None
    assert "Austin" in CATALOGS.nearby_cities("tx")
    assert CATALOGS.nearby_cities("") == ()


def test_catalogs_are_read_only():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CATALOGS.interests = ("Nothing",)
    with pytest.raises(TypeError):
        CATALOGS.state_cities["atlantis"] = ("Poseidonia",)
