"""
Tests for the JSON endpoints.
"""
import pytest
from fastapi.testclient import TestClient

from hopeful_futures import config
from hopeful_futures.agents import simplify_agent, training_plan_agent
from hopeful_futures.api import app
from hopeful_futures.services.gemini_client import UpstreamRequestError


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def failing_gemini(monkeypatch, gemini_key):
    """Key configured, but every Gemini call fails at the network layer."""

    async def fail(*args, **kwargs):
        raise UpstreamRequestError("simulated network failure")

    monkeypatch.setattr(simplify_agent, "generate_json", fail)
    monkeypatch.setattr(training_plan_agent, "generate_json", fail)


def test_search_jobs_without_key_returns_five_local_listings(client):
    response = client.post("/api/search-jobs", json={"location": "Austin, TX"})

    assert response.status_code == 200
    data = response.json()
    assert data["fallbackUsed"] is True
    assert len(data["jobs"]) == 5
    assert len({job["id"] for job in data["jobs"]}) == 5
    assert all(job["location"] == "Austin, TX" for job in data["jobs"])
    assert set(data["jobs"][0]) == {"id", "title", "employer", "description", "pay", "location"}


@pytest.mark.parametrize(
    "body",
    [{}, {"location": ""}, {"location": "   "}, {"location": 42}, {"interests": ["Music"]}],
)
def test_search_jobs_requires_location(client, body):
    response = client.post("/api/search-jobs", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Location is required."}


@pytest.mark.parametrize("path", ["/api/search-jobs", "/api/simplify-job", "/api/training-plan"])
def test_invalid_json_body_is_rejected(client, path):
    response = client.post(path, content="{not json", headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body."}


@pytest.mark.parametrize("body", [{}, {"jobTitle": "Cashier"}, {"jobDescription": 5}, {"jobDescription": ""}])
def test_simplify_requires_job_description(client, body):
    response = client.post("/api/simplify-job", json=body)
    assert response.status_code == 400
    assert "error" in response.json()


def test_simplify_without_key_returns_fallback(client):
    response = client.post("/api/simplify-job", json={"jobDescription": "Answer phones."})

    assert response.status_code == 200
    data = response.json()
    assert data["provider"] == "fallback"
    assert data["tone"] == "encouraging"
    assert data["keyQualifications"]


def test_training_plan_requires_title_or_skills(client):
    response = client.post("/api/training-plan", json={"interests": ["Art"]})
    assert response.status_code == 400
    assert response.json() == {"error": "Provide at least jobTitle or currentSkills."}


def test_training_plan_accepts_empty_skills_list(client):
    response = client.post("/api/training-plan", json={"currentSkills": []})
    assert response.status_code == 200
    assert response.json()["provider"] == "fallback"


def test_training_plan_omits_missing_resource_cost(client):
    data = client.post("/api/training-plan", json={"jobTitle": "Receptionist"}).json()

    resources = data["phases"][0]["resources"]
    assert resources[0]["cost"] == "Free audit"
    assert "cost" not in resources[1]
    assert set(data) == {"summary", "phases", "successMetrics", "encouragement", "provider"}


def test_upstream_failure_still_returns_fallback_records(client, failing_gemini):
    simplified = client.post(
        "/api/simplify-job", json={"jobTitle": "Cashier", "jobDescription": "Run the register."}
    )
    plan = client.post("/api/training-plan", json={"jobTitle": "Cashier"})

    assert simplified.status_code == 200
    assert simplified.json()["provider"] == "fallback"
    assert simplified.json()["jobTitle"] == "Community Support Assistant"
    assert plan.status_code == 200
    assert plan.json()["provider"] == "fallback"
    assert len(plan.json()["phases"]) == 3


def test_health_reports_key_state(client, monkeypatch):
    assert client.get("/api/health").json() == {"status": "ok", "geminiConfigured": False}
    monkeypatch.setattr(config, "GEMINI_API_KEY", "k")
    assert client.get("/api/health").json()["geminiConfigured"] is True


@pytest.mark.parametrize("skills", ["", 0, False, None])
def test_training_plan_rejects_falsy_skills_without_title(client, skills):
    response = client.post("/api/training-plan", json={"currentSkills": skills})
    assert response.status_code == 400
    assert response.json() == {"error": "Provide at least jobTitle or currentSkills."}
