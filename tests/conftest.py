"""
Top-level pytest configuration.

Provides:
  - A FakeBackend that answers requests from canned envelopes and records
    every request it receives, mounted through ``httpx.MockTransport``.
  - An httpx AsyncClient, an ApiTransport and a TalentClient wired to it.
  - Raw record builders for jobs, candidates and applications.
"""

from __future__ import annotations

import json
import os
from typing import Any, AsyncGenerator, Callable, Optional

# ---------------------------------------------------------------------------
# Environment must be set BEFORE any client module is imported so that
# pydantic-settings picks up the test values.
# ---------------------------------------------------------------------------
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("API_BASE_URL", "http://testserver/api")

import httpx
import pytest
import pytest_asyncio

from talent_client.client import TalentClient
from talent_client.core.config import Settings
from talent_client.core.http import ApiTransport

BASE_URL = "http://testserver/api"
BASE_PATH = "/api"


# ---------------------------------------------------------------------------
# Fake backend
# ---------------------------------------------------------------------------
class FakeBackend:
    """In-process stand-in for the REST backend.

    Routes are keyed by ``(method, endpoint)`` where ``endpoint`` is the path
    below the base URL.  Unknown routes answer 404 with an ``error`` field,
    as the real backend does.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        status_code: int = 200,
        content: Optional[bytes] = None,
    ) -> None:
        def _respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        self.routes[(method.upper(), endpoint)] = _respond

    def fail(self, method: str, endpoint: str, exc: Exception) -> None:
        """Make a route raise a transport-level error instead of answering."""

        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self.routes[(method.upper(), endpoint)] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path[len(BASE_PATH):]
        route = self.routes.get((request.method, endpoint))
        if route is None:
            return httpx.Response(404, json={"error": f"No route for {request.method} {endpoint}"})
        return route(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture
async def http_client(backend: FakeBackend) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(backend.handler)) as client:
        yield client


@pytest.fixture
def transport(http_client: httpx.AsyncClient) -> ApiTransport:
    return ApiTransport(BASE_URL, http_client)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, api_base_url=BASE_URL, app_env="test")


@pytest.fixture
def client(http_client: httpx.AsyncClient, test_settings: Settings) -> TalentClient:
    """TalentClient over the fake backend; the test owns the HTTP client."""
    return TalentClient(settings=test_settings, http_client=http_client)


# ---------------------------------------------------------------------------
# Raw record builders (backend shapes, snake_case)
# ---------------------------------------------------------------------------
def make_job(**overrides: Any) -> dict[str, Any]:
    job = {
        "id": "job-1",
        "title": "Senior Backend Engineer",
        "location": "Berlin",
        "is_active": True,
        "department": {"_id": "dep-1", "name": "Engineering"},
        "role_type": {"_id": "rt-1", "name": "Contract"},
        "work_setup": {"_id": "ws-1", "name": "Hybrid"},
        "salary_min": 60000,
        "salary_max": 85000,
        "experience_min": 3,
        "experience_max": 6,
        "job_overview": "Own the recruiting API.",
        "key_responsibilities": "Design services",
        "qualifications": "Python",
        "benefits": "Remote budget",
        "application_deadline": "2024-06-30",
    }
    job.update(overrides)
    return job


def make_candidate(**overrides: Any) -> dict[str, Any]:
    candidate = {
        "id": "cand-1",
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "location": "London",
        "linkedin_url": "https://linkedin.com/in/ada",
        "portfolio_url": "https://ada.dev",
        "resume_url": "resumes/cand-1/cv.pdf",
    }
    candidate.update(overrides)
    return candidate


def make_application(**overrides: Any) -> dict[str, Any]:
    application = {
        "id": "app-1",
        "candidate": make_candidate(),
        "job": make_job(),
        "stage": "screening",
        "status": "under_review",
        "ai_score": 82,
        "ai_analysis": {"summary": "Strong Python background"},
        "is_hot_applicant": False,
        "needs_attention": False,
        "applied_at": "2024-01-15T10:30:00.000Z",
        "comments": [],
        "stage_history": [],
    }
    application.update(overrides)
    return application


@pytest.fixture
def job_factory() -> Callable[..., dict[str, Any]]:
    return make_job


@pytest.fixture
def application_factory() -> Callable[..., dict[str, Any]]:
    return make_application
