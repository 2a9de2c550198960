"""Shared pytest fixtures: sample Sunsethue payloads and a stubbed upstream.

The backend directory is put on sys.path so that ``import app`` resolves
when the tests run from the repository root.
"""

import os
import sys

import httpx
import pytest
from fastapi.testclient import TestClient

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from app.core.config import Settings, get_settings  # noqa: E402
from app.main import app  # noqa: E402
from app.routes.sun_route import get_http_client  # noqa: E402

TEST_API_KEY = "test-secret-key-123"


def make_event(kind="sunrise", model_data=True, time="2026-10-19T06:12:00Z", **overrides):
    event = {
        "type": kind,
        "model_data": model_data,
        "time": time,
        "direction": 98.4 if kind == "sunrise" else 261.7,
        "magics": {
            "blue_hour": ["2026-10-19T05:41:00Z", "2026-10-19T05:55:00Z"],
            "golden_hour": ["2026-10-19T06:12:00Z", "2026-10-19T06:49:00Z"],
        },
    }
    if model_data:
        event.update({"quality": 0.62, "quality_text": "good", "cloud_cover": 0.35})
    event.update(overrides)
    return event


def make_forecast(events=None):
    return {
        "location": {"latitude": 40.7, "longitude": -74.0},
        "grid_location": {"latitude": 40.75, "longitude": -74.05},
        "data": events if events is not None else [
            make_event("sunrise"),
            make_event("sunset", time="2026-10-19T17:58:00Z"),
        ],
    }


class StubUpstream:
    """Records every outbound request and answers with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = make_forecast()
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def test_settings():
    return Settings(SUNSETHUE_API_KEY=TEST_API_KEY, _env_file=None)


@pytest.fixture
def client(upstream, test_settings):
    async def override_http_client():
        async with upstream.client() as http_client:
            yield http_client

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_http_client] = override_http_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
