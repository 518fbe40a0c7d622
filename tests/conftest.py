"""Shared fixtures for tests."""

import json

import httpx
import pytest

from web.config import FieldNames, TargetConfig
from web.services.intervals import IntervalsClient

ATHLETE_ID = "i12345"
API_KEY = "secret-key"
BASE_URL = "https://intervals.test/api/v1"


class FakeIntervals:
    """In-memory stand-in for the wellness API behind an httpx.MockTransport.

    Records every request. `wellness` maps ISO dates to records, `history`
    is returned for range queries, `fail` maps (method, date) to a status code.
    """

    def __init__(self, wellness=None, history=None, fail=None):
        self.wellness = wellness or {}
        self.history = history or []
        self.fail = fail or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        prefix = f"/api/v1/athlete/{ATHLETE_ID}/wellness"
        path = request.url.path
        assert path.startswith(prefix), path

        day = path[len(prefix):].lstrip("/")
        status = self.fail.get((request.method, day))
        if status:
            return httpx.Response(status, text=f"error {status}")

        if request.method == "GET" and not day:
            return httpx.Response(200, json=self.history)
        if request.method == "GET":
            return httpx.Response(200, json=self.wellness.get(day, {"id": day}))
        if request.method == "PUT":
            body = json.loads(request.content)
            self.wellness.setdefault(day, {"id": day}).update(body)
            return httpx.Response(200, json=self.wellness[day])
        return httpx.Response(405)

    def calls(self, method: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method]


@pytest.fixture
def target_config() -> TargetConfig:
    return TargetConfig(api_key=API_KEY, athlete_id=ATHLETE_ID, base_url=BASE_URL, fields=FieldNames())


@pytest.fixture
def make_client():
    """Build an IntervalsClient wired to a FakeIntervals handler."""

    def _make(fake: FakeIntervals) -> IntervalsClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake))
        return IntervalsClient(API_KEY, ATHLETE_ID, BASE_URL, http_client=http_client)

    return _make
