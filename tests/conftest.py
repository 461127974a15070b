"""Pytest fixtures for Tutorial Dashboard tests."""

from __future__ import annotations

from typing import Any, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from api_client.base import BaseTutorialClient
from controller import DashboardController
from models import Tutorial


def http_error(status_code: int, body: Any = None, method: str = "GET") -> httpx.HTTPStatusError:
    """An HTTPStatusError carrying a JSON body, as raise_for_status() would raise."""
    request = httpx.Request(method, "http://test/api/tutorials")
    response = httpx.Response(status_code, json=body, request=request)
    return httpx.HTTPStatusError(f"Server error '{status_code}'", request=request, response=response)


class FakeTutorialClient(BaseTutorialClient):
    """In-memory tutorial backend that records every call."""

    def __init__(self, tutorials: Optional[list[dict]] = None):
        self.records = [dict(t) for t in tutorials or []]
        self.calls: list[tuple] = []
        self.failures: dict[str, Exception] = {}
        self._next_id = max((r["id"] for r in self.records), default=0) + 1

    def fail(self, operation: str, error: Exception):
        self.failures[operation] = error

    def _record(self, operation: str, *args):
        self.calls.append((operation, *args))
        if operation in self.failures:
            raise self.failures[operation]

    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]

    async def list(self, title: Optional[str] = None) -> list[Tutorial]:
        self._record("list", title)
        records = self.records
        if title:
            records = [r for r in records if title.lower() in (r.get("title") or "").lower()]
        return [Tutorial.from_api(r) for r in records]

    async def list_published(self) -> list[Tutorial]:
        self._record("list_published")
        return [Tutorial.from_api(r) for r in self.records if r.get("published")]

    async def get(self, tutorial_id) -> Tutorial:
        self._record("get", tutorial_id)
        for record in self.records:
            if record["id"] == tutorial_id:
                return Tutorial.from_api(record)
        raise http_error(404, {"message": f"Tutorial {tutorial_id} not found"})

    async def create(self, fields: dict) -> dict:
        self._record("create", fields)
        record = {"id": self._next_id, **fields}
        self._next_id += 1
        self.records.append(record)
        return record

    async def update(self, tutorial_id, fields: dict) -> dict:
        self._record("update", tutorial_id, fields)
        for record in self.records:
            if record["id"] == tutorial_id:
                record.update(fields)
                return {"message": "Tutorial was updated successfully."}
        raise http_error(404, {"message": f"Cannot update Tutorial with id={tutorial_id}."}, "PUT")

    async def delete(self, tutorial_id) -> dict:
        self._record("delete", tutorial_id)
        self.records = [r for r in self.records if r["id"] != tutorial_id]
        return {"message": "Tutorial was deleted successfully!"}

    async def delete_all(self) -> dict:
        self._record("delete_all")
        count = len(self.records)
        self.records = []
        return {"message": f"{count} Tutorials were deleted successfully!"}


SAMPLE_TUTORIALS = [
    {"id": 1, "title": "Intro to FastAPI", "description": "Routing and dependencies", "published": True},
    {"id": 2, "title": "Async Python", "description": "", "published": False},
    {"id": 3, "title": "Testing with pytest", "description": "Fixtures", "published": True},
]


@pytest.fixture
def fake_client():
    return FakeTutorialClient(SAMPLE_TUTORIALS)


@pytest.fixture
def controller(fake_client):
    return DashboardController(fake_client)


@pytest.fixture
def app_client(fake_client):
    """TestClient wired to a controller over the fake backend (no lifespan)."""
    from main import app
    from routes import set_controller

    dashboard_controller = DashboardController(fake_client)
    set_controller(dashboard_controller)
    client = TestClient(app)
    client.controller = dashboard_controller
    yield client
    set_controller(None)
