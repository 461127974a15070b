"""HTTP client for the tutorial REST backend."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from api_client.base import BaseTutorialClient
from models import Tutorial, TutorialId

logger = logging.getLogger(__name__)

COLLECTION_PATH = "/tutorials"
HEADERS = {"Content-Type": "application/json"}


def _as_tutorials(data: Any) -> list[Tutorial]:
    if not isinstance(data, list):
        return []
    return [Tutorial.from_api(item) for item in data if isinstance(item, dict)]


def _as_record(data: Any) -> dict:
    return data if isinstance(data, dict) else {}


class TutorialApiClient(BaseTutorialClient):
    """Talks to the tutorial collection over HTTP.

    Usage:
        client = TutorialApiClient(base_url="http://localhost:8080/api")
        tutorials = await client.list("python")

    Failed calls raise httpx.HTTPStatusError or httpx.TransportError;
    callers turn them into display text with to_error_message().
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080/api",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=HEADERS,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        """Send one request and return the decoded JSON body ({} when empty)."""
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Tutorial API error %d on %s %s: %s",
                e.response.status_code, method, path, e.response.text,
            )
            raise
        except httpx.TransportError as e:
            logger.warning("Cannot reach tutorial API at %s: %s", self.base_url, e)
            raise

        if not response.content:
            return {}
        return response.json()

    async def list(self, title: Optional[str] = None) -> list[Tutorial]:
        params = {"title": title} if title else None
        data = await self._request("GET", COLLECTION_PATH, params=params)
        return _as_tutorials(data)

    async def list_published(self) -> list[Tutorial]:
        data = await self._request("GET", f"{COLLECTION_PATH}/published")
        return _as_tutorials(data)

    async def get(self, tutorial_id: TutorialId) -> Tutorial:
        data = await self._request("GET", f"{COLLECTION_PATH}/{tutorial_id}")
        return Tutorial.from_api(_as_record(data))

    async def create(self, fields: dict[str, Any]) -> dict:
        data = await self._request("POST", COLLECTION_PATH, json=fields)
        return _as_record(data)

    async def update(self, tutorial_id: TutorialId, fields: dict[str, Any]) -> dict:
        data = await self._request("PUT", f"{COLLECTION_PATH}/{tutorial_id}", json=fields)
        return _as_record(data)

    async def delete(self, tutorial_id: TutorialId) -> dict:
        data = await self._request("DELETE", f"{COLLECTION_PATH}/{tutorial_id}")
        return _as_record(data)

    async def delete_all(self) -> dict:
        data = await self._request("DELETE", COLLECTION_PATH)
        return _as_record(data)
