"""intervals.icu wellness API integration service."""

from typing import Optional

import httpx
from loguru import logger

from web.config import INTERVALS_BASE_URL


class IntervalsAPIError(Exception):
    """Non-success response from the intervals.icu API."""

    def __init__(self, method: str, url: str, status_code: int, body: str):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"{method} {url} failed with {status_code}: {body}")


class IntervalsClient:
    """Async client for an athlete's wellness records.

    Authenticates with Basic auth, user "API_KEY" and the secret key as
    password. Use as an async context manager, or pass an existing
    httpx.AsyncClient (which the caller then owns).
    """

    def __init__(
        self,
        api_key: str,
        athlete_id: str,
        base_url: str = INTERVALS_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.athlete_id = athlete_id
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()
        self._auth = httpx.BasicAuth("API_KEY", api_key)

    async def __aenter__(self) -> "IntervalsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/athlete/{self.athlete_id}/{endpoint}"

    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        url = self._url(endpoint)
        response = await self._client.request(
            method,
            url,
            auth=self._auth,
            headers={"Accept": "application/json"},
            **kwargs,
        )
        if response.is_error:
            raise IntervalsAPIError(method, url, response.status_code, response.text)
        return response

    async def get_wellness(self, date_str: str) -> dict:
        """Fetch the wellness record for one day (YYYY-MM-DD)."""
        response = await self._request("GET", f"wellness/{date_str}")
        return response.json() or {}

    async def get_wellness_range(
        self,
        oldest: str,
        newest: str,
        cols: Optional[list[str]] = None,
    ) -> list[dict]:
        """Fetch partial wellness records for a date range (inclusive)."""
        params = {"oldest": oldest, "newest": newest}
        if cols:
            params["cols"] = ",".join(cols)
        response = await self._request("GET", "wellness", params=params)
        return response.json() or []

    async def put_wellness(self, date_str: str, fields: dict) -> dict:
        """Upsert selected fields of one day's wellness record."""
        payload = {"id": date_str, **fields}
        response = await self._request("PUT", f"wellness/{date_str}", json=payload)
        logger.debug(f"PUT wellness/{date_str}: {sorted(fields)}")
        if not response.content:
            return {}
        return response.json()
