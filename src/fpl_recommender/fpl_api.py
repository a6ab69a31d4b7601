"""Gateway to the public FPL API, fronted by a TTL cache."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from fpl_recommender.cache import TTLCache
from fpl_recommender.config import Settings, get_settings
from fpl_recommender.models import Bootstrap, FPLFixture

logger = logging.getLogger(__name__)

BOOTSTRAP_PATH = "bootstrap-static/"
FIXTURES_PATH = "fixtures/"

_fixture_list = TypeAdapter(list[FPLFixture])


class FPLUnavailable(Exception):
    """The FPL API could not be reached or answered with a non-2xx status."""


class MalformedUpstream(FPLUnavailable):
    """The FPL API answered, but not with the shape we expect."""


class FPLClient:
    """Fetches FPL resources as JSON, caching each one for ``cache_ttl_seconds``.

    A failed live fetch is never retried and never falls back to an expired
    value; the error goes straight to the caller.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        cache: TTLCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.cache = cache if cache is not None else TTLCache(self.settings.cache_ttl_seconds)
        self._transport = transport

    def url_for(self, path: str) -> str:
        return f"{self.settings.fpl_api_base.rstrip('/')}/{path.lstrip('/')}"

    def expires_at(self, path: str) -> float | None:
        """When the cached response for ``path`` goes stale, None if not cached."""
        return self.cache.expires_at(self.url_for(path))

    async def get_json(self, path: str) -> Any:
        url = self.url_for(path)
        cached = self.cache.get(url)
        if cached is not None:
            return cached

        headers = {"User-Agent": self.settings.fpl_user_agent, "Accept": "application/json"}
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.http_timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                r = await client.get(url, headers=headers)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"FPL API error: {e.response.status_code} for {url}")
            raise FPLUnavailable(f"FPL API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"FPL API request failed: {e}")
            raise FPLUnavailable(f"FPL API request failed: {e}") from e
        except ValueError as e:
            raise MalformedUpstream(f"FPL API returned invalid JSON for {url}") from e

        self.cache.set(url, data)
        return data

    async def bootstrap(self) -> Bootstrap:
        data = await self.get_json(BOOTSTRAP_PATH)
        try:
            return Bootstrap.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected bootstrap payload: {e.error_count()} errors")
            raise MalformedUpstream("Unexpected bootstrap-static payload") from e

    async def fixtures(self) -> list[FPLFixture]:
        data = await self.get_json(FIXTURES_PATH)
        try:
            return _fixture_list.validate_python(data)
        except ValidationError as e:
            logger.error(f"Unexpected fixtures payload: {e.error_count()} errors")
            raise MalformedUpstream("Unexpected fixtures payload") from e
