"""Async httpx wrapper for the mapping feed."""

from __future__ import annotations

from typing import Any

import httpx

from sportsfeed.api.models import MappingsPayload


class FeedClient:
    """Async HTTP client for the mapping feed."""

    def __init__(
        self,
        mappings_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 15.0,
    ) -> None:
        self._mappings_url = mappings_url
        kwargs: dict[str, Any] = {"timeout": timeout}
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def get(self, url: str) -> Any:
        """GET a feed URL and return its JSON body."""
        response = await self._client.get(url)
        response.raise_for_status()
        return response.json()

    async def fetch_mappings(self) -> str | None:
        """Fetch the raw ``id:LABEL;...`` payload. None means no update."""
        data = await self.get(self._mappings_url)
        return MappingsPayload.model_validate(data).mappings
