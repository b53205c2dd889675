"""Tests for FeedClient using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from sportsfeed.api.client import FeedClient

MAPPINGS_URL = "http://feed.test/api/mappings"


def _client(handler) -> FeedClient:
    return FeedClient(MAPPINGS_URL, transport=httpx.MockTransport(handler))


async def test_fetch_mappings():
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == MAPPINGS_URL
        return httpx.Response(200, json={"mappings": "1:FOOTBALL;2:BASKETBALL"})

    client = _client(handler)
    try:
        assert await client.fetch_mappings() == "1:FOOTBALL;2:BASKETBALL"
    finally:
        await client.close()


async def test_fetch_mappings_absent():
    client = _client(lambda request: httpx.Response(200, json={}))
    try:
        assert await client.fetch_mappings() is None
    finally:
        await client.close()


async def test_fetch_mappings_http_error():
    client = _client(lambda request: httpx.Response(503))
    try:
        with pytest.raises(httpx.HTTPStatusError):
            await client.fetch_mappings()
    finally:
        await client.close()
