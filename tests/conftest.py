"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from sportsfeed.api.models import PersistedSportEvent
from sportsfeed.services.mapping_service import EventMappingService
from sportsfeed.services.store import TemporalMappingStore


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
async def store(clock):
    """Store with a 10s max age whose timer never fires during a test."""
    s = TemporalMappingStore(max_age=10, sweep_interval=3600, clock=clock)
    yield s
    s.destroy()


@pytest.fixture
def fetch_mappings() -> AsyncMock:
    return AsyncMock(return_value="1:FOOTBALL;2:BASKETBALL;3:LIVE;4:PRE")


@pytest.fixture
async def service(store, fetch_mappings):
    svc = EventMappingService(fetch_mappings, store)
    yield svc
    svc.stop_polling()


@pytest.fixture
def mapped_store(store) -> TemporalMappingStore:
    """Store holding labels for every id on ``sample_event``."""
    store.set("sport1", "FOOTBALL")
    store.set("comp1", "Premier League")
    store.set("status1", "LIVE")
    store.set("home1", "Team A")
    store.set("away1", "Team B")
    store.set("period1", "CURRENT")
    store.set("period2", "PERIOD_1")
    return store


@pytest.fixture
def sample_event() -> PersistedSportEvent:
    return PersistedSportEvent(
        id="event1",
        sport_id="sport1",
        competition_id="comp1",
        start_time="2024-01-01T00:00:00Z",
        home_competitor_id="home1",
        away_competitor_id="away1",
        status_id="status1",
        scores="period1@1:0",
    )
