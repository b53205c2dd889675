"""Orchestrator: poll the mapping feed, resolve event ids into labels."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from sportsfeed.api.client import FeedClient
from sportsfeed.api.models import (
    NO_SCORES,
    Competitor,
    PeriodScore,
    PersistedSportEvent,
    SportEvent,
)
from sportsfeed.config import Settings
from sportsfeed.exceptions import EventMappingError, MappingNotFoundError, ScoreFormatError
from sportsfeed.services.store import TemporalMappingStore

log = logging.getLogger(__name__)

FetchMappings = Callable[[], Awaitable[str | None]]

ENTRY_SEP = ";"
PERIOD_SEP = "|"

ID_FIELDS = (
    "sport_id",
    "competition_id",
    "status_id",
    "home_competitor_id",
    "away_competitor_id",
)


def parse_mappings(payload: str) -> list[tuple[str, str]]:
    """Split an ``id:LABEL;id:LABEL`` payload into pairs.

    Entries without a colon, or with an empty id or label, are skipped.
    """
    pairs: list[tuple[str, str]] = []
    for entry in payload.split(ENTRY_SEP):
        key, sep, label = entry.partition(":")
        key, label = key.strip(), label.strip()
        if not sep or not key or not label:
            if entry.strip():
                log.debug("Skipping malformed mapping entry %r", entry)
            continue
        pairs.append((key, label))
    return pairs


def parse_scores(raw: str) -> list[tuple[str, str, str]]:
    """Split ``periodId@home:away|...`` into (period_id, home, away) triples."""
    if not raw.strip():
        return []
    periods: list[tuple[str, str, str]] = []
    for entry in raw.split(PERIOD_SEP):
        period_id, at, score = entry.partition("@")
        home, colon, away = score.partition(":")
        if not at or not colon or not period_id:
            raise ScoreFormatError(raw, entry)
        periods.append((period_id, home, away))
    return periods


class EventMappingService:
    """Keeps the mapping store fresh and turns persisted events into SportEvents."""

    def __init__(
        self,
        fetch_mappings: FetchMappings,
        store: TemporalMappingStore,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.fetch_mappings = fetch_mappings
        self.store = store
        self.log = logger or log
        self._poll_task: asyncio.Task | None = None
        self._stopped = False

    @classmethod
    def create(cls, settings: Settings, client: FeedClient) -> EventMappingService:
        store = TemporalMappingStore(settings.max_age, settings.store_sweep_interval)
        return cls(client.fetch_mappings, store)

    # ── Polling ──

    @property
    def polling(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    def start_polling(self, interval: float) -> None:
        """Refresh mappings now and then every ``interval`` seconds.

        A second call while polling is active does nothing.
        """
        if self._stopped:
            raise RuntimeError("Polling was stopped; create a new service")
        if self.polling:
            self.log.debug("Polling for event mappings already running")
            return
        self.log.info("Starting polling for event mappings. Interval %ss", interval)
        self._poll_task = asyncio.create_task(self._poll(interval))

    async def _poll(self, interval: float) -> None:
        while not self._stopped:
            await self.update_mappings()
            await asyncio.sleep(interval)

    def stop_polling(self) -> None:
        """Cancel polling and stop the store's sweep. Safe to call repeatedly."""
        if self._stopped:
            return
        self._stopped = True
        if self._poll_task is not None:
            self._poll_task.cancel()
            self._poll_task = None
        self.log.info("Polling for event mappings stopped")
        self.store.destroy()

    async def update_mappings(self) -> int:
        """Fetch the mapping feed and write every pair into the store.

        Returns the number of mappings written. Fetch failures and empty
        payloads leave the store untouched.
        """
        try:
            payload = await self.fetch_mappings()
        except Exception:
            self.log.exception("Failed to fetch event mappings")
            return 0
        if not payload:
            self.log.warning("No event mappings received, keeping current mappings")
            return 0

        pairs = parse_mappings(payload)
        for key, label in pairs:
            self.store.set(key, label)
        self.log.debug("Updated %d event mappings", len(pairs))
        return len(pairs)

    # ── Transform ──

    def _resolve(self, field: str, mapping_id: str) -> str:
        label = self.store.get(mapping_id)
        if label is None:
            raise MappingNotFoundError(field, mapping_id)
        return label

    def get_mapped_scores(self, raw: str) -> dict[str, PeriodScore]:
        """Parse a raw score string into scores keyed by period label."""
        scores: dict[str, PeriodScore] = {}
        for period_id, home, away in parse_scores(raw):
            label = self._resolve("scores", period_id)
            scores[label] = PeriodScore(type=label, home=home, away=away)
        return scores

    def transform_event(self, persisted: PersistedSportEvent) -> SportEvent:
        """Build a display-ready event from the store's current mappings."""
        scores = self.get_mapped_scores(persisted.scores) if persisted.scores.strip() else NO_SCORES
        return SportEvent(
            id=persisted.id,
            status=self._resolve("status_id", persisted.status_id),
            scores=scores,
            start_time=persisted.start_time,
            sport=self._resolve("sport_id", persisted.sport_id),
            competitors={
                "HOME": Competitor(
                    type="HOME",
                    name=self._resolve("home_competitor_id", persisted.home_competitor_id),
                ),
                "AWAY": Competitor(
                    type="AWAY",
                    name=self._resolve("away_competitor_id", persisted.away_competitor_id),
                ),
            },
            competition=self._resolve("competition_id", persisted.competition_id),
        )

    def verify_event_mappings(self, persisted: PersistedSportEvent) -> None:
        """Raise EventMappingError if any id on the event has no mapping."""
        missing: list[tuple[str, str]] = []
        for field in ID_FIELDS:
            mapping_id = getattr(persisted, field)
            if mapping_id not in self.store:
                missing.append((field, mapping_id))
        for period_id, _, _ in parse_scores(persisted.scores):
            if period_id not in self.store:
                missing.append(("scores", period_id))
        if missing:
            raise EventMappingError(persisted.id, missing)
