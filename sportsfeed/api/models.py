"""Pydantic models for feed payloads and display-ready events."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NO_SCORES = "N/A"


class FeedModel(BaseModel):
    """Accepts the feeds' camelCase keys as well as field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MappingsPayload(FeedModel):
    mappings: str | None = None


class PersistedSportEvent(FeedModel):
    id: str
    sport_id: str
    competition_id: str
    start_time: str
    home_competitor_id: str
    away_competitor_id: str
    status_id: str
    scores: str = ""
    timestamp: str | None = None


class PeriodScore(FeedModel):
    model_config = ConfigDict(frozen=True)

    type: str  # resolved period label, e.g. CURRENT
    home: str
    away: str


class Competitor(FeedModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["HOME", "AWAY"]
    name: str


class SportEvent(FeedModel):
    """Display-ready event with every id replaced by its label."""

    model_config = ConfigDict(frozen=True)

    id: str
    status: str
    scores: dict[str, PeriodScore] | Literal["N/A"] = Field(default=NO_SCORES)
    start_time: str
    sport: str
    competitors: dict[str, Competitor]
    competition: str
