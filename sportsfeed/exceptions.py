"""Error taxonomy for mapping resolution and score parsing."""

from __future__ import annotations


class SportsFeedError(Exception):
    """Base exception for all sportsfeed errors."""


class MappingNotFoundError(SportsFeedError, KeyError):
    """An id has no label in the mapping store."""

    def __init__(self, field: str, mapping_id: str) -> None:
        self.field = field
        self.mapping_id = mapping_id
        super().__init__(f"No mapping for {field}={mapping_id!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class EventMappingError(SportsFeedError):
    """A persisted event references ids the store cannot resolve."""

    def __init__(self, event_id: str, missing: list[tuple[str, str]]) -> None:
        self.event_id = event_id
        self.missing = missing
        fields = ", ".join(f"{name}={value!r}" for name, value in missing)
        super().__init__(f"Event {event_id} has unresolved mappings: {fields}")


class ScoreFormatError(SportsFeedError, ValueError):
    """A raw score string does not follow periodId@home:away."""

    def __init__(self, raw: str, entry: str) -> None:
        self.raw = raw
        self.entry = entry
        super().__init__(f"Malformed score entry {entry!r} in {raw!r}")
