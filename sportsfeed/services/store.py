"""In-memory id -> label store with sweep-based expiry.

Entries are stamped on write and evicted by a recurring sweep once they are
older than ``max_age``. Reads never check age, so a value can be served for
up to ``max_age + sweep_interval`` after its last write.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from collections.abc import Callable
from typing import NamedTuple

log = logging.getLogger(__name__)


class MappingEntry(NamedTuple):
    value: str
    written_at: float


class TemporalMappingStore:
    """Mapping store whose entries expire by age on a background sweep."""

    def __init__(
        self,
        max_age: float,
        sweep_interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.max_age = max_age
        self.sweep_interval = sweep_interval
        self._clock = clock
        self._loop = loop or asyncio.get_running_loop()
        self._store: dict[str, MappingEntry] = {}
        self._lock = threading.Lock()
        self._destroyed = False
        self._timer: asyncio.TimerHandle | None = None
        self._schedule_sweep()

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._store.get(key)
        if entry is None:
            return None
        return entry.value

    def set(self, key: str, value: str) -> None:
        entry = MappingEntry(value, self._clock())
        with self._lock:
            self._store[key] = entry

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def sweep(self) -> int:
        """Evict every entry older than max_age. Returns the eviction count."""
        with self._lock:
            now = self._clock()
            expired = [
                key for key, entry in self._store.items()
                if now - entry.written_at > self.max_age
            ]
            for key in expired:
                del self._store[key]
        if expired:
            log.debug("Swept %d expired mappings", len(expired))
        return len(expired)

    def destroy(self) -> None:
        """Stop background sweeping. get/set keep working."""
        self._destroyed = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    @property
    def sweeping(self) -> bool:
        return self._timer is not None

    def _schedule_sweep(self) -> None:
        if self._destroyed:
            return
        self._timer = self._loop.call_later(self.sweep_interval, self._on_sweep_timer)

    def _on_sweep_timer(self) -> None:
        self._timer = None
        try:
            self.sweep()
        finally:
            self._schedule_sweep()
