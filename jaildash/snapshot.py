"""
Shared jail snapshot.

One writer (the poller) and many readers (request threads) share a single
published mapping. replace() builds the new mapping outside the lock and only
swaps the reference inside it; read() only grabs the reference. A published
mapping is never mutated afterwards, so a reader always sees one complete poll
cycle no matter how long it holds on to it.
"""

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from jaildash.models import ViewRecord

_EMPTY: Mapping[str, ViewRecord] = MappingProxyType({})


@dataclass(frozen=True)
class SnapshotStatus:
    generation: int
    refreshed_at: Optional[datetime]
    last_error: Optional[str]
    records: Mapping[str, ViewRecord]

    @property
    def jail_count(self) -> int:
        return len(self.records)


class Snapshot:
    def __init__(self):
        self._lock = threading.Lock()
        self._records: Mapping[str, ViewRecord] = _EMPTY
        self._generation = 0
        self._refreshed_at: Optional[datetime] = None
        self._last_error: Optional[str] = None

    def read(self) -> Mapping[str, ViewRecord]:
        """Return the currently published mapping (read-only view)."""
        with self._lock:
            return self._records

    def replace(self, records: Dict[str, ViewRecord]) -> None:
        """Publish a new mapping in full, replacing the previous one."""
        published = MappingProxyType(dict(records))
        now = datetime.now(timezone.utc)
        with self._lock:
            self._records = published
            self._generation += 1
            self._refreshed_at = now
            self._last_error = None

    def record_failure(self, message: str) -> None:
        """Note a failed refresh; the published mapping stays as it is."""
        with self._lock:
            self._last_error = message

    def status(self) -> SnapshotStatus:
        with self._lock:
            return SnapshotStatus(
                generation=self._generation,
                refreshed_at=self._refreshed_at,
                last_error=self._last_error,
                records=self._records,
            )
