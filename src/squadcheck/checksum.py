"""Content checksums used by clients to poll for changed tenant data."""

from __future__ import annotations

import hashlib
import json
import threading
import time
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel


PLAYERS_PARTITION = "players"
ROUNDS_PARTITION = "rounds"


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"Object of type {type(value).__name__} is not checksum serializable")


def generate_checksum(data: Any) -> str:
    """MD5 of the canonical JSON form of ``data`` (keys sorted, compact)."""

    payload = json.dumps(data, sort_keys=True, separators=(",", ":"), default=_json_default)
    return hashlib.md5(payload.encode("utf-8")).hexdigest()


def generate_checksums(partitions: Mapping[str, Any]) -> Dict[str, str]:
    return {key: generate_checksum(value) for key, value in partitions.items()}


def etag_for(checksums: Mapping[str, str]) -> str:
    return f'"{checksums.get(PLAYERS_PARTITION, "")}-{checksums.get(ROUNDS_PARTITION, "")}"'


@dataclass
class CachedChecksums:
    checksums: Dict[str, str]
    stored_at: float


class ChecksumCache:
    """Per-tenant checksum store with optional expiry.

    The API keeps one instance on ``app.state``; entries older than
    ``ttl_seconds`` read as missing.
    """

    def __init__(self, ttl_seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CachedChecksums] = {}
        self._lock = threading.Lock()

    def _expired(self, entry: CachedChecksums) -> bool:
        if self.ttl_seconds is None:
            return False
        return self._clock() - entry.stored_at >= self.ttl_seconds

    def get(self, tenant_id: str) -> Optional[CachedChecksums]:
        with self._lock:
            entry = self._entries.get(tenant_id)
            if entry is None:
                return None
            if self._expired(entry):
                del self._entries[tenant_id]
                return None
            return CachedChecksums(checksums=dict(entry.checksums), stored_at=entry.stored_at)

    def store(self, tenant_id: str, checksums: Mapping[str, str]) -> None:
        with self._lock:
            self._entries[tenant_id] = CachedChecksums(checksums=dict(checksums), stored_at=self._clock())

    def invalidate(self, tenant_id: str, partition: str) -> bool:
        """Replace one partition's checksum so pollers see a change.

        Returns False when nothing is cached for the tenant.
        """

        with self._lock:
            entry = self._entries.get(tenant_id)
            if entry is None:
                return False
            entry.checksums[partition] = generate_checksum({"invalidated": time.time_ns()})
            return True

    def invalidate_players(self, tenant_id: str) -> bool:
        return self.invalidate(tenant_id, PLAYERS_PARTITION)

    def invalidate_rounds(self, tenant_id: str) -> bool:
        return self.invalidate(tenant_id, ROUNDS_PARTITION)

    def clear(self, tenant_id: str) -> None:
        with self._lock:
            self._entries.pop(tenant_id, None)
