"""Lock players once their round has started."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from typing import List, Optional, Sequence, Tuple

from squadcheck.checksum import ChecksumCache
from squadcheck.models import PlayerRecord, RoundRecord


logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class AutoLockResult:
    players: Tuple[PlayerRecord, ...]
    locked_count: int
    rounds: Tuple[RoundRecord, ...]


def _as_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def started_rounds(rounds: Sequence[RoundRecord], now: datetime) -> List[RoundRecord]:
    now = _as_aware(now)
    return [round_ for round_ in rounds if _as_aware(round_.start_date) <= now]


def auto_lock_players(
    players: Sequence[PlayerRecord],
    rounds: Sequence[RoundRecord],
    *,
    tenant_id: str,
    now: Optional[datetime] = None,
    cache: Optional[ChecksumCache] = None,
) -> AutoLockResult:
    """Lock every unlocked player when at least one round has started.

    Records are frozen, so locked players come back as new records; the
    caller persists them. When anything was locked the tenant's players
    checksum is invalidated in ``cache`` so polling clients refetch.
    """

    now = now or datetime.now(timezone.utc)
    to_lock = started_rounds(rounds, now)
    if not to_lock:
        logger.debug("No rounds to lock for tenant %s", tenant_id)
        return AutoLockResult(players=tuple(players), locked_count=0, rounds=())

    updated: List[PlayerRecord] = []
    locked = 0
    for player in players:
        if player.is_locked:
            updated.append(player)
            continue
        updated.append(player.model_copy(update={"is_locked": True}))
        locked += 1

    logger.info(
        "Auto-locked %d players for %d rounds in tenant %s (%s)",
        locked,
        len(to_lock),
        tenant_id,
        ", ".join(round_.name for round_ in to_lock),
    )

    if locked and cache is not None:
        cache.invalidate_players(tenant_id)

    return AutoLockResult(players=tuple(updated), locked_count=locked, rounds=tuple(to_lock))
