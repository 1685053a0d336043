from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from squadcheck.models import PlayerRecord, RoundRecord


class AutoLockRequest(BaseModel):
    players: List[PlayerRecord] = Field(default_factory=list)
    rounds: List[RoundRecord] = Field(default_factory=list)
    now: datetime | None = None


class AutoLockResponse(BaseModel):
    locked_count: int
    rounds: List[str]
    players: List[PlayerRecord]
    checksums: dict[str, str]
