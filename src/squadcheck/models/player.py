"""Canonical player models shared across validation, jobs and the API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


INJURED_STATUS = "injured"


class PlayerRecord(BaseModel):
    """Normalized player payload used to build candidate squads."""

    player_id: str = Field(..., min_length=1)
    name: str = ""
    position: str
    squad_id: str
    cost: float = Field(..., gt=0)
    status: str = "available"
    is_locked: bool = False

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def is_injured(self) -> bool:
        return self.status.strip().lower() == INJURED_STATUS


class RoundRecord(BaseModel):
    round_id: str = Field(..., min_length=1)
    name: str
    start_date: datetime

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
