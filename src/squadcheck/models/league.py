"""League rule models shared by the validator, API and CLI."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


GameMode = Literal["standard", "round-robin", "ranked"]


class DraftSettings(BaseModel):
    draft_type: Literal["snake", "linear"]
    pick_time_limit: float = Field(..., gt=0)
    draft_order: Literal["random", "ranked"]
    scheduled_date: str

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class LeagueRules(BaseModel):
    """Per-league rule snapshot.

    Rules are replaced wholesale when a league creator edits them, so the
    model is frozen: build a new instance with ``model_validate`` instead of
    mutating one in place.
    """

    draft_mode: bool = False
    pricing_model: Literal["fixed", "dynamic"] = "fixed"
    price_cap_enabled: bool = True
    price_cap: float | None = None
    position_matching: bool = False
    squad_limit_per_team: int | None = Field(default=None, ge=0)
    shared_pool: bool = False
    transfers_per_round: int = Field(default=3, ge=0)
    wildcard_rounds: List[int] = Field(default_factory=list)
    triple_captain_rounds: List[int] = Field(default_factory=list)
    bench_boost_rounds: List[int] = Field(default_factory=list)
    draft_settings: DraftSettings | None = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def enforces_price_cap(self) -> bool:
        return self.price_cap_enabled and self.price_cap is not None


class _LeagueFields(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateLeagueRequest(_LeagueFields):
    name: str = Field(..., min_length=3, max_length=60)
    game_mode: GameMode
    is_public: bool = False
    max_participants: int = Field(default=10, ge=2, le=100)
    rules: LeagueRules = Field(default_factory=LeagueRules)

    @model_validator(mode="after")
    def _check_participant_bounds(self) -> "CreateLeagueRequest":
        from squadcheck.validation.participants import validate_participant_bounds

        result = validate_participant_bounds(
            self.game_mode,
            self.max_participants,
            draft_mode=self.rules.draft_mode,
        )
        if not result.valid:
            raise ValueError("; ".join(result.messages))
        return self


class UpdateLeagueRequest(_LeagueFields):
    id: int
    name: str | None = Field(default=None, min_length=3, max_length=60)
    game_mode: GameMode | None = None
    is_public: bool | None = None
    max_participants: int | None = Field(default=None, ge=2, le=100)
    rules: LeagueRules | None = None


class JoinLeagueByCodeRequest(_LeagueFields):
    invite_code: str = Field(..., min_length=8, max_length=8)
    team_name: str = Field(..., min_length=1, max_length=50)
