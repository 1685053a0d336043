from __future__ import annotations

from typing import Any, List, Literal

from pydantic import BaseModel, Field

from squadcheck.models import LeagueRules, PlayerRecord
from squadcheck.models.league import GameMode
from squadcheck.validation import ErrorDescriptor, ValidationResult


class ReplacementPayload(BaseModel):
    outgoing: PlayerRecord
    incoming: PlayerRecord


class SquadValidationRequest(BaseModel):
    sport: str | None = None
    players: List[PlayerRecord] = Field(default_factory=list)
    rules: LeagueRules = Field(default_factory=LeagueRules)
    intent: Literal["add", "submit"] = "add"
    draft_pool: List[str] | None = None
    replacements: List[ReplacementPayload] | None = None


class LeagueValidationRequest(BaseModel):
    game_mode: GameMode
    max_participants: int = Field(..., ge=1)
    rules: LeagueRules = Field(default_factory=LeagueRules)


class ErrorDescriptorResponse(BaseModel):
    kind: str
    rule_source: str
    params: dict[str, Any]
    message: str

    @classmethod
    def from_descriptor(cls, descriptor: ErrorDescriptor) -> "ErrorDescriptorResponse":
        return cls(**descriptor.to_dict())


class ValidationResponse(BaseModel):
    valid: bool
    blocked: bool
    errors: List[ErrorDescriptorResponse]
    blocking: List[ErrorDescriptorResponse]

    @classmethod
    def from_result(cls, result: ValidationResult, submission: bool = True) -> "ValidationResponse":
        blocking = result.blocking(submission)
        return cls(
            valid=result.valid,
            blocked=bool(blocking),
            errors=[ErrorDescriptorResponse.from_descriptor(error) for error in result.errors],
            blocking=[ErrorDescriptorResponse.from_descriptor(error) for error in blocking],
        )
