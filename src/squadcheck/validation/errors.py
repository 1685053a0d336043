"""Violation taxonomy, rule sources and message rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union


class ErrorKind(str, Enum):
    """Closed set of squad violations callers pattern-match on."""

    BUDGET_EXCEEDED = "BUDGET_EXCEEDED"
    SQUAD_LIMIT = "SQUAD_LIMIT"
    POSITION_TOO_MANY = "POSITION_TOO_MANY"
    POSITION_NOT_ENOUGH = "POSITION_NOT_ENOUGH"
    SQUAD_SIZE_INVALID = "SQUAD_SIZE_INVALID"
    DRAFT_PICK_NOT_AVAILABLE = "DRAFT_PICK_NOT_AVAILABLE"
    PLAYER_LOCKED = "PLAYER_LOCKED"
    PLAYER_INJURED = "PLAYER_INJURED"
    POSITION_MATCHING_REQUIRED = "POSITION_MATCHING_REQUIRED"


class LeagueErrorKind(str, Enum):
    """Violations raised while checking league creation settings."""

    PARTICIPANTS_TOO_FEW = "PARTICIPANTS_TOO_FEW"
    PARTICIPANTS_TOO_MANY = "PARTICIPANTS_TOO_MANY"


AnyErrorKind = Union[ErrorKind, LeagueErrorKind]


VALIDATION_ERRORS: Mapping[AnyErrorKind, str] = {
    ErrorKind.BUDGET_EXCEEDED: "Over budget - remove players to add this one",
    ErrorKind.SQUAD_LIMIT: "Max {limit} players from same squad",
    ErrorKind.POSITION_TOO_MANY: "Already have max {position} players",
    ErrorKind.POSITION_NOT_ENOUGH: "Need {count} more {position}",
    ErrorKind.SQUAD_SIZE_INVALID: "Squad must have exactly {count} players",
    ErrorKind.DRAFT_PICK_NOT_AVAILABLE: "Player not available in draft",
    ErrorKind.PLAYER_LOCKED: "Player is locked",
    ErrorKind.PLAYER_INJURED: "Player is injured",
    ErrorKind.POSITION_MATCHING_REQUIRED: "Position must match last game",
    LeagueErrorKind.PARTICIPANTS_TOO_FEW: "{qualifier} leagues require at least {minimum} participants",
    LeagueErrorKind.PARTICIPANTS_TOO_MANY: "Draft leagues support a maximum of {maximum} participants",
}

# Which league/sport setting governs each violation.
RULE_SOURCES: Mapping[AnyErrorKind, str] = {
    ErrorKind.BUDGET_EXCEEDED: "priceCap",
    ErrorKind.SQUAD_LIMIT: "squadLimitPerTeam",
    ErrorKind.POSITION_TOO_MANY: "sportSquadConfig.positions",
    ErrorKind.POSITION_NOT_ENOUGH: "sportSquadConfig.positions",
    ErrorKind.SQUAD_SIZE_INVALID: "sportSquadConfig.maxPlayers",
    ErrorKind.DRAFT_PICK_NOT_AVAILABLE: "draftMode",
    ErrorKind.PLAYER_LOCKED: "playerStatus",
    ErrorKind.PLAYER_INJURED: "playerStatus",
    ErrorKind.POSITION_MATCHING_REQUIRED: "positionMatching",
    LeagueErrorKind.PARTICIPANTS_TOO_FEW: "gameMode",
    LeagueErrorKind.PARTICIPANTS_TOO_MANY: "draftMode",
}


def _resolve_kind(kind: Union[AnyErrorKind, str]) -> AnyErrorKind:
    if isinstance(kind, (ErrorKind, LeagueErrorKind)):
        return kind
    for enum_cls in (ErrorKind, LeagueErrorKind):
        try:
            return enum_cls(kind)
        except ValueError:
            continue
    raise KeyError(f"Unknown error kind {kind!r}")


def format_error(kind: Union[AnyErrorKind, str], params: Optional[Mapping[str, Any]] = None) -> str:
    """Render the message template for ``kind``.

    Every ``{key}`` placeholder whose key appears in ``params`` is replaced.
    Placeholders without a matching key are left in the output verbatim so an
    incomplete call is visible instead of raising.
    """

    message = VALIDATION_ERRORS[_resolve_kind(kind)]
    for key, value in (params or {}).items():
        message = message.replace(f"{{{key}}}", str(value))
    return message


@dataclass(frozen=True)
class ErrorDescriptor:
    """One broken rule: what fired, with which values, and why."""

    kind: AnyErrorKind
    params: Mapping[str, Any] = field(default_factory=dict, hash=False)
    rule_source: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @classmethod
    def of(cls, kind: AnyErrorKind, **params: Any) -> "ErrorDescriptor":
        return cls(kind=kind, params=params, rule_source=RULE_SOURCES[kind])

    @property
    def message(self) -> str:
        return format_error(self.kind, self.params)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "rule_source": self.rule_source,
            "params": dict(self.params),
            "message": self.message,
        }


_NEED_MORE = re.compile(r"\bneed \d+ more\b")


def classify(message: str) -> Optional[ErrorKind]:
    """Guess the kind of an already-rendered message from its wording.

    Kept for callers that still hold plain strings; descriptors produced by
    the validator carry their kind and never need this.
    """

    text = message.lower()
    if "budget" in text:
        return ErrorKind.BUDGET_EXCEEDED
    if "same team" in text or "same squad" in text:
        return ErrorKind.SQUAD_LIMIT
    if "too many" in text or "already have max" in text:
        return ErrorKind.POSITION_TOO_MANY
    if "not enough" in text or _NEED_MORE.search(text):
        return ErrorKind.POSITION_NOT_ENOUGH
    if "exactly" in text:
        return ErrorKind.SQUAD_SIZE_INVALID
    if "not available" in text:
        return ErrorKind.DRAFT_PICK_NOT_AVAILABLE
    if "must match" in text:
        return ErrorKind.POSITION_MATCHING_REQUIRED
    if "locked" in text:
        return ErrorKind.PLAYER_LOCKED
    if "injured" in text:
        return ErrorKind.PLAYER_INJURED
    return None
