"""Player and league models."""

from .league import (
    CreateLeagueRequest,
    DraftSettings,
    JoinLeagueByCodeRequest,
    LeagueRules,
    UpdateLeagueRequest,
)
from .player import PlayerRecord, RoundRecord

__all__ = [
    "CreateLeagueRequest",
    "DraftSettings",
    "JoinLeagueByCodeRequest",
    "LeagueRules",
    "PlayerRecord",
    "RoundRecord",
    "UpdateLeagueRequest",
]
