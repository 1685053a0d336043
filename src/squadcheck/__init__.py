"""Squad and league rule validation for fantasy sports leagues."""

from squadcheck.config import SportSquadConfig, get_sport_config
from squadcheck.models import LeagueRules, PlayerRecord
from squadcheck.validation import (
    ErrorDescriptor,
    ErrorKind,
    ValidationResult,
    format_error,
    validate_participant_bounds,
    validate_squad,
)

__all__ = [
    "ErrorDescriptor",
    "ErrorKind",
    "LeagueRules",
    "PlayerRecord",
    "SportSquadConfig",
    "ValidationResult",
    "format_error",
    "get_sport_config",
    "validate_participant_bounds",
    "validate_squad",
]
