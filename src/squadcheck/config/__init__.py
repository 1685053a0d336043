"""Configuration helpers for sport squad shapes."""

from .squad import (
    DEFAULT_SPORT,
    PositionRequirement,
    SportSquadConfig,
    SquadConfigError,
    get_position_requirement,
    get_sport_config,
    iter_sport_configs,
)

__all__ = [
    "DEFAULT_SPORT",
    "PositionRequirement",
    "SportSquadConfig",
    "SquadConfigError",
    "get_position_requirement",
    "get_sport_config",
    "iter_sport_configs",
]
