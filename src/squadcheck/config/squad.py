"""Squad shape configuration for supported sports."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional


class SquadConfigError(ValueError):
    """Raised when a sport configuration breaks its own invariants."""


@dataclass(frozen=True)
class PositionRequirement:
    min: int
    max: int
    required: int
    label: str

    def __post_init__(self) -> None:
        if self.min < 1:
            raise SquadConfigError(f"{self.label!r}: min must be at least 1, got {self.min}")
        if self.max < self.min:
            raise SquadConfigError(f"{self.label!r}: max {self.max} is below min {self.min}")
        if not self.min <= self.required <= self.max:
            raise SquadConfigError(
                f"{self.label!r}: required {self.required} outside [{self.min}, {self.max}]"
            )
        if not self.label:
            raise SquadConfigError("Position label must be a non-empty string")


@dataclass(frozen=True)
class SportSquadConfig:
    sport: str
    max_players: int
    positions: Mapping[str, PositionRequirement] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.max_players <= 0:
            raise SquadConfigError(f"{self.sport}: max_players must be positive, got {self.max_players}")
        if not self.positions:
            raise SquadConfigError(f"{self.sport}: at least one position is required")
        total_required = sum(req.required for req in self.positions.values())
        if total_required != self.max_players:
            raise SquadConfigError(
                f"{self.sport}: position requirements add up to {total_required}, "
                f"expected max_players={self.max_players}"
            )
        # Freeze the mapping so a shared config cannot be edited in place.
        object.__setattr__(self, "positions", MappingProxyType(dict(self.positions)))

    @property
    def total_required(self) -> int:
        return sum(req.required for req in self.positions.values())

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], sport: str = "custom") -> "SportSquadConfig":
        """Build a config from the static JSON shape (``maxPlayers`` + ``positions``)."""

        try:
            positions = {
                str(position_id): PositionRequirement(
                    min=int(entry["min"]),
                    max=int(entry["max"]),
                    required=int(entry["required"]),
                    label=str(entry["label"]),
                )
                for position_id, entry in payload["positions"].items()
            }
            max_players = int(payload["maxPlayers"])
        except SquadConfigError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise SquadConfigError(f"Malformed sport config for {sport!r}: {exc}") from exc
        return cls(sport=payload.get("sport", sport), max_players=max_players, positions=positions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sport": self.sport,
            "maxPlayers": self.max_players,
            "positions": {
                position_id: {
                    "min": req.min,
                    "max": req.max,
                    "required": req.required,
                    "label": req.label,
                }
                for position_id, req in self.positions.items()
            },
        }


def _fixed(count: int, label: str) -> PositionRequirement:
    return PositionRequirement(min=count, max=count, required=count, label=label)


_SPORT_CONFIGS: Dict[str, SportSquadConfig] = {
    "rugby-union": SportSquadConfig(
        sport="rugby-union",
        max_players=15,
        positions={
            "outside_back": _fixed(3, "Outside Back"),
            "center": _fixed(2, "Center"),
            "fly_half": _fixed(1, "Fly Half"),
            "scrum_half": _fixed(1, "Scrum Half"),
            "loose_forward": _fixed(3, "Loose Forward"),
            "lock": _fixed(2, "Lock"),
            "prop": _fixed(2, "Prop"),
            "hooker": _fixed(1, "Hooker"),
        },
    ),
}

DEFAULT_SPORT = "rugby-union"


def iter_sport_configs() -> Iterable[SportSquadConfig]:
    """Return an iterator of all built-in sport configurations."""

    return _SPORT_CONFIGS.values()


def get_sport_config(sport: str = DEFAULT_SPORT) -> SportSquadConfig:
    """Fetch the squad config for a sport, raising KeyError if missing."""

    key = sport.lower()
    if key not in _SPORT_CONFIGS:
        raise KeyError(f"Unknown sport: {sport}")
    return _SPORT_CONFIGS[key]


def get_position_requirement(config: SportSquadConfig, position: str) -> Optional[PositionRequirement]:
    return config.positions.get(position)
