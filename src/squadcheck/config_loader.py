"""Load sport configs, league rules and squads from JSON files and the environment."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from squadcheck.config import DEFAULT_SPORT, SportSquadConfig, get_sport_config
from squadcheck.models import LeagueRules, PlayerRecord


logger = logging.getLogger("uvicorn.error")

_SPORT_ENV = "SQUADCHECK_SPORT"
_CHECKSUM_TTL_ENV = "SQUADCHECK_CHECKSUM_TTL"


def _read_json(path: Path) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def default_sport() -> str:
    return os.getenv(_SPORT_ENV, DEFAULT_SPORT)


def checksum_ttl() -> Optional[float]:
    raw = os.getenv(_CHECKSUM_TTL_ENV)
    if not raw:
        return None
    try:
        ttl = float(raw)
    except ValueError:
        logger.warning("Invalid checksum TTL %s; ignoring", raw)
        return None
    if ttl <= 0:
        logger.warning("Non-positive checksum TTL %s; ignoring", raw)
        return None
    return ttl


def load_sport_config(path: Optional[Path] = None, sport: Optional[str] = None) -> SportSquadConfig:
    """Load a sport config from ``path``, or the built-in one for ``sport``."""

    if path is None:
        return get_sport_config(sport or default_sport())
    return SportSquadConfig.from_dict(_read_json(path), sport=sport or Path(path).stem)


def load_league_rules(path: Optional[Path] = None) -> LeagueRules:
    if path is None:
        return LeagueRules()
    return LeagueRules.model_validate(_read_json(path))


def load_players(path: Path) -> List[PlayerRecord]:
    """Read a squad file: either a list of players or ``{"players": [...]}``."""

    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("players", [])
    return [PlayerRecord.model_validate(item) for item in data]


@dataclass
class ValidationProfile:
    """Saved CLI defaults: which sport to validate against and the league rules."""

    sport: str = DEFAULT_SPORT
    rules: LeagueRules = field(default_factory=LeagueRules)

    @classmethod
    def load(cls, path: Path) -> "ValidationProfile":
        data = _read_json(path)
        return cls(
            sport=data.get("sport", DEFAULT_SPORT),
            rules=LeagueRules.model_validate(data.get("rules", {})),
        )

    def save(self, path: Path) -> None:
        payload = {
            "sport": self.sport,
            "rules": self.rules.model_dump(mode="json", by_alias=True),
        }
        Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")
