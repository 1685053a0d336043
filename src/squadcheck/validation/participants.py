"""Participant-count bounds for league creation."""

from __future__ import annotations

from typing import Dict, List

from .errors import ErrorDescriptor, LeagueErrorKind
from .squad import ValidationResult


MIN_PARTICIPANTS: Dict[str, int] = {
    "standard": 2,
    "round-robin": 3,
    "ranked": 4,
}

MODE_LABELS: Dict[str, str] = {
    "standard": "Standard",
    "round-robin": "Round Robin",
    "ranked": "Ranked",
}

# Draft mode adds its own floor and ceiling on top of the game-mode minimum.
MIN_DRAFT_PARTICIPANTS = 4
MAX_DRAFT_PARTICIPANTS = 20


def participant_bounds(game_mode: str, draft_mode: bool = False) -> tuple[int, int | None]:
    """Return ``(effective_min, effective_max)``; max is None when unbounded."""

    if game_mode not in MIN_PARTICIPANTS:
        raise ValueError(f"Unknown game mode {game_mode!r}")
    mode_min = MIN_PARTICIPANTS[game_mode]
    if draft_mode:
        return max(mode_min, MIN_DRAFT_PARTICIPANTS), MAX_DRAFT_PARTICIPANTS
    return mode_min, None


def validate_participant_bounds(
    game_mode: str,
    max_participants: int,
    draft_mode: bool = False,
) -> ValidationResult:
    effective_min, effective_max = participant_bounds(game_mode, draft_mode)
    mode_min = MIN_PARTICIPANTS[game_mode]
    label = MODE_LABELS.get(game_mode, game_mode)

    errors: List[ErrorDescriptor] = []
    if max_participants < effective_min:
        qualifier = f"Draft {label}" if draft_mode and MIN_DRAFT_PARTICIPANTS > mode_min else label
        errors.append(
            ErrorDescriptor.of(
                LeagueErrorKind.PARTICIPANTS_TOO_FEW,
                qualifier=qualifier,
                minimum=effective_min,
            )
        )
    if effective_max is not None and max_participants > effective_max:
        errors.append(ErrorDescriptor.of(LeagueErrorKind.PARTICIPANTS_TOO_MANY, maximum=effective_max))
    return ValidationResult.from_errors(errors)
