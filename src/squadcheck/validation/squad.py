"""Squad validation against sport shape and league rules.

The validator is a pure function of its inputs: it never mutates the
candidate squad, the sport config or the rules, and it keeps no state
between calls, so the same inputs always produce the same ordered list of
violations. Every applicable check runs; callers get every problem at once
and decide for themselves which ones block the action they are previewing
(see :meth:`ValidationResult.blocking`).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Collection, FrozenSet, List, Optional, Sequence, Tuple

from squadcheck.config import SportSquadConfig, get_sport_config
from squadcheck.models.league import LeagueRules
from squadcheck.models.player import PlayerRecord

from .errors import ErrorDescriptor, ErrorKind


# Violations that stop a single player from being added to an in-progress
# squad. Shortfalls only block a final submission.
ADD_BLOCKING_KINDS: FrozenSet[ErrorKind] = frozenset(
    {
        ErrorKind.BUDGET_EXCEEDED,
        ErrorKind.SQUAD_LIMIT,
        ErrorKind.POSITION_TOO_MANY,
    }
)

Replacement = Tuple[PlayerRecord, PlayerRecord]


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: Tuple[ErrorDescriptor, ...] = ()

    @classmethod
    def from_errors(cls, errors: Sequence[ErrorDescriptor]) -> "ValidationResult":
        return cls(valid=not errors, errors=tuple(errors))

    @property
    def kinds(self) -> List[str]:
        return [error.kind.value for error in self.errors]

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]

    def has(self, kind: ErrorKind) -> bool:
        return any(error.kind == kind for error in self.errors)

    def blocking(self, submission: bool = False) -> Tuple[ErrorDescriptor, ...]:
        """Violations that block the caller's intent.

        A final submission is blocked by anything; a prospective addition only
        by the kinds in ``ADD_BLOCKING_KINDS``.
        """

        if submission:
            return self.errors
        return tuple(error for error in self.errors if error.kind in ADD_BLOCKING_KINDS)

    def first_blocking(self, submission: bool = False) -> Optional[ErrorDescriptor]:
        blocking = self.blocking(submission)
        return blocking[0] if blocking else None


def _check_budget(players: Sequence[PlayerRecord], rules: LeagueRules) -> List[ErrorDescriptor]:
    if not rules.enforces_price_cap:
        return []
    total_cost = sum(player.cost for player in players)
    if total_cost > rules.price_cap:
        return [ErrorDescriptor.of(ErrorKind.BUDGET_EXCEEDED, total=total_cost, cap=rules.price_cap)]
    return []


def _check_squad_limit(players: Sequence[PlayerRecord], rules: LeagueRules) -> List[ErrorDescriptor]:
    limit = rules.squad_limit_per_team
    if limit is None:
        return []
    # Counter keeps first-appearance order, which keeps the output stable.
    counts = Counter(player.squad_id for player in players)
    return [
        ErrorDescriptor.of(ErrorKind.SQUAD_LIMIT, limit=limit, squad=squad_id, count=count)
        for squad_id, count in counts.items()
        if count > limit
    ]


def _check_positions(players: Sequence[PlayerRecord], config: SportSquadConfig) -> List[ErrorDescriptor]:
    counts = Counter(player.position for player in players)
    too_many: List[ErrorDescriptor] = []
    not_enough: List[ErrorDescriptor] = []
    for position_id, requirement in config.positions.items():
        count = counts.get(position_id, 0)
        if count > requirement.max:
            too_many.append(
                ErrorDescriptor.of(
                    ErrorKind.POSITION_TOO_MANY,
                    position=requirement.label,
                    current=count,
                    max=requirement.max,
                )
            )
        if count < requirement.required:
            not_enough.append(
                ErrorDescriptor.of(
                    ErrorKind.POSITION_NOT_ENOUGH,
                    count=requirement.required - count,
                    position=requirement.label,
                )
            )
    return too_many + not_enough


def _check_size(players: Sequence[PlayerRecord], config: SportSquadConfig) -> List[ErrorDescriptor]:
    if len(players) != config.max_players:
        return [ErrorDescriptor.of(ErrorKind.SQUAD_SIZE_INVALID, count=config.max_players, current=len(players))]
    return []


def _check_draft_pool(
    players: Sequence[PlayerRecord],
    rules: LeagueRules,
    draft_pool: Optional[Collection[str]],
) -> List[ErrorDescriptor]:
    if not rules.draft_mode or draft_pool is None:
        return []
    return [
        ErrorDescriptor.of(ErrorKind.DRAFT_PICK_NOT_AVAILABLE, player_id=player.player_id)
        for player in players
        if player.player_id not in draft_pool
    ]


def _check_player_status(players: Sequence[PlayerRecord]) -> List[ErrorDescriptor]:
    errors: List[ErrorDescriptor] = []
    for player in players:
        if player.is_locked:
            errors.append(ErrorDescriptor.of(ErrorKind.PLAYER_LOCKED, player_id=player.player_id))
        if player.is_injured:
            errors.append(ErrorDescriptor.of(ErrorKind.PLAYER_INJURED, player_id=player.player_id))
    return errors


def _check_position_matching(
    rules: LeagueRules,
    replacements: Optional[Sequence[Replacement]],
) -> List[ErrorDescriptor]:
    if not rules.position_matching or not replacements:
        return []
    return [
        ErrorDescriptor.of(
            ErrorKind.POSITION_MATCHING_REQUIRED,
            outgoing=outgoing.player_id,
            incoming=incoming.player_id,
            position=outgoing.position,
        )
        for outgoing, incoming in replacements
        if outgoing.position != incoming.position
    ]


def validate_squad(
    players: Sequence[PlayerRecord],
    config: Optional[SportSquadConfig] = None,
    rules: Optional[LeagueRules] = None,
    *,
    draft_pool: Optional[Collection[str]] = None,
    replacements: Optional[Sequence[Replacement]] = None,
) -> ValidationResult:
    """Validate a candidate squad and report every violation found.

    Args:
        players: Candidate squad, in selection order.
        config: Sport squad shape; defaults to the built-in default sport.
        rules: League rules snapshot; defaults to ``LeagueRules()`` which
            enforces no cap and no per-team limit.
        draft_pool: Player ids still available in a draft league's shared
            pool. Only consulted when ``rules.draft_mode`` is set.
        replacements: ``(outgoing, incoming)`` pairs the caller wants held to
            the position-matching rule. Which pairs count (for example the
            players from the last game) is decided by the caller.

    Returns:
        ``ValidationResult`` whose ``errors`` are ordered: budget, per-team
        limit, position ceilings, position shortfalls, squad size, draft
        availability, player status, position matching.
    """

    config = config or get_sport_config()
    rules = rules or LeagueRules()
    players = tuple(players)

    errors: List[ErrorDescriptor] = []
    errors.extend(_check_budget(players, rules))
    errors.extend(_check_squad_limit(players, rules))
    errors.extend(_check_positions(players, config))
    errors.extend(_check_size(players, config))
    errors.extend(_check_draft_pool(players, rules, draft_pool))
    errors.extend(_check_player_status(players))
    errors.extend(_check_position_matching(rules, replacements))
    return ValidationResult.from_errors(errors)


def preview_addition(
    current: Sequence[PlayerRecord],
    player: PlayerRecord,
    config: Optional[SportSquadConfig] = None,
    rules: Optional[LeagueRules] = None,
    *,
    draft_pool: Optional[Collection[str]] = None,
) -> ValidationResult:
    """Validate ``current`` as it would look with ``player`` added.

    Use ``result.blocking()`` to decide whether the add should be allowed.
    A player who is already selected is not added twice.
    """

    candidate = list(current)
    if all(existing.player_id != player.player_id for existing in candidate):
        candidate.append(player)
    return validate_squad(candidate, config, rules, draft_pool=draft_pool)


def check_squad_limit(
    players: Sequence[PlayerRecord],
    new_player: PlayerRecord,
    max_per_team: int,
) -> ValidationResult:
    """Incremental per-team check for adding ``new_player`` to ``players``."""

    current = sum(1 for player in players if player.squad_id == new_player.squad_id)
    if current >= max_per_team:
        return ValidationResult.from_errors(
            [ErrorDescriptor.of(ErrorKind.SQUAD_LIMIT, limit=max_per_team, squad=new_player.squad_id, count=current + 1)]
        )
    return ValidationResult(valid=True)


def is_valid_position(position: object, config: Optional[SportSquadConfig] = None) -> bool:
    config = config or get_sport_config()
    return isinstance(position, str) and position in config.positions
