"""Command-line interface for checking squads and league settings."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from squadcheck.config_loader import (
    ValidationProfile,
    default_sport,
    load_league_rules,
    load_players,
    load_sport_config,
)
from squadcheck.validation import ValidationResult, validate_participant_bounds, validate_squad
from squadcheck.validation.participants import MIN_PARTICIPANTS


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="squadcheck", description="Validate fantasy squads and league settings")
    subparsers = parser.add_subparsers(dest="command", required=True)

    squad = subparsers.add_parser("validate", help="Validate a squad JSON file")
    squad.add_argument("squad", type=Path, help="Path to squad JSON (list of players or {'players': [...]})")
    squad.add_argument("--rules", type=Path, default=None, help="League rules JSON")
    squad.add_argument("--sport", default=None, help="Built-in sport key (default from SQUADCHECK_SPORT)")
    squad.add_argument("--sport-config", type=Path, default=None, help="Custom sport config JSON")
    squad.add_argument("--draft-pool", type=Path, default=None, help="JSON list of player ids still available")
    squad.add_argument(
        "--submit",
        action="store_true",
        help="Treat the squad as a final submission (shortfalls become blocking)",
    )
    squad.add_argument("--load-profile", type=Path, default=None, help="Load sport and rules from a profile JSON")
    squad.add_argument("--save-profile", type=Path, default=None, help="Save the resolved sport and rules")
    squad.add_argument("--json", action="store_true", help="Print the result as JSON")

    league = subparsers.add_parser("league", help="Check league participant bounds")
    league.add_argument("--mode", required=True, choices=sorted(MIN_PARTICIPANTS), help="Game mode")
    league.add_argument("--participants", type=int, required=True, help="Maximum participants")
    league.add_argument("--draft", action="store_true", help="League uses draft mode")
    league.add_argument("--json", action="store_true", help="Print the result as JSON")

    return parser.parse_args(argv)


def _emit(result: ValidationResult, blocking: Sequence, as_json: bool) -> None:
    if as_json:
        payload = {
            "valid": result.valid,
            "blocked": bool(blocking),
            "errors": [error.to_dict() for error in result.errors],
        }
        print(json.dumps(payload, indent=2))
        return

    if result.valid:
        print("OK")
        return
    blocking_ids = {id(error) for error in blocking}
    for error in result.errors:
        marker = "x" if id(error) in blocking_ids else "-"
        print(f" {marker} [{error.kind.value}] {error.message} ({error.rule_source})")


def _run_validate(args: argparse.Namespace) -> int:
    sport = args.sport
    rules = None
    draft_pool = None
    try:
        if args.load_profile:
            profile = ValidationProfile.load(args.load_profile)
            sport = sport or profile.sport
            rules = profile.rules
        if args.rules:
            rules = load_league_rules(args.rules)
        rules = rules or load_league_rules()
        config = load_sport_config(args.sport_config, sport=sport)
        players = load_players(args.squad)
        if args.draft_pool:
            draft_pool = set(json.loads(args.draft_pool.read_text(encoding="utf-8")))
    except KeyError as exc:
        raise SystemExit(str(exc.args[0])) from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid input: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Cannot read input: {exc}") from exc

    if args.save_profile:
        ValidationProfile(sport=sport or default_sport(), rules=rules).save(args.save_profile)
        print(f"Saved validation profile to {args.save_profile}")

    result = validate_squad(players, config, rules, draft_pool=draft_pool)
    blocking = result.blocking(submission=args.submit)
    _emit(result, blocking, args.json)
    return 1 if blocking else 0


def _run_league(args: argparse.Namespace) -> int:
    result = validate_participant_bounds(args.mode, args.participants, draft_mode=args.draft)
    _emit(result, result.errors, args.json)
    return 0 if result.valid else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.command == "validate":
        return _run_validate(args)
    return _run_league(args)


if __name__ == "__main__":
    sys.exit(main())
