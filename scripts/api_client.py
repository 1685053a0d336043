"""Lightweight REST client for the squadcheck API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_json(path: Path | None, default):
    if path is None:
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the squadcheck REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("squad", type=Path, nargs="?", help="Squad JSON to validate")
    parser.add_argument("--rules", type=Path, help="League rules JSON")
    parser.add_argument("--sport", default=None, help="Sport key")
    parser.add_argument("--submit", action="store_true", help="Validate as a final submission")
    parser.add_argument("--show-config", metavar="SPORT", help="Print a sport's squad config and exit")
    parser.add_argument("--checksums", metavar="TENANT_ID", help="Print a tenant's cached checksums and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.show_config:
            resp = client.get(f"/sports/{args.show_config}/config")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.checksums:
            resp = client.get(f"/tenants/{args.checksums}/checksums")
            if resp.status_code == 404:
                raise SystemExit(f"No checksums cached for {args.checksums}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.squad is None:
            parser.error("squad is required unless --show-config or --checksums is used")

        players = load_json(args.squad, [])
        if isinstance(players, dict):
            players = players.get("players", [])
        payload = {
            "sport": args.sport,
            "players": players,
            "rules": load_json(args.rules, {}),
            "intent": "submit" if args.submit else "add",
        }
        resp = client.post("/squads/validate", json=payload)
        resp.raise_for_status()
        data = resp.json()

    if data["valid"]:
        print("Squad is valid")
        return
    for error in data["errors"]:
        print(f"[{error['kind']}] {error['message']}")
    if data["blocked"]:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
