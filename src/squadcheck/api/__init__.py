"""REST API exposing the squad validator to roster mutation handlers and clients."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from squadcheck.api.schemas import (
    AutoLockRequest,
    AutoLockResponse,
    LeagueValidationRequest,
    SquadValidationRequest,
    ValidationResponse,
)
from squadcheck.checksum import (
    PLAYERS_PARTITION,
    ROUNDS_PARTITION,
    ChecksumCache,
    etag_for,
    generate_checksums,
)
from squadcheck.config import SportSquadConfig, get_sport_config
from squadcheck.config_loader import checksum_ttl, default_sport
from squadcheck.jobs import auto_lock_players
from squadcheck.validation import validate_participant_bounds, validate_squad


logger = logging.getLogger("uvicorn.error")

_CHECKSUM_CACHE_CONTROL = "public, max-age=10"


def _resolve_sport(sport: str | None) -> SportSquadConfig:
    try:
        return get_sport_config(sport or default_sport())
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc


def create_app(checksum_cache: ChecksumCache | None = None) -> FastAPI:
    app = FastAPI(title="squadcheck")
    app.state.checksum_cache = checksum_cache or ChecksumCache(ttl_seconds=checksum_ttl())

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/sports/{sport}/config")
    async def sport_config(sport: str) -> dict[str, Any]:
        return _resolve_sport(sport).to_dict()

    @app.post("/squads/validate", response_model=ValidationResponse)
    async def validate_squad_endpoint(payload: SquadValidationRequest) -> ValidationResponse:
        config = _resolve_sport(payload.sport)
        replacements = None
        if payload.replacements:
            replacements = [(item.outgoing, item.incoming) for item in payload.replacements]
        result = validate_squad(
            payload.players,
            config,
            payload.rules,
            draft_pool=payload.draft_pool,
            replacements=replacements,
        )
        response = ValidationResponse.from_result(result, submission=payload.intent == "submit")
        if response.blocked:
            logger.debug(
                "Squad %s blocked: %s",
                payload.intent,
                ", ".join(error.kind for error in response.blocking),
            )
        return response

    @app.post("/leagues/validate", response_model=ValidationResponse)
    async def validate_league_endpoint(payload: LeagueValidationRequest) -> ValidationResponse:
        try:
            result = validate_participant_bounds(
                payload.game_mode,
                payload.max_participants,
                draft_mode=payload.rules.draft_mode,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ValidationResponse.from_result(result)

    @app.post("/tenants/{tenant_id}/auto-lock", response_model=AutoLockResponse)
    async def auto_lock(tenant_id: str, payload: AutoLockRequest, request: Request) -> AutoLockResponse:
        cache: ChecksumCache = request.app.state.checksum_cache
        result = auto_lock_players(
            payload.players,
            payload.rounds,
            tenant_id=tenant_id,
            now=payload.now,
            cache=cache,
        )
        checksums = generate_checksums(
            {
                PLAYERS_PARTITION: list(result.players),
                ROUNDS_PARTITION: list(payload.rounds),
            }
        )
        cache.store(tenant_id, checksums)
        return AutoLockResponse(
            locked_count=result.locked_count,
            rounds=[round_.name for round_ in result.rounds],
            players=list(result.players),
            checksums=checksums,
        )

    @app.get("/tenants/{tenant_id}/checksums")
    async def tenant_checksums(tenant_id: str, request: Request) -> Response:
        cache: ChecksumCache = request.app.state.checksum_cache
        cached = cache.get(tenant_id)
        if cached is None:
            raise HTTPException(status_code=404, detail="No checksums cached for tenant")
        etag = etag_for(cached.checksums)
        headers = {"ETag": etag, "Cache-Control": _CHECKSUM_CACHE_CONTROL}
        if request.headers.get("if-none-match") == etag:
            return Response(status_code=304, headers=headers)
        return JSONResponse(cached.checksums, headers=headers)

    return app
