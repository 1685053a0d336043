import pytest
from httpx import ASGITransport, AsyncClient

from squadcheck.api import create_app
from squadcheck.checksum import ChecksumCache

from tests.factories import complete_squad, make_player


@pytest.fixture
async def client():
    app = create_app(checksum_cache=ChecksumCache())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


def _players_payload(players) -> list[dict]:
    return [player.model_dump(mode="json") for player in players]


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_sport_config_endpoint(client: AsyncClient):
    resp = await client.get("/sports/rugby-union/config")
    assert resp.status_code == 200
    data = resp.json()
    assert data["maxPlayers"] == 15
    assert data["positions"]["lock"] == {"min": 2, "max": 2, "required": 2, "label": "Lock"}

    missing = await client.get("/sports/curling/config")
    assert missing.status_code == 404
    assert "Unknown sport" in missing.json()["detail"]


@pytest.mark.anyio
async def test_validate_incomplete_squad_depends_on_intent(client: AsyncClient):
    payload = {
        "players": _players_payload([make_player(position="prop")]),
        "rules": {"priceCap": 42_000_000},
    }
    add = await client.post("/squads/validate", json={**payload, "intent": "add"})
    assert add.status_code == 200
    data = add.json()
    assert data["valid"] is False
    assert data["blocked"] is False
    assert data["blocking"] == []
    assert {error["kind"] for error in data["errors"]} == {"POSITION_NOT_ENOUGH", "SQUAD_SIZE_INVALID"}

    submit = await client.post("/squads/validate", json={**payload, "intent": "submit"})
    assert submit.json()["blocked"] is True


@pytest.mark.anyio
async def test_validate_budget_blocks_addition(client: AsyncClient):
    players = [make_player(position="prop", cost=30_000_000), make_player(position="lock", cost=13_000_000)]
    resp = await client.post(
        "/squads/validate",
        json={"players": _players_payload(players), "rules": {"priceCapEnabled": True, "priceCap": 42_000_000}},
    )
    data = resp.json()
    assert data["blocked"] is True
    assert data["blocking"][0]["kind"] == "BUDGET_EXCEEDED"
    assert data["blocking"][0]["rule_source"] == "priceCap"
    assert data["blocking"][0]["message"] == "Over budget - remove players to add this one"


@pytest.mark.anyio
async def test_validate_complete_squad_with_replacements(client: AsyncClient):
    squad = complete_squad()
    outgoing = make_player(position="lock")
    resp = await client.post(
        "/squads/validate",
        json={
            "players": _players_payload(squad),
            "rules": {"positionMatching": True},
            "intent": "submit",
            "replacements": [
                {"outgoing": outgoing.model_dump(mode="json"), "incoming": squad[0].model_dump(mode="json")}
            ],
        },
    )
    data = resp.json()
    assert [error["kind"] for error in data["errors"]] == ["POSITION_MATCHING_REQUIRED"]


@pytest.mark.anyio
async def test_validate_rejects_malformed_player(client: AsyncClient):
    resp = await client.post("/squads/validate", json={"players": [{"player_id": "p1"}]})
    assert resp.status_code == 422


@pytest.mark.anyio
async def test_league_validation(client: AsyncClient):
    resp = await client.post(
        "/leagues/validate",
        json={"game_mode": "ranked", "max_participants": 3, "rules": {"draftMode": True}},
    )
    data = resp.json()
    assert data["valid"] is False
    assert data["errors"][0]["kind"] == "PARTICIPANTS_TOO_FEW"
    assert data["errors"][0]["message"] == "Ranked leagues require at least 4 participants"

    ok = await client.post(
        "/leagues/validate",
        json={"game_mode": "ranked", "max_participants": 20, "rules": {"draftMode": True}},
    )
    assert ok.json()["valid"] is True


@pytest.mark.anyio
async def test_checksums_missing_tenant(client: AsyncClient):
    resp = await client.get("/tenants/unknown/checksums")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_auto_lock_refreshes_checksums_and_supports_etag(client: AsyncClient):
    players = [make_player(position="prop"), make_player(position="lock")]
    resp = await client.post(
        "/tenants/trc-2025/auto-lock",
        json={
            "players": _players_payload(players),
            "rounds": [{"round_id": "r1", "name": "Round 1", "start_date": "2026-02-01T12:00:00Z"}],
            "now": "2026-02-01T12:30:00Z",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["locked_count"] == 2
    assert data["rounds"] == ["Round 1"]
    assert all(player["isLocked"] for player in data["players"])

    checksums = await client.get("/tenants/trc-2025/checksums")
    assert checksums.status_code == 200
    assert checksums.json() == data["checksums"]
    etag = checksums.headers["etag"]
    assert etag == f'"{data["checksums"]["players"]}-{data["checksums"]["rounds"]}"'

    cached = await client.get("/tenants/trc-2025/checksums", headers={"If-None-Match": etag})
    assert cached.status_code == 304


@pytest.mark.anyio
async def test_validate_accepts_camel_case_players_and_stale_draft_settings(client: AsyncClient):
    players = [player.model_dump(mode="json", by_alias=True) for player in complete_squad()]
    players[0]["isLocked"] = True
    resp = await client.post(
        "/squads/validate",
        json={
            "players": players,
            "rules": {
                "draftMode": False,
                "draftSettings": {
                    "draftType": "snake",
                    "pickTimeLimit": 90,
                    "draftOrder": "random",
                    "scheduledDate": "2026-03-01T18:00:00Z",
                },
            },
            "intent": "submit",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert [error["kind"] for error in data["errors"]] == ["PLAYER_LOCKED"]
    assert data["errors"][0]["params"]["player_id"] == players[0]["playerId"]
