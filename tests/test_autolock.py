from datetime import datetime, timedelta, timezone

from squadcheck.checksum import ChecksumCache
from squadcheck.jobs import auto_lock_players, started_rounds
from squadcheck.models import RoundRecord

from tests.factories import make_player


NOW = datetime(2026, 3, 7, 15, 0, tzinfo=timezone.utc)


def _rounds() -> list[RoundRecord]:
    return [
        RoundRecord(round_id="r1", name="Round 1", start_date=NOW - timedelta(hours=1)),
        RoundRecord(round_id="r2", name="Round 2", start_date=NOW + timedelta(days=7)),
    ]


def test_started_rounds_includes_exact_start_and_naive_times():
    rounds = [
        RoundRecord(round_id="r1", name="Kickoff", start_date=NOW),
        RoundRecord(round_id="r2", name="Naive", start_date=datetime(2026, 3, 7, 14, 0)),
        RoundRecord(round_id="r3", name="Later", start_date=NOW + timedelta(seconds=1)),
    ]
    assert [round_.name for round_ in started_rounds(rounds, NOW)] == ["Kickoff", "Naive"]


def test_auto_lock_locks_unlocked_players_and_invalidates_checksum():
    players = [
        make_player(position="prop"),
        make_player(position="lock", is_locked=True),
        make_player(position="hooker"),
    ]
    cache = ChecksumCache()
    cache.store("trc-2025", {"players": "before", "rounds": "r"})

    result = auto_lock_players(players, _rounds(), tenant_id="trc-2025", now=NOW, cache=cache)

    assert result.locked_count == 2
    assert [round_.round_id for round_ in result.rounds] == ["r1"]
    assert all(player.is_locked for player in result.players)
    assert [p.player_id for p in result.players] == [p.player_id for p in players]
    assert not players[0].is_locked
    assert cache.get("trc-2025").checksums["players"] != "before"
    assert cache.get("trc-2025").checksums["rounds"] == "r"


def test_auto_lock_noop_before_any_round_starts():
    players = [make_player(position="prop")]
    cache = ChecksumCache()
    cache.store("t", {"players": "before"})

    result = auto_lock_players(players, _rounds(), tenant_id="t", now=NOW - timedelta(days=1), cache=cache)

    assert result.locked_count == 0
    assert result.rounds == ()
    assert result.players == tuple(players)
    assert cache.get("t").checksums["players"] == "before"


def test_auto_lock_without_cache():
    result = auto_lock_players([make_player(position="prop")], _rounds(), tenant_id="t", now=NOW)
    assert result.locked_count == 1
