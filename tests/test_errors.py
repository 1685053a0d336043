import pytest

from squadcheck.validation import (
    RULE_SOURCES,
    VALIDATION_ERRORS,
    ErrorDescriptor,
    ErrorKind,
    LeagueErrorKind,
    classify,
    format_error,
)


def test_error_taxonomy_is_closed():
    assert len(ErrorKind) == 9
    for kind in ErrorKind:
        assert kind in VALIDATION_ERRORS
        assert kind in RULE_SOURCES


def test_format_error_substitutes_params():
    message = format_error("SQUAD_LIMIT", {"limit": 3})
    assert message == "Max 3 players from same squad"
    assert format_error(ErrorKind.POSITION_NOT_ENOUGH, {"count": 2, "position": "Prop"}) == "Need 2 more Prop"


def test_format_error_leaves_unmatched_placeholders():
    assert format_error("SQUAD_LIMIT") == "Max {limit} players from same squad"
    assert format_error(ErrorKind.POSITION_NOT_ENOUGH, {"count": 1}) == "Need 1 more {position}"


def test_format_error_ignores_unused_params():
    assert format_error(ErrorKind.PLAYER_LOCKED, {"player_id": "p1"}) == "Player is locked"


def test_format_error_handles_league_kinds():
    message = format_error(LeagueErrorKind.PARTICIPANTS_TOO_FEW, {"qualifier": "Ranked", "minimum": 4})
    assert message == "Ranked leagues require at least 4 participants"


def test_format_error_unknown_kind():
    with pytest.raises(KeyError):
        format_error("NOT_A_KIND")


def test_descriptor_carries_rule_source_and_renders():
    descriptor = ErrorDescriptor.of(ErrorKind.BUDGET_EXCEEDED, total=43_000_000, cap=42_000_000)
    assert descriptor.rule_source == "priceCap"
    payload = descriptor.to_dict()
    assert payload["kind"] == "BUDGET_EXCEEDED"
    assert payload["params"]["cap"] == 42_000_000
    assert payload["message"] == "Over budget - remove players to add this one"


def test_descriptor_params_are_read_only():
    params = {"limit": 3}
    descriptor = ErrorDescriptor.of(ErrorKind.SQUAD_LIMIT, **params)
    with pytest.raises(TypeError):
        descriptor.params["limit"] = 9  # type: ignore[index]
    assert descriptor.message == "Max 3 players from same squad"

    wrapped = ErrorDescriptor(kind=ErrorKind.SQUAD_LIMIT, params=params, rule_source="squadLimitPerTeam")
    params["limit"] = 9
    assert wrapped.message == "Max 3 players from same squad"
    assert wrapped == descriptor


@pytest.mark.parametrize(
    "kind, params",
    [
        (ErrorKind.BUDGET_EXCEEDED, {}),
        (ErrorKind.SQUAD_LIMIT, {"limit": 3}),
        (ErrorKind.POSITION_TOO_MANY, {"position": "Lock"}),
        (ErrorKind.POSITION_NOT_ENOUGH, {"count": 1, "position": "Lock"}),
        (ErrorKind.SQUAD_SIZE_INVALID, {"count": 15}),
        (ErrorKind.DRAFT_PICK_NOT_AVAILABLE, {}),
        (ErrorKind.PLAYER_LOCKED, {}),
        (ErrorKind.PLAYER_INJURED, {}),
        (ErrorKind.POSITION_MATCHING_REQUIRED, {}),
    ],
)
def test_classify_recognises_rendered_templates(kind, params):
    assert classify(format_error(kind, params)) is kind


@pytest.mark.parametrize(
    "message, kind",
    [
        ("Budget exceeded: 45.0M, maximum allowed: 42M", ErrorKind.BUDGET_EXCEEDED),
        ("Max. 3 players from same team (squad 4 has 4)", ErrorKind.SQUAD_LIMIT),
        ("Too many Lock: 3, maximum allowed: 2", ErrorKind.POSITION_TOO_MANY),
        ("Not enough Prop: 1, minimum required: 2", ErrorKind.POSITION_NOT_ENOUGH),
        ("Squad must have exactly 15 players (currently 3)", ErrorKind.SQUAD_SIZE_INVALID),
    ],
)
def test_classify_recognises_legacy_messages(message, kind):
    assert classify(message) is kind


def test_classify_unknown_message():
    assert classify("Something else went wrong") is None
