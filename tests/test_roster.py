import pytest

from squadra.analytics.roster import FormationError, build_assignments, validate_formation_payload
from squadra.constants import FormationStatus

ELEVEN = list(range(1, 12))


def entries(starters, bench=()):
    rows = [{"playerId": pid, "status": "TITOLARE"} for pid in starters]
    rows += [{"playerId": pid, "status": "PANCHINA"} for pid in bench]
    return rows


def test_build_assignments_splits_starters_and_bench():
    drafts = build_assignments(list(range(1, 15)), ELEVEN)
    assert [d.player_id for d in drafts] == list(range(1, 15))
    assert sum(d.status == FormationStatus.STARTER for d in drafts) == 11
    assert {d.player_id for d in drafts if d.status == FormationStatus.BENCH} == {12, 13, 14}


def test_build_assignments_requires_eleven():
    with pytest.raises(FormationError):
        build_assignments(range(1, 15), range(1, 11))


def test_build_assignments_rejects_starter_not_convocated():
    with pytest.raises(FormationError, match="non convocati"):
        build_assignments(range(1, 12), list(range(2, 12)) + [40])


def test_build_assignments_rejects_duplicate_starter():
    with pytest.raises(FormationError):
        build_assignments(range(1, 15), list(range(1, 11)) + [1])


def test_valid_payload():
    assert validate_formation_payload(5, entries(ELEVEN, [12, 13]), enforce_eleven=True) == 5


def test_numeric_string_match_id_is_coerced():
    assert validate_formation_payload("7", entries(ELEVEN), enforce_eleven=True) == 7


@pytest.mark.parametrize("match_id", ["abc", "1.5", [3], True, 2.5])
def test_non_integer_match_id_rejected(match_id):
    with pytest.raises(FormationError, match="matchId deve essere un intero"):
        validate_formation_payload(match_id, entries(ELEVEN), enforce_eleven=False)


@pytest.mark.parametrize(
    "match_id, formations, message",
    [
        (None, entries(ELEVEN), "matchId è obbligatorio"),
        (5, {"playerId": 1}, "formations deve essere un array"),
        (5, [], "formations non può essere vuoto"),
        (5, [{"playerId": 1}], "Ogni formazione deve avere playerId e status"),
        (5, [{"status": "TITOLARE"}], "Ogni formazione deve avere playerId e status"),
    ],
)
def test_invalid_payloads(match_id, formations, message):
    with pytest.raises(FormationError, match=message):
        validate_formation_payload(match_id, formations, enforce_eleven=False)


def test_repeated_player_rejected():
    with pytest.raises(FormationError, match="ripetuto"):
        validate_formation_payload(5, entries(ELEVEN, [1]), enforce_eleven=False)


def test_starter_count_enforced_only_when_enabled():
    ten = entries(range(1, 11))
    with pytest.raises(FormationError, match="11 titolari"):
        validate_formation_payload(5, ten, enforce_eleven=True)
    validate_formation_payload(5, ten, enforce_eleven=False)
