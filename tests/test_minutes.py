from types import SimpleNamespace

import pytest

from squadra.analytics.minutes import (
    HalfLengths,
    absolute_minute,
    compute_minutes,
    finalize_on_pitch,
    minutes_for_exit,
)
from squadra.analytics.timeline import DraftEvent
from squadra.constants import EventType, FormationStatus


def row(player_id, status, minutes_played=None, minute_entered=None):
    return SimpleNamespace(
        player_id=player_id,
        status=status.value,
        minutes_played=minutes_played,
        minute_entered=minute_entered,
    )


def sub(out_id, in_id, half, minute):
    return DraftEvent(
        event_type=EventType.SUBSTITUTION,
        minute=minute,
        half=half,
        player_id=out_id,
        second_player_id=in_id,
    )


def test_half_lengths_include_extra_time():
    halves = HalfLengths(1, 3)
    assert (halves.first, halves.second, halves.total) == (46, 48, 94)


@pytest.mark.parametrize("extra", [-1, 16, None])
def test_half_lengths_reject_out_of_range_extra(extra):
    with pytest.raises(ValueError):
        HalfLengths(extra, 0)


def test_absolute_minute():
    halves = HalfLengths(2, 0)
    assert absolute_minute(1, 30, halves) == 30
    assert absolute_minute(2, 10, halves) == 57
    assert absolute_minute(None, 70, halves) == 70
    with pytest.raises(ValueError):
        absolute_minute(3, 1, halves)


def test_starters_without_substitutions_play_full_match():
    halves = HalfLengths(1, 3)
    assignments = [row(i, FormationStatus.STARTER) for i in range(1, 12)]
    assignments.append(row(99, FormationStatus.BENCH))

    results = compute_minutes(assignments, [], halves)

    assert {r.minutes_played for pid, r in results.items()} == {94}
    assert 99 not in results


def test_second_half_substitution():
    halves = HalfLengths(0, 3)
    assignments = [row(1, FormationStatus.STARTER), row(2, FormationStatus.BENCH)]

    results = compute_minutes(assignments, [sub(1, 2, half=2, minute=20)], halves)

    assert results[1].minutes_played == 65
    assert results[2].minute_entered == 65
    assert results[2].minutes_played == 28


def test_first_half_substitution():
    halves = HalfLengths(2, 0)
    assignments = [row(1, FormationStatus.STARTER), row(2, FormationStatus.BENCH)]

    results = compute_minutes(assignments, [sub(1, 2, half=1, minute=30)], halves)

    assert results[1].minutes_played == 30
    # (47 - 30) + 45
    assert results[2].minutes_played == 62
    assert results[1].minutes_played < halves.total


def test_minutes_are_clamped_to_match_length():
    halves = HalfLengths(0, 0)
    assignments = [row(1, FormationStatus.STARTER), row(2, FormationStatus.BENCH)]

    results = compute_minutes(assignments, [sub(1, 2, half=2, minute=80)], halves)

    assert results[1].minutes_played == 90
    assert results[2].minutes_played == 0


def test_non_substitution_events_are_ignored():
    halves = HalfLengths()
    goal = DraftEvent(event_type=EventType.GOAL, minute=10, half=1, player_id=1)

    results = compute_minutes([row(1, FormationStatus.STARTER)], [goal], halves)

    assert results[1].minutes_played == 90


def test_minutes_for_exit():
    assert minutes_for_exit(None, 60) == 60
    assert minutes_for_exit(65, 94) == 29
    assert minutes_for_exit(30, 120, total=94) == 64
    assert minutes_for_exit(70, 60) == 0


def test_minutes_for_exit_caps_exit_minute_not_duration():
    # Entrato al 60' di una partita da 94: il cronometro a 130 vale 94.
    assert minutes_for_exit(60, 130, total=94) == 34
    assert minutes_for_exit(None, 200, total=90) == 90
    assert minutes_for_exit(95, 130, total=94) == 0


def test_finalize_on_pitch_only_touches_starters_without_minutes():
    assignments = [
        row(1, FormationStatus.STARTER),
        row(2, FormationStatus.STARTER, minutes_played=60),
        row(3, FormationStatus.STARTER, minute_entered=60),
        row(4, FormationStatus.BENCH),
        row(5, FormationStatus.STARTER, minutes_played=0),
    ]

    results = finalize_on_pitch(assignments, 93, HalfLengths(1, 3))

    # 5 e' uscito al minuto 0: resta fuori.
    assert set(results) == {1, 3}
    assert results[1].minutes_played == 93
    assert results[3].minutes_played == 33
    assert results[3].minute_entered == 60


def test_finalize_on_pitch_caps_exit_at_total():
    results = finalize_on_pitch([row(1, FormationStatus.STARTER)], 100, HalfLengths(1, 3))
    assert results[1].minutes_played == 94
