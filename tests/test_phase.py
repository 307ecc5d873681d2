from datetime import datetime, timezone

import pytest

from squadra.analytics import phase
from squadra.analytics.phase import MatchClock, PhaseTransitionError
from squadra.constants import MatchPhase

NOW = datetime(2024, 3, 10, 15, 0, tzinfo=timezone.utc)


def test_full_sequence():
    clock = MatchClock()
    assert not clock.is_running
    assert clock.current_half is None

    clock = phase.start(clock, 11, NOW)
    assert clock.phase == MatchPhase.FIRST_HALF
    assert clock.start_time == NOW
    assert clock.is_running and clock.current_half == 1

    clock = phase.end_first_half(clock, NOW)
    assert clock.phase == MatchPhase.HALF_TIME
    assert not clock.is_running

    clock = phase.start_second_half(clock, NOW)
    assert clock.phase == MatchPhase.SECOND_HALF
    assert clock.current_half == 2

    clock = phase.finish(clock, NOW)
    assert clock.phase == MatchPhase.FINISHED
    assert clock.end_time == NOW


def test_transitions_return_new_clock():
    clock = MatchClock()
    started = phase.start(clock, 11, NOW)
    assert clock.phase == MatchPhase.NOT_STARTED
    assert started is not clock


@pytest.mark.parametrize("starters", [0, 10, 12])
def test_start_requires_eleven_starters(starters):
    with pytest.raises(PhaseTransitionError):
        phase.start(MatchClock(), starters, NOW)


def test_no_skipping_phases():
    with pytest.raises(PhaseTransitionError):
        phase.finish(MatchClock(), NOW)
    started = phase.start(MatchClock(), 11, NOW)
    with pytest.raises(PhaseTransitionError):
        phase.start_second_half(started, NOW)


def test_no_restart_after_finish():
    clock = MatchClock(phase=MatchPhase.FINISHED)
    with pytest.raises(PhaseTransitionError):
        phase.start(clock, 11, NOW)
