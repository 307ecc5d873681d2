"""
Macchina a stati della partita live.

  NOT_STARTED -> FIRST_HALF -> HALF_TIME -> SECOND_HALF -> FINISHED

Nessun salto, nessuna transizione all'indietro. Ogni transizione ritorna un
nuovo MatchClock (immutabile) oppure solleva PhaseTransitionError.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from squadra.constants import STARTING_ELEVEN, MatchPhase


class PhaseTransitionError(ValueError):
    """Transizione non ammessa dallo stato corrente."""


_NEXT_PHASE: dict[MatchPhase, MatchPhase] = {
    MatchPhase.NOT_STARTED: MatchPhase.FIRST_HALF,
    MatchPhase.FIRST_HALF: MatchPhase.HALF_TIME,
    MatchPhase.HALF_TIME: MatchPhase.SECOND_HALF,
    MatchPhase.SECOND_HALF: MatchPhase.FINISHED,
}

RUNNING_PHASES = frozenset({MatchPhase.FIRST_HALF, MatchPhase.SECOND_HALF})


@dataclass(frozen=True)
class MatchClock:
    phase: MatchPhase = MatchPhase.NOT_STARTED
    start_time: datetime | None = None
    first_half_end_time: datetime | None = None
    second_half_start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def is_running(self) -> bool:
        return self.phase in RUNNING_PHASES

    @property
    def current_half(self) -> int | None:
        if self.phase in (MatchPhase.FIRST_HALF, MatchPhase.HALF_TIME):
            return 1
        if self.phase in (MatchPhase.SECOND_HALF, MatchPhase.FINISHED):
            return 2
        return None


def _advance(clock: MatchClock, expected: MatchPhase) -> MatchPhase:
    if clock.phase != expected:
        target = _NEXT_PHASE[expected]
        raise PhaseTransitionError(
            f"Transizione {clock.phase.value} -> {target.value} non ammessa "
            f"(richiesto stato {expected.value})"
        )
    return _NEXT_PHASE[expected]


def start(clock: MatchClock, starters_count: int, at: datetime) -> MatchClock:
    """Inizio partita: richiede esattamente 11 titolari salvati."""
    if starters_count != STARTING_ELEVEN:
        raise PhaseTransitionError(
            f"Servono esattamente {STARTING_ELEVEN} titolari per iniziare, trovati {starters_count}"
        )
    return replace(clock, phase=_advance(clock, MatchPhase.NOT_STARTED), start_time=at)


def end_first_half(clock: MatchClock, at: datetime) -> MatchClock:
    return replace(clock, phase=_advance(clock, MatchPhase.FIRST_HALF), first_half_end_time=at)


def start_second_half(clock: MatchClock, at: datetime) -> MatchClock:
    return replace(clock, phase=_advance(clock, MatchPhase.HALF_TIME), second_half_start_time=at)


def finish(clock: MatchClock, at: datetime) -> MatchClock:
    return replace(clock, phase=_advance(clock, MatchPhase.SECOND_HALF), end_time=at)
