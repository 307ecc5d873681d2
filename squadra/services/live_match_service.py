"""
Flusso partita live: fase (macchina a stati), sostituzioni con contatore,
fine partita con calcolo minuti per chi è ancora in campo.

Il cronometro vive nel client; ogni richiesta porta il minuto corrente.
Gli eventi si persistono subito, uno per azione.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from squadra.analytics import phase as phase_machine
from squadra.analytics.minutes import absolute_minute, finalize_on_pitch, minutes_for_exit
from squadra.analytics.phase import MatchClock, PhaseTransitionError
from squadra.analytics.timeline import can_substitute, players_on_bench, players_on_pitch, substitutions_used
from squadra.constants import EventType, FormationStatus, MatchPhase
from squadra.core.config import get_max_substitutions
from squadra.models import MatchEvent, MatchSession, Player
from squadra.schemas.events import EventCreate
from squadra.schemas.matches import FinishRequest, SubstitutionRequest
from squadra.services.errors import ConflictError
from squadra.services.event_service import add_event, get_match, halves_of, purge_events
from squadra.services.formation_service import count_starters, list_match_formations

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def clock_of(match: MatchSession) -> MatchClock:
    return MatchClock(
        phase=MatchPhase(match.phase or MatchPhase.NOT_STARTED.value),
        start_time=match.start_time,
        first_half_end_time=match.first_half_end_time,
        second_half_start_time=match.second_half_start_time,
        end_time=match.end_time,
    )


def _store_clock(match: MatchSession, clock: MatchClock) -> None:
    match.phase = clock.phase.value
    match.start_time = clock.start_time
    match.first_half_end_time = clock.first_half_end_time
    match.second_half_start_time = clock.second_half_start_time
    match.end_time = clock.end_time


def _transition(match: MatchSession, fn, *args) -> None:
    try:
        clock = fn(clock_of(match), *args)
    except PhaseTransitionError as e:
        raise ConflictError(str(e))
    _store_clock(match, clock)


def _note(db: Session, match: MatchSession, minute: int, text: str) -> MatchEvent:
    return add_event(db, match, EventCreate(
        event_type=EventType.NOTE,
        minute=minute,
        half=clock_of(match).current_half,
        description=text,
    ))


def start_match(db: Session, match_id: int) -> MatchSession:
    """
    Inizio partita. Ogni inizio parte da una timeline vuota: tutti gli eventi
    precedenti della partita vengono eliminati.
    """
    match = get_match(db, match_id)
    starters = count_starters(db, match_id)
    _transition(match, phase_machine.start, starters, _now())

    purged = purge_events(db, match_id)
    db.commit()
    db.refresh(match)
    logger.info("Partita %s iniziata (eventi precedenti eliminati: %s)", match_id, purged)
    return match


def end_first_half(db: Session, match_id: int, minute: int) -> MatchSession:
    match = get_match(db, match_id)
    _transition(match, phase_machine.end_first_half, _now())
    _note(db, match, minute, "Fine 1° Tempo")
    db.commit()
    db.refresh(match)
    logger.info("Partita %s: fine primo tempo al minuto %s", match_id, minute)
    return match


def start_second_half(db: Session, match_id: int, minute: int) -> MatchSession:
    match = get_match(db, match_id)
    _transition(match, phase_machine.start_second_half, _now())
    _note(db, match, minute, "Inizio 2° Tempo")
    db.commit()
    db.refresh(match)
    logger.info("Partita %s: inizio secondo tempo al minuto %s", match_id, minute)
    return match


def substitute(db: Session, match_id: int, request: SubstitutionRequest) -> tuple[MatchEvent, int]:
    """
    Sostituzione live in una transazione: minuti a chi esce, minute_entered e
    status TITOLARE a chi entra, un evento Sostituzione.
    Ritorna (evento, sostituzioni usate).
    """
    match = get_match(db, match_id)
    if not clock_of(match).is_running:
        raise ConflictError(f"Sostituzioni ammesse solo a partita in corso (fase {match.phase})")

    events = db.query(MatchEvent).filter(MatchEvent.match_id == match_id).all()
    limit = get_max_substitutions()
    used = substitutions_used(events)
    if not can_substitute(events, limit):
        raise ConflictError(f"Cambi esauriti: già effettuate {limit} sostituzioni")

    formations = list_match_formations(db, match_id)
    by_player = {f.player_id: f for f in formations}
    if request.player_out_id not in players_on_pitch(formations):
        raise ConflictError(f"Il giocatore {request.player_out_id} non è in campo")
    if request.player_in_id not in players_on_bench(formations):
        raise ConflictError(f"Il giocatore {request.player_in_id} non è disponibile in panchina")

    # Senza half il minuto arriva gia' assoluto dal cronometro live.
    halves = halves_of(match)
    exit_minute = min(absolute_minute(request.half, request.minute, halves), halves.total)

    description = request.description or _substitution_text(db, request)
    event = add_event(db, match, EventCreate(
        event_type=EventType.SUBSTITUTION,
        player_id=request.player_out_id,
        second_player_id=request.player_in_id,
        minute=request.minute,
        half=request.half,
        description=description,
    ))

    out_row = by_player[request.player_out_id]
    out_row.minutes_played = minutes_for_exit(out_row.minute_entered, exit_minute, halves.total)
    in_row = by_player[request.player_in_id]
    in_row.minute_entered = exit_minute
    in_row.status = FormationStatus.STARTER.value

    db.commit()
    db.refresh(event)
    logger.info(
        "Partita %s: sostituzione %s -> %s al minuto %s (%s/%s)",
        match_id, request.player_out_id, request.player_in_id, exit_minute, used + 1, limit,
    )
    return event, used + 1


def _substitution_text(db: Session, request: SubstitutionRequest) -> str:
    names = {
        p.id: p.display_name
        for p in db.query(Player).filter(Player.id.in_([request.player_out_id, request.player_in_id])).all()
    }
    return f"OUT: {names.get(request.player_out_id, '?')} | IN: {names.get(request.player_in_id, '?')}"


def finish_match(db: Session, match_id: int, request: FinishRequest) -> MatchSession:
    """
    Fine partita: i TITOLARI ancora in campo escono al minuto corrente,
    limitato alla durata totale (45 + recupero per tempo, recupero 0 se mai inserito).
    """
    match = get_match(db, match_id)
    _transition(match, phase_machine.finish, _now())

    if request.first_half_extra_time is not None:
        match.first_half_extra_time = request.first_half_extra_time
    if request.second_half_extra_time is not None:
        match.second_half_extra_time = request.second_half_extra_time
    halves = halves_of(match)

    formations = list_match_formations(db, match_id)
    results = finalize_on_pitch(formations, request.minute, halves)
    for row in formations:
        result = results.get(row.player_id)
        if result is not None:
            row.minutes_played = result.minutes_played

    _note(db, match, request.minute, "Fine Partita")
    db.commit()
    db.refresh(match)
    logger.info("Partita %s terminata al minuto %s: minuti finalizzati per %s giocatori",
                match_id, request.minute, len(results))
    return match

