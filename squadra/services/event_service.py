"""
Servizio eventi di partita (append-only).
A partita in corso i giocatori gia' sostituiti non generano eventi di campo.
Unico effetto collaterale: una Sostituzione con giocatore entrante aggiorna
subito minute_entered della sua riga di formazione.
"""

import logging

from sqlalchemy.orm import Session

from squadra.analytics.minutes import HalfLengths, absolute_minute
from squadra.analytics.phase import RUNNING_PHASES
from squadra.analytics.timeline import OFF_PITCH_EVENT_TYPES, players_off_pitch
from squadra.constants import EventType, MatchPhase
from squadra.models import FormationAssignment, MatchEvent, MatchSession, Player
from squadra.schemas.events import EventCreate
from squadra.services.errors import ConflictError, InvalidDataError, NotFoundError

logger = logging.getLogger(__name__)


def get_match(db: Session, match_id: int) -> MatchSession:
    match = db.query(MatchSession).filter(MatchSession.id == match_id).first()
    if not match:
        raise NotFoundError(f"Partita {match_id} non trovata")
    return match


def halves_of(match: MatchSession) -> HalfLengths:
    return HalfLengths(match.first_half_extra_time or 0, match.second_half_extra_time or 0)


def _check_players(db: Session, *player_ids: int | None) -> None:
    wanted = {pid for pid in player_ids if pid is not None}
    if not wanted:
        return
    known = {pid for (pid,) in db.query(Player.id).filter(Player.id.in_(wanted)).all()}
    missing = sorted(wanted - known)
    if missing:
        raise InvalidDataError(f"Giocatori inesistenti: {missing}")


def _check_still_on_pitch(db: Session, match: MatchSession, payload: EventCreate) -> None:
    """
    A partita in corso un giocatore gia' sostituito non genera piu' eventi
    di campo. Note e punteggi restano ammessi.
    """
    if MatchPhase(match.phase or MatchPhase.NOT_STARTED.value) not in RUNNING_PHASES:
        return
    if payload.player_id is None or payload.event_type in OFF_PITCH_EVENT_TYPES:
        return
    rows = (
        db.query(FormationAssignment)
        .filter(
            FormationAssignment.match_id == match.id,
            FormationAssignment.player_id == payload.player_id,
        )
        .all()
    )
    if payload.player_id in players_off_pitch(rows):
        raise ConflictError(f"Il giocatore {payload.player_id} non è più in campo")


def add_event(db: Session, match: MatchSession, payload: EventCreate) -> MatchEvent:
    """
    Aggiunge l'evento alla sessione senza commit: usato anche dalle sequenze
    multi-step (salvataggio offline, sostituzione live) che committano una volta sola.
    """
    if payload.event_type == EventType.SUBSTITUTION and payload.player_id is None:
        raise InvalidDataError("La sostituzione richiede il giocatore che esce (playerId)")
    if payload.event_type == EventType.SUBSTITUTION and payload.player_id == payload.second_player_id:
        raise InvalidDataError("Giocatore in uscita e in entrata coincidono")
    _check_players(db, payload.player_id, payload.second_player_id)
    _check_still_on_pitch(db, match, payload)

    event = MatchEvent(
        match_id=match.id,
        player_id=payload.player_id,
        second_player_id=payload.second_player_id,
        event_type=payload.event_type.value,
        minute=payload.minute,
        half=payload.half,
        description=payload.description,
        rating=payload.rating,
    )
    db.add(event)

    if payload.event_type == EventType.SUBSTITUTION and payload.second_player_id is not None:
        incoming = (
            db.query(FormationAssignment)
            .filter(
                FormationAssignment.match_id == match.id,
                FormationAssignment.player_id == payload.second_player_id,
            )
            .first()
        )
        if incoming is None:
            logger.warning(
                "Sostituzione match_id=%s: giocatore entrante %s senza riga di formazione",
                match.id, payload.second_player_id,
            )
        else:
            halves = halves_of(match)
            incoming.minute_entered = min(absolute_minute(payload.half, payload.minute, halves), halves.total)

    db.flush()
    return event


def create_event(db: Session, match_id: int, payload: EventCreate) -> MatchEvent:
    match = get_match(db, match_id)
    event = add_event(db, match, payload)
    db.commit()
    db.refresh(event)
    logger.info("Evento %s match_id=%s minuto=%s", event.event_type, match_id, event.minute)
    return event


def list_match_events(db: Session, match_id: int) -> list[MatchEvent]:
    """Minuto crescente; a parità di minuto ordine di inserimento."""
    return (
        db.query(MatchEvent)
        .filter(MatchEvent.match_id == match_id)
        .order_by(MatchEvent.minute, MatchEvent.id)
        .all()
    )


def list_all_events(db: Session) -> list[MatchEvent]:
    return db.query(MatchEvent).order_by(MatchEvent.created_at, MatchEvent.id).all()


def list_player_events(db: Session, player_id: int) -> list[MatchEvent]:
    return (
        db.query(MatchEvent)
        .filter(MatchEvent.player_id == player_id)
        .order_by(MatchEvent.created_at, MatchEvent.id)
        .all()
    )


def delete_event(db: Session, event_id: int) -> None:
    deleted = db.query(MatchEvent).filter(MatchEvent.id == event_id).delete()
    if not deleted:
        raise NotFoundError(f"Evento {event_id} non trovato")
    db.commit()


def purge_events(db: Session, match_id: int) -> int:
    """Elimina tutti gli eventi della partita senza commit. Ritorna il numero eliminato."""
    return (
        db.query(MatchEvent)
        .filter(MatchEvent.match_id == match_id)
        .delete(synchronize_session=False)
    )


def purge_match_events(db: Session, match_id: int) -> int:
    get_match(db, match_id)
    deleted = purge_events(db, match_id)
    db.commit()
    logger.info("Eliminati %s eventi match_id=%s", deleted, match_id)
    return deleted
