"""
Servizio sessioni partita: CRUD, report partita e cancellazione completa
(annullamento amministrativo con ripristino delle squalifiche).
"""

import logging

from sqlalchemy.orm import Session

from squadra.analytics.statistics import match_report
from squadra.models import FormationAssignment, MatchEvent, MatchSession, Player
from squadra.schemas.matches import (
    AnnotatedEventRow,
    MatchCreate,
    MatchRead,
    MatchStatsResponse,
    MatchTotals,
    MatchUpdate,
)
from squadra.services.event_service import get_match, purge_events

logger = logging.getLogger(__name__)


def list_matches(db: Session) -> list[MatchSession]:
    return db.query(MatchSession).order_by(MatchSession.date, MatchSession.id).all()


def create_match(db: Session, payload: MatchCreate) -> MatchSession:
    match = MatchSession(**payload.model_dump())
    db.add(match)
    db.commit()
    db.refresh(match)
    logger.info("Creata partita id=%s vs %s (%s)", match.id, match.opponent, match.date)
    return match


def update_match(db: Session, match_id: int, payload: MatchUpdate) -> MatchSession:
    """Aggiornamento parziale: punteggi, recupero, modulo, orario di inizio."""
    match = get_match(db, match_id)
    updates = payload.model_dump(exclude_unset=True)
    for field_name, value in updates.items():
        if value is None and field_name in ("date", "first_half_extra_time", "second_half_extra_time"):
            continue
        setattr(match, field_name, value)
    if {"home_score", "away_score"} & updates.keys() and "final_score" not in updates:
        if match.home_score is not None and match.away_score is not None:
            match.final_score = f"{match.home_score}-{match.away_score}"
    db.commit()
    db.refresh(match)
    return match


def delete_match(db: Session, match_id: int) -> None:
    """Cancellazione semplice: eventi e formazioni seguono la partita."""
    match = get_match(db, match_id)
    purge_events(db, match_id)
    db.query(FormationAssignment).filter(FormationAssignment.match_id == match_id).delete(
        synchronize_session=False
    )
    db.delete(match)
    db.commit()
    logger.info("Eliminata partita id=%s", match_id)


def get_match_stats(db: Session, match_id: int) -> MatchStatsResponse:
    """Gol, espulsioni e sostituzioni con i nomi dei giocatori."""
    match = get_match(db, match_id)
    events = db.query(MatchEvent).filter(MatchEvent.match_id == match_id).all()
    report = match_report(match, events, db.query(Player).all())
    return MatchStatsResponse(
        match=MatchRead.model_validate(match),
        goals=[AnnotatedEventRow.model_validate(e) for e in report.goals],
        red_cards=[AnnotatedEventRow.model_validate(e) for e in report.red_cards],
        substitutions=[AnnotatedEventRow.model_validate(e) for e in report.substitutions],
        totals=MatchTotals(**report.totals),
    )


def delete_match_completely(db: Session, match_id: int) -> dict[str, int]:
    """
    Annullamento completo di una partita, in una sola transazione:
      1. +1 giornata di squalifica ai giocatori squalificati presenti in formazione
         (compensa il -1 applicato al salvataggio della partita)
      2. eliminazione di tutti gli eventi
      3. minuti azzerati per ogni riga di formazione
      4. eliminazione della partita
    """
    match = get_match(db, match_id)
    formations = (
        db.query(FormationAssignment)
        .filter(FormationAssignment.match_id == match_id)
        .all()
    )
    formation_player_ids = {f.player_id for f in formations}
    logger.info(
        "Cancellazione completa match_id=%s: %s righe di formazione",
        match_id, len(formations),
    )

    restored = 0
    if formation_player_ids:
        suspended = (
            db.query(Player)
            .filter(Player.id.in_(formation_player_ids), Player.suspension_days > 0)
            .all()
        )
        for player in suspended:
            player.suspension_days += 1
            restored += 1

    events_deleted = purge_events(db, match_id)

    for f in formations:
        f.minutes_played = 0
        f.minute_entered = None
    db.flush()

    db.delete(match)
    db.commit()

    result = {
        "suspensions_restored": restored,
        "events_deleted": events_deleted,
        "formations_reset": len(formations),
    }
    logger.info("Cancellazione completa match_id=%s completata: %s", match_id, result)
    return result
