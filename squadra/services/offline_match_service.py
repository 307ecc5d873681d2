"""
Flusso partita offline: gli eventi inseriti a posteriori arrivano tutti
insieme e vengono salvati in una sola transazione, insieme a punteggio,
recupero, minuti giocati e aggiornamento squalifiche.
"""

import logging

from sqlalchemy.orm import Session

from squadra.analytics.minutes import HalfLengths, compute_minutes
from squadra.analytics.timeline import DraftEvent, OfflineBuffer
from squadra.constants import ConvocationStatus
from squadra.models import MatchSession, Player
from squadra.schemas.events import EventCreate
from squadra.schemas.matches import OfflineSaveRequest
from squadra.services.errors import InvalidDataError
from squadra.services.event_service import add_event, get_match
from squadra.services.formation_service import list_match_formations

logger = logging.getLogger(__name__)


def _buffer_from_request(match_id: int, request: OfflineSaveRequest) -> OfflineBuffer:
    buffer = OfflineBuffer(match_id=match_id)
    for e in request.events:
        buffer.add(DraftEvent(
            event_type=e.event_type,
            minute=e.minute,
            half=e.half,
            player_id=e.player_id,
            second_player_id=e.second_player_id,
            description=e.description,
            rating=e.rating,
        ))
    return buffer


def decrement_suspensions(db: Session) -> int:
    """
    -1 giornata a ogni giocatore squalificato (minimo 0).
    A 0 giornate il giocatore torna Convocabile.
    """
    suspended = db.query(Player).filter(Player.suspension_days > 0).all()
    for player in suspended:
        player.suspension_days = max(0, player.suspension_days - 1)
        if player.suspension_days == 0:
            player.convocation_status = ConvocationStatus.AVAILABLE.value
    return len(suspended)


def save_offline_match(db: Session, match_id: int, request: OfflineSaveRequest) -> dict:
    """
    Salvataggio dati partita:
      1. punteggio dal buffer (Gol = noi, Goal Subito = avversario) e recupero
      2. persistenza di tutti gli eventi
      3. minuti giocati per ogni riga di formazione
      4. -1 giornata di squalifica ai giocatori squalificati
    """
    match: MatchSession = get_match(db, match_id)
    buffer = _buffer_from_request(match_id, request)
    if not len(buffer):
        raise InvalidDataError("Nessun evento da salvare")

    try:
        halves = HalfLengths(request.first_half_extra_time, request.second_half_extra_time)
    except ValueError as e:
        raise InvalidDataError(str(e))

    logger.info("Salvataggio offline match_id=%s: %s eventi", match_id, len(buffer))

    match.first_half_extra_time = request.first_half_extra_time
    match.second_half_extra_time = request.second_half_extra_time
    match.home_score = buffer.goals_for
    match.away_score = buffer.goals_against
    match.final_score = f"{buffer.goals_for}-{buffer.goals_against}"

    drafts = buffer.drain()
    for draft in drafts:
        add_event(db, match, EventCreate(
            event_type=draft.event_type,
            minute=draft.minute,
            half=draft.half,
            player_id=draft.player_id,
            second_player_id=draft.second_player_id,
            description=draft.description,
            rating=draft.rating,
        ))

    formations = list_match_formations(db, match_id)
    results = compute_minutes(formations, drafts, halves)
    for row in formations:
        result = results.get(row.player_id)
        if result is None or result.minutes_played <= 0:
            continue
        row.minutes_played = result.minutes_played
        if result.minute_entered is not None:
            row.minute_entered = result.minute_entered

    suspensions = decrement_suspensions(db)

    db.commit()
    db.refresh(match)
    summary = {
        "match": match,
        "events_saved": len(drafts),
        "formations_updated": sum(1 for r in results.values() if r.minutes_played > 0),
        "suspensions_updated": suspensions,
    }
    logger.info(
        "Salvataggio offline match_id=%s completato: eventi=%s formazioni=%s squalifiche=%s",
        match_id, summary["events_saved"], summary["formations_updated"], suspensions,
    )
    return summary
