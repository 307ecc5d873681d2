"""
API Matches: sessioni partita, eventi, report, flusso live (fasi e
sostituzioni) e salvataggio offline.
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from squadra.core.config import get_max_substitutions
from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.events import EventCreate, EventRead
from squadra.schemas.matches import (
    ClockRequest,
    FinishRequest,
    MatchCreate,
    MatchRead,
    MatchStatsResponse,
    MatchUpdate,
    OfflineSaveRequest,
    OfflineSaveResponse,
    SubstitutionRequest,
    SubstitutionResponse,
)
from squadra.services import event_service, live_match_service, match_service
from squadra.services.offline_match_service import save_offline_match

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.get("", response_model=list[MatchRead])
def list_matches(db: Session = Depends(get_db)):
    return match_service.list_matches(db)


@router.post("", response_model=MatchRead, status_code=201)
def create_match(payload: MatchCreate, db: Session = Depends(get_db)):
    with service_errors(db, "creazione partita"):
        return match_service.create_match(db, payload)


# Prima di /{match_id}: altrimenti "all-events" verrebbe letto come id.
@router.get("/all-events", response_model=list[EventRead])
def all_events(db: Session = Depends(get_db)):
    return event_service.list_all_events(db)


@router.get("/{match_id}", response_model=MatchRead)
def get_match(match_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "lettura partita"):
        return event_service.get_match(db, match_id)


@router.patch("/{match_id}", response_model=MatchRead)
def update_match(match_id: int, payload: MatchUpdate, db: Session = Depends(get_db)):
    """Punteggi, recupero, modulo. finalScore ricalcolato dai punteggi se non inviato."""
    with service_errors(db, "aggiornamento partita"):
        return match_service.update_match(db, match_id, payload)


@router.delete("/{match_id}", status_code=204)
def delete_match(match_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "eliminazione partita"):
        match_service.delete_match(db, match_id)
    return Response(status_code=204)


@router.get("/{match_id}/stats", response_model=MatchStatsResponse)
def match_stats(match_id: int, db: Session = Depends(get_db)):
    """Gol, espulsioni e sostituzioni con nomi; giocatori eliminati come "Sconosciuto"."""
    with service_errors(db, "statistiche partita"):
        return match_service.get_match_stats(db, match_id)


# --- Eventi ---


@router.get("/{match_id}/events", response_model=list[EventRead])
def match_events(match_id: int, db: Session = Depends(get_db)):
    """Minuto crescente, a parita' di minuto ordine di inserimento."""
    with service_errors(db, "lettura eventi"):
        event_service.get_match(db, match_id)
        return event_service.list_match_events(db, match_id)


@router.post("/{match_id}/events", response_model=EventRead, status_code=201)
def create_event(match_id: int, payload: EventCreate, db: Session = Depends(get_db)):
    with service_errors(db, "creazione evento"):
        return event_service.create_event(db, match_id, payload)


@router.delete("/{match_id}/events")
def purge_events(match_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "eliminazione eventi"):
        deleted = event_service.purge_match_events(db, match_id)
    return {"matchId": match_id, "deleted": deleted}


# --- Flusso live ---


def _minute(payload: ClockRequest | None) -> int:
    return payload.minute if payload is not None else 0


@router.post("/{match_id}/start", response_model=MatchRead)
def start_match(match_id: int, db: Session = Depends(get_db)):
    """Richiede 11 TITOLARI. Elimina gli eventi precedenti della partita."""
    with service_errors(db, "inizio partita"):
        return live_match_service.start_match(db, match_id)


@router.post("/{match_id}/half-time", response_model=MatchRead)
def half_time(match_id: int, payload: ClockRequest | None = None, db: Session = Depends(get_db)):
    with service_errors(db, "fine primo tempo"):
        return live_match_service.end_first_half(db, match_id, _minute(payload))


@router.post("/{match_id}/second-half", response_model=MatchRead)
def second_half(match_id: int, payload: ClockRequest | None = None, db: Session = Depends(get_db)):
    with service_errors(db, "inizio secondo tempo"):
        return live_match_service.start_second_half(db, match_id, _minute(payload))


@router.post("/{match_id}/substitutions", response_model=SubstitutionResponse, status_code=201)
def substitute(match_id: int, payload: SubstitutionRequest, db: Session = Depends(get_db)):
    """409 a cambi esauriti o se i giocatori non sono in campo / in panchina."""
    with service_errors(db, "sostituzione"):
        event, used = live_match_service.substitute(db, match_id, payload)
    return SubstitutionResponse(
        event=EventRead.model_validate(event),
        substitutions_used=used,
        substitutions_left=max(0, get_max_substitutions() - used),
    )


@router.post("/{match_id}/finish", response_model=MatchRead)
def finish_match(match_id: int, payload: FinishRequest, db: Session = Depends(get_db)):
    with service_errors(db, "fine partita"):
        return live_match_service.finish_match(db, match_id, payload)


# --- Flusso offline ---


@router.post("/{match_id}/offline-save", response_model=OfflineSaveResponse)
def offline_save(match_id: int, payload: OfflineSaveRequest, db: Session = Depends(get_db)):
    """
    Salva in una transazione gli eventi inseriti a posteriori: punteggio,
    recupero, minuti giocati e -1 giornata ai giocatori squalificati.
    """
    with service_errors(db, "salvataggio partita offline"):
        summary = save_offline_match(db, match_id, payload)
    return OfflineSaveResponse(
        match=MatchRead.model_validate(summary["match"]),
        events_saved=summary["events_saved"],
        formations_updated=summary["formations_updated"],
        suspensions_updated=summary["suspensions_updated"],
    )
