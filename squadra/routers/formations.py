"""
API Formations: titolari/panchina per partita e minuti giocati.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.formations import FormationMinutesUpdate, FormationRead, FormationSaveRequest
from squadra.services import formation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/formations", tags=["formations"])


@router.get("", response_model=list[FormationRead])
def list_formations(db: Session = Depends(get_db)):
    return formation_service.list_all_formations(db)


@router.get("/{match_id}", response_model=list[FormationRead])
def match_formations(match_id: int, db: Session = Depends(get_db)):
    return formation_service.list_match_formations(db, match_id)


@router.post("", response_model=list[FormationRead])
def save_formations(payload: FormationSaveRequest, db: Session = Depends(get_db)):
    """
    Upsert per (matchId, playerId): un secondo salvataggio identico non crea
    righe nuove. Con ENFORCE_STARTING_ELEVEN attivo servono esattamente 11 TITOLARI.
    """
    with service_errors(db, "salvataggio formazione"):
        return formation_service.upsert_formations(db, payload.match_id, payload.formations)


@router.patch("/{match_id}/{player_id}/minutes", response_model=FormationRead)
def update_minutes(
    match_id: int,
    player_id: int,
    payload: FormationMinutesUpdate,
    db: Session = Depends(get_db),
):
    with service_errors(db, "aggiornamento minuti"):
        return formation_service.update_formation_minutes(db, match_id, player_id, payload)
