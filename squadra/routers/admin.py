"""
API amministrative: annullamento completo di una partita e gestione
degli allenamenti registrati.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.attendances import TrainingSessionRow
from squadra.services.attendance_service import delete_training_session, list_training_sessions
from squadra.services.match_service import delete_match_completely

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.delete("/matches/{match_id}/complete")
def delete_match_complete(match_id: int, db: Session = Depends(get_db)):
    """
    Annulla una partita in una transazione: +1 giornata ai giocatori squalificati
    presenti in formazione, eventi eliminati, minuti azzerati, partita eliminata.
    """
    with service_errors(db, "cancellazione completa partita"):
        result = delete_match_completely(db, match_id)
    return {
        "matchId": match_id,
        "suspensionsRestored": result["suspensions_restored"],
        "eventsDeleted": result["events_deleted"],
        "formationsReset": result["formations_reset"],
    }


@router.get("/training-sessions", response_model=list[TrainingSessionRow])
def training_sessions(db: Session = Depends(get_db)):
    return list_training_sessions(db)


@router.delete("/training-sessions/{date}")
def delete_training(date: str, db: Session = Depends(get_db)):
    with service_errors(db, "eliminazione allenamento"):
        deleted = delete_training_session(db, date)
    return {"date": date, "deleted": deleted}
