"""
API Players: rosa, stato di convocazione, disciplina e statistiche individuali.
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.players import PlayerCreate, PlayerRead, PlayerStatsRow, PlayerUpdate
from squadra.services import player_service
from squadra.services.stats_service import get_player_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/players", tags=["players"])


@router.get("", response_model=list[PlayerRead])
def list_players(db: Session = Depends(get_db)):
    return player_service.list_players(db)


@router.get("/{player_id}", response_model=PlayerRead)
def get_player(player_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "lettura giocatore"):
        return player_service.get_player(db, player_id)


@router.post("", response_model=PlayerRead, status_code=201)
def create_player(payload: PlayerCreate, db: Session = Depends(get_db)):
    with service_errors(db, "creazione giocatore"):
        return player_service.create_player(db, payload)


@router.patch("/{player_id}", response_model=PlayerRead)
def update_player(player_id: int, payload: PlayerUpdate, db: Session = Depends(get_db)):
    """
    Aggiornamento parziale. convocationStatus Infortunato o Espulso
    forza isConvocato a 0.
    """
    with service_errors(db, "aggiornamento giocatore"):
        return player_service.update_player(db, player_id, payload)


@router.delete("/{player_id}", status_code=204)
def delete_player(player_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "eliminazione giocatore"):
        player_service.delete_player(db, player_id)
    return Response(status_code=204)


@router.get("/{player_id}/stats", response_model=PlayerStatsRow)
def player_stats(player_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "statistiche giocatore"):
        return get_player_stats(db, player_id)
