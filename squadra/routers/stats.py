"""API statistiche aggregate: giocatori e bilancio squadra."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.players import PlayerStatsRow
from squadra.schemas.teams import TeamRecordResponse
from squadra.services.stats_service import get_all_player_stats
from squadra.services.team_service import get_team_record

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("/players", response_model=list[PlayerStatsRow])
def players_stats(db: Session = Depends(get_db)):
    """
    Una riga per giocatore: gol, assist, cartellini, minuti, presenze
    (titolare/panchina), risultati delle partite giocate, presenze allenamento.
    Ricalcolate ad ogni richiesta.
    """
    with service_errors(db, "statistiche giocatori"):
        return get_all_player_stats(db)


@router.get("/team", response_model=TeamRecordResponse)
def team_stats(db: Session = Depends(get_db)):
    with service_errors(db, "bilancio squadra"):
        return get_team_record(db)
