"""
API Teams: anagrafica squadre del girone.
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.teams import TeamCreate, TeamRead
from squadra.services import team_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("", response_model=list[TeamRead])
def list_teams(db: Session = Depends(get_db)):
    return team_service.list_teams(db)


@router.post("", response_model=TeamRead, status_code=201)
def create_team(payload: TeamCreate, db: Session = Depends(get_db)):
    """409 se esiste gia' una squadra con lo stesso nome."""
    with service_errors(db, "creazione squadra"):
        return team_service.create_team(db, payload)


@router.get("/{team_id}", response_model=TeamRead)
def get_team(team_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "lettura squadra"):
        return team_service.get_team(db, team_id)


@router.put("/{team_id}", response_model=TeamRead)
def update_team(team_id: int, payload: TeamCreate, db: Session = Depends(get_db)):
    with service_errors(db, "aggiornamento squadra"):
        return team_service.update_team(db, team_id, payload)


@router.delete("/{team_id}", status_code=204)
def delete_team(team_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "eliminazione squadra"):
        team_service.delete_team(db, team_id)
    return Response(status_code=204)
