"""API eventi singoli: cancellazione ed elenco per giocatore."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.events import EventRead
from squadra.services import event_service

router = APIRouter(prefix="/api/match-events", tags=["match-events"])


@router.delete("/{event_id}", status_code=204)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "eliminazione evento"):
        event_service.delete_event(db, event_id)
    return Response(status_code=204)


@router.get("/player/{player_id}", response_model=list[EventRead])
def player_events(player_id: int, db: Session = Depends(get_db)):
    return event_service.list_player_events(db, player_id)
