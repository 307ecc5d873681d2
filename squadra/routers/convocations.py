"""API convocazioni."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.convocations import (
    ConvocationCreate,
    ConvocationMatchCreate,
    ConvocationRead,
    ConvocationUpdate,
)
from squadra.schemas.formations import FormationRead, MatchLineupResponse
from squadra.services import convocation_service

router = APIRouter(prefix="/api/convocations", tags=["convocations"])


@router.get("", response_model=list[ConvocationRead])
def list_convocations(db: Session = Depends(get_db)):
    return convocation_service.list_convocations(db)


@router.post("", response_model=ConvocationRead, status_code=201)
def create_convocation(payload: ConvocationCreate, db: Session = Depends(get_db)):
    with service_errors(db, "creazione convocazione"):
        return convocation_service.create_convocation(db, payload)


@router.get("/{convocation_id}", response_model=ConvocationRead)
def get_convocation(convocation_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "lettura convocazione"):
        return convocation_service.get_convocation(db, convocation_id)


@router.patch("/{convocation_id}", response_model=ConvocationRead)
def update_convocation(convocation_id: int, payload: ConvocationUpdate, db: Session = Depends(get_db)):
    with service_errors(db, "aggiornamento convocazione"):
        return convocation_service.update_convocation(db, convocation_id, payload)


@router.delete("/{convocation_id}", status_code=204)
def delete_convocation(convocation_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "eliminazione convocazione"):
        convocation_service.delete_convocation(db, convocation_id)
    return Response(status_code=204)


@router.post("/{convocation_id}/match", response_model=MatchLineupResponse, status_code=201)
def create_match(convocation_id: int, payload: ConvocationMatchCreate, db: Session = Depends(get_db)):
    """
    Crea la partita della convocazione con la formazione iniziale:
    starterIds (esattamente 11, tutti convocati) TITOLARI, gli altri in PANCHINA.
    """
    with service_errors(db, "creazione partita da convocazione"):
        match, rows = convocation_service.create_match_from_convocation(db, convocation_id, payload)
    return MatchLineupResponse(
        match_id=match.id,
        formations=[FormationRead.model_validate(r) for r in rows],
    )
