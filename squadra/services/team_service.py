"""
Servizio anagrafica squadre del girone e bilancio della nostra squadra.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from squadra.analytics.statistics import team_record
from squadra.models import MatchSession, Team
from squadra.schemas.teams import TeamCreate, TeamRecordResponse
from squadra.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def list_teams(db: Session) -> list[Team]:
    return db.query(Team).order_by(Team.name).all()


def get_team(db: Session, team_id: int) -> Team:
    team = db.query(Team).filter(Team.id == team_id).first()
    if not team:
        raise NotFoundError(f"Squadra {team_id} non trovata")
    return team


def _save(db: Session, team: Team) -> Team:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Esiste già una squadra con nome {team.name!r}")
    db.refresh(team)
    return team


def create_team(db: Session, payload: TeamCreate) -> Team:
    team = Team(**payload.model_dump())
    db.add(team)
    return _save(db, team)


def update_team(db: Session, team_id: int, payload: TeamCreate) -> Team:
    team = get_team(db, team_id)
    team.name = payload.name
    team.logo_url = payload.logo_url
    return _save(db, team)


def delete_team(db: Session, team_id: int) -> None:
    team = get_team(db, team_id)
    db.delete(team)
    db.commit()
    logger.info("Eliminata squadra id=%s", team_id)


def get_team_record(db: Session) -> TeamRecordResponse:
    """Vittorie/pareggi/sconfitte e gol sulle partite con punteggio registrato."""
    record = team_record(db.query(MatchSession).all())
    return TeamRecordResponse(
        played=record.played,
        wins=record.wins,
        draws=record.draws,
        losses=record.losses,
        goals_for=record.goals_for,
        goals_against=record.goals_against,
        goal_diff=record.goal_diff,
        points=record.points,
    )
