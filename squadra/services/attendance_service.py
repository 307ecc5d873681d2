"""
Servizio presenze allenamento: una riga per (data, giocatore).
Un secondo salvataggio per la stessa coppia aggiorna la riga esistente.
"""

import logging
from datetime import date, datetime

from sqlalchemy.orm import Session

from squadra.analytics.statistics import (
    monthly_planner,
    recent_attendance,
    training_sessions,
    week_training_days,
    weekly_planner,
)
from squadra.models import TrainingAttendance
from squadra.schemas.attendances import (
    AttendanceUpsert,
    MonthlyPlannerResponse,
    RecentAttendanceRow,
    TrainingSessionRow,
    WeeklyPlannerResponse,
)
from squadra.services.errors import InvalidDataError, NotFoundError
from squadra.services.player_service import get_player, list_players

logger = logging.getLogger(__name__)


def list_attendances(db: Session, date: str | None = None) -> list[TrainingAttendance]:
    query = db.query(TrainingAttendance)
    if date:
        query = query.filter(TrainingAttendance.date == date)
    return query.order_by(TrainingAttendance.date.desc(), TrainingAttendance.player_id).all()


def upsert_attendance(db: Session, payload: AttendanceUpsert) -> TrainingAttendance:
    get_player(db, payload.player_id)
    row = (
        db.query(TrainingAttendance)
        .filter(
            TrainingAttendance.date == payload.date,
            TrainingAttendance.player_id == payload.player_id,
        )
        .first()
    )
    if row is None:
        row = TrainingAttendance(date=payload.date, player_id=payload.player_id)
        db.add(row)
    row.status = payload.status.value
    row.notes = payload.notes
    db.commit()
    db.refresh(row)
    return row


def delete_attendance(db: Session, attendance_id: int) -> None:
    deleted = db.query(TrainingAttendance).filter(TrainingAttendance.id == attendance_id).delete()
    if not deleted:
        raise NotFoundError(f"Presenza {attendance_id} non trovata")
    db.commit()


def list_training_sessions(db: Session) -> list[TrainingSessionRow]:
    """Riepilogo presenti/assenti/infortunati per data, dalla piu' recente."""
    summaries = training_sessions(db.query(TrainingAttendance).all())
    return [TrainingSessionRow.model_validate(s) for s in summaries]


def delete_training_session(db: Session, date: str) -> int:
    """Elimina tutte le presenze di una data. 404 se la data non ha presenze."""
    deleted = (
        db.query(TrainingAttendance)
        .filter(TrainingAttendance.date == date)
        .delete(synchronize_session=False)
    )
    if not deleted:
        raise NotFoundError(f"Nessun allenamento registrato in data {date}")
    db.commit()
    logger.info("Eliminato allenamento del %s: %s presenze", date, deleted)
    return deleted


def _attendances_on(db: Session, dates: list[str]) -> list[TrainingAttendance]:
    return db.query(TrainingAttendance).filter(TrainingAttendance.date.in_(dates)).all()


def get_weekly_planner(db: Session, day: str | None = None) -> WeeklyPlannerResponse:
    """Settimana che contiene day (YYYY-MM-DD, default oggi)."""
    try:
        reference = date.fromisoformat(day) if day else date.today()
    except ValueError:
        raise InvalidDataError(f"Data non valida: {day!r} (atteso YYYY-MM-DD)")
    dates = [d.isoformat() for d in week_training_days(reference)]
    planner = weekly_planner(list_players(db), _attendances_on(db, dates), reference)
    return WeeklyPlannerResponse.model_validate(planner)


def get_monthly_planner(db: Session, year_month: str | None = None) -> MonthlyPlannerResponse:
    """Mese nel formato YYYY-MM, default il mese corrente."""
    try:
        reference = datetime.strptime(year_month, "%Y-%m").date() if year_month else date.today()
    except ValueError:
        raise InvalidDataError(f"Mese non valido: {year_month!r} (atteso YYYY-MM)")
    prefix = f"{reference.year:04d}-{reference.month:02d}-"
    attendances = db.query(TrainingAttendance).filter(TrainingAttendance.date.startswith(prefix)).all()
    planner = monthly_planner(list_players(db), attendances, reference.year, reference.month)
    return MonthlyPlannerResponse.model_validate(planner)


def get_recent_attendance(db: Session, days: int = 7) -> list[RecentAttendanceRow]:
    if days < 1:
        raise InvalidDataError("days deve essere almeno 1")
    rows = recent_attendance(list_players(db), db.query(TrainingAttendance).all(), date.today(), days)
    return [RecentAttendanceRow.model_validate(r) for r in rows]
