"""API presenze allenamento."""

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from squadra.core.database import get_db
from squadra.routers.errors import service_errors
from squadra.schemas.attendances import (
    AttendanceRead,
    AttendanceUpsert,
    MonthlyPlannerResponse,
    RecentAttendanceRow,
    WeeklyPlannerResponse,
)
from squadra.services import attendance_service

router = APIRouter(prefix="/api/attendances", tags=["attendances"])


@router.get("", response_model=list[AttendanceRead])
def list_attendances(db: Session = Depends(get_db)):
    return attendance_service.list_attendances(db)


# Prima di /{date}: altrimenti "weekly-planner" verrebbe letto come data.
@router.get("/weekly-planner", response_model=WeeklyPlannerResponse)
def weekly_planner(date: str | None = None, db: Session = Depends(get_db)):
    """Lunedi', mercoledi' e giovedi' della settimana di ?date= (default oggi)."""
    with service_errors(db, "planner settimanale"):
        return attendance_service.get_weekly_planner(db, date)


@router.get("/monthly-planner", response_model=MonthlyPlannerResponse)
def monthly_planner(
    year_month: str | None = Query(default=None, alias="yearMonth"),
    db: Session = Depends(get_db),
):
    with service_errors(db, "planner mensile"):
        return attendance_service.get_monthly_planner(db, year_month)


@router.get("/recent", response_model=list[RecentAttendanceRow])
@router.get("/recent/{days}", response_model=list[RecentAttendanceRow])
def recent_attendances(days: int = 7, db: Session = Depends(get_db)):
    with service_errors(db, "presenze recenti"):
        return attendance_service.get_recent_attendance(db, days)


@router.get("/{date}", response_model=list[AttendanceRead])
def attendances_by_date(date: str, db: Session = Depends(get_db)):
    return attendance_service.list_attendances(db, date=date)


@router.post("", response_model=AttendanceRead)
def upsert_attendance(payload: AttendanceUpsert, db: Session = Depends(get_db)):
    """Crea o aggiorna la presenza per (date, playerId)."""
    with service_errors(db, "salvataggio presenza"):
        return attendance_service.upsert_attendance(db, payload)


@router.delete("/{attendance_id}", status_code=204)
def delete_attendance(attendance_id: int, db: Session = Depends(get_db)):
    with service_errors(db, "eliminazione presenza"):
        attendance_service.delete_attendance(db, attendance_id)
    return Response(status_code=204)
