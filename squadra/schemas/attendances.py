"""Pydantic schemas per presenze allenamento."""

from datetime import datetime

from pydantic import Field

from squadra.constants import AttendanceStatus
from squadra.schemas.base import ApiModel


class AttendanceUpsert(ApiModel):
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    player_id: int
    status: AttendanceStatus
    notes: str | None = None


class AttendanceRead(ApiModel):
    id: int
    date: str
    player_id: int
    status: str
    notes: str | None = None
    created_at: datetime | None = None


class TrainingSessionRow(ApiModel):
    date: str
    presenti: int
    assenti: int
    infortunati: int
    totale: int


class TrainingDayRead(ApiModel):
    date: str
    day_name: str
    day_num: int
    month_abbr: str


class WeeklyPlannerPlayer(ApiModel):
    id: int
    first_name: str
    last_name: str
    number: int | None = None
    role: str | None = None
    attendances: dict[str, str | None]


class WeeklyPlannerDays(ApiModel):
    monday: str
    wednesday: str
    thursday: str


class WeeklyPlannerResponse(ApiModel):
    week_start: str
    days: WeeklyPlannerDays
    players: list[WeeklyPlannerPlayer]


class MonthlyPlannerPlayer(WeeklyPlannerPlayer):
    total_presenze: int
    total_assenze: int


class MonthlyPlannerResponse(ApiModel):
    year_month: str
    training_days: list[TrainingDayRead]
    players: list[MonthlyPlannerPlayer]


class RecentAttendanceRow(ApiModel):
    player_id: int
    presenti_count: int
    infortunato_count: int
