"""Pydantic schemas per API Matches (sessioni, fase live, salvataggio offline)."""

from datetime import datetime

from pydantic import Field

from squadra.constants import MAX_EXTRA_TIME
from squadra.schemas.base import ApiModel
from squadra.schemas.events import EventCreate, EventRead


class MatchCreate(ApiModel):
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    opponent: str | None = None
    formation: str | None = None
    convocation_id: int | None = None
    first_half_extra_time: int = Field(default=0, ge=0, le=MAX_EXTRA_TIME)
    second_half_extra_time: int = Field(default=0, ge=0, le=MAX_EXTRA_TIME)
    home_score: int | None = Field(default=None, ge=0)
    away_score: int | None = Field(default=None, ge=0)
    notes: str | None = None


class MatchUpdate(ApiModel):
    """PATCH: punteggi, recupero, modulo, orario di inizio."""
    date: str | None = Field(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    opponent: str | None = None
    formation: str | None = None
    convocation_id: int | None = None
    start_time: datetime | None = None
    first_half_extra_time: int | None = Field(default=None, ge=0, le=MAX_EXTRA_TIME)
    second_half_extra_time: int | None = Field(default=None, ge=0, le=MAX_EXTRA_TIME)
    home_score: int | None = Field(default=None, ge=0)
    away_score: int | None = Field(default=None, ge=0)
    final_score: str | None = None
    notes: str | None = None


class MatchRead(ApiModel):
    id: int
    date: str
    opponent: str | None = None
    formation: str | None = None
    convocation_id: int | None = None
    phase: str
    start_time: datetime | None = None
    first_half_end_time: datetime | None = None
    second_half_start_time: datetime | None = None
    end_time: datetime | None = None
    first_half_extra_time: int = 0
    second_half_extra_time: int = 0
    home_score: int | None = None
    away_score: int | None = None
    final_score: str | None = None
    notes: str | None = None
    created_at: datetime | None = None


# --- Flusso live ---


class ClockRequest(ApiModel):
    """Minuto corrente del cronometro live (assoluto, non si azzera tra i tempi)."""
    minute: int = Field(default=0, ge=0)


class SubstitutionRequest(ApiModel):
    player_out_id: int
    player_in_id: int
    minute: int = Field(ge=0)
    half: int | None = Field(default=None, ge=1, le=2)
    description: str | None = None


class FinishRequest(ApiModel):
    minute: int = Field(ge=0)
    first_half_extra_time: int | None = Field(default=None, ge=0, le=MAX_EXTRA_TIME)
    second_half_extra_time: int | None = Field(default=None, ge=0, le=MAX_EXTRA_TIME)


class SubstitutionResponse(ApiModel):
    event: EventRead
    substitutions_used: int
    substitutions_left: int


# --- Flusso offline ---


class OfflineSaveRequest(ApiModel):
    first_half_extra_time: int = Field(default=0, ge=0, le=MAX_EXTRA_TIME)
    second_half_extra_time: int = Field(default=0, ge=0, le=MAX_EXTRA_TIME)
    events: list[EventCreate]


class OfflineSaveResponse(ApiModel):
    match: MatchRead
    events_saved: int
    formations_updated: int
    suspensions_updated: int


# --- Statistiche partita ---


class AnnotatedEventRow(ApiModel):
    id: int | None = None
    event_type: str
    minute: int
    half: int | None = None
    player_id: int | None = None
    player_name: str
    second_player_id: int | None = None
    second_player_name: str | None = None
    description: str | None = None


class MatchTotals(ApiModel):
    goals: int
    red_cards: int
    substitutions: int


class MatchStatsResponse(ApiModel):
    match: MatchRead
    goals: list[AnnotatedEventRow]
    red_cards: list[AnnotatedEventRow]
    substitutions: list[AnnotatedEventRow]
    totals: MatchTotals
