"""Pydantic schemas per API Players."""

from datetime import datetime

from pydantic import Field

from squadra.constants import ConvocationStatus
from squadra.schemas.base import ApiModel


class PlayerCreate(ApiModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    number: int | None = None
    role: str | None = None
    position: str | None = None
    convocation_status: ConvocationStatus = ConvocationStatus.AVAILABLE
    is_convocato: int = Field(default=0, ge=0, le=1)
    yellow_cards: int = Field(default=0, ge=0)
    red_cards: int = Field(default=0, ge=0)
    suspension_days: int = Field(default=0, ge=0)
    notes: str | None = None


class PlayerUpdate(ApiModel):
    """PATCH: solo i campi presenti vengono scritti."""
    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    number: int | None = None
    role: str | None = None
    position: str | None = None
    convocation_status: ConvocationStatus | None = None
    is_convocato: int | None = Field(default=None, ge=0, le=1)
    yellow_cards: int | None = Field(default=None, ge=0)
    red_cards: int | None = Field(default=None, ge=0)
    suspension_days: int | None = Field(default=None, ge=0)
    notes: str | None = None


class PlayerRead(ApiModel):
    id: int
    first_name: str
    last_name: str
    number: int | None = None
    role: str | None = None
    position: str | None = None
    convocation_status: str
    is_convocato: int
    yellow_cards: int = 0
    red_cards: int = 0
    suspension_days: int = 0
    notes: str | None = None
    created_at: datetime | None = None


class PlayerStatsRow(ApiModel):
    """Statistiche aggregate di un giocatore (ricalcolate ad ogni richiesta)."""
    player_id: int
    name: str
    role: str | None = None
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    minutes: int = 0
    convocations: int = 0
    starts: int = 0
    bench: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    # Solo portieri: gol avversari nelle partite in cui ha giocato
    goals_conceded: int = 0
    attendance_present: int = 0
    attendance_absent: int = 0
    attendance_injured: int = 0
