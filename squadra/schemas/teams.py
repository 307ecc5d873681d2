"""Pydantic schemas per API Teams."""

from datetime import datetime

from pydantic import Field

from squadra.schemas.base import ApiModel


class TeamCreate(ApiModel):
    name: str = Field(min_length=1)
    logo_url: str | None = None


class TeamRead(ApiModel):
    id: int
    name: str
    logo_url: str | None = None
    created_at: datetime | None = None


class TeamRecordResponse(ApiModel):
    """Bilancio della nostra squadra sulle partite con punteggio."""
    played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    goal_diff: int
    points: int
