"""Pydantic schemas per eventi di partita."""

from datetime import datetime

from pydantic import Field

from squadra.constants import EventType
from squadra.schemas.base import ApiModel


class EventCreate(ApiModel):
    player_id: int | None = None
    second_player_id: int | None = None
    event_type: EventType
    minute: int = Field(ge=0)
    half: int | None = Field(default=None, ge=1, le=2)
    description: str | None = None
    rating: int | None = Field(default=None, ge=1, le=10)


class EventRead(ApiModel):
    id: int
    match_id: int
    player_id: int | None = None
    second_player_id: int | None = None
    event_type: str
    minute: int
    half: int | None = None
    description: str | None = None
    rating: int | None = None
    created_at: datetime | None = None
