"""Pydantic schemas per convocazioni."""

from datetime import datetime

from pydantic import Field

from squadra.schemas.base import ApiModel

_DATE = r"^\d{4}-\d{2}-\d{2}$"
_TIME = r"^\d{2}:\d{2}$"


class ConvocationCreate(ApiModel):
    name: str = Field(min_length=1)
    match_date: str = Field(pattern=_DATE)
    field_arrival_time: str | None = Field(default=None, pattern=_TIME)
    match_start_time: str | None = Field(default=None, pattern=_TIME)
    match_address: str | None = None
    opponent: str | None = None
    is_home: int = Field(default=1, ge=0, le=1)
    player_ids: list[int] = Field(default_factory=list)


class ConvocationUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=1)
    match_date: str | None = Field(default=None, pattern=_DATE)
    field_arrival_time: str | None = Field(default=None, pattern=_TIME)
    match_start_time: str | None = Field(default=None, pattern=_TIME)
    match_address: str | None = None
    opponent: str | None = None
    is_home: int | None = Field(default=None, ge=0, le=1)
    player_ids: list[int] | None = None


class ConvocationRead(ApiModel):
    id: int
    name: str
    match_date: str
    field_arrival_time: str | None = None
    match_start_time: str | None = None
    match_address: str | None = None
    opponent: str | None = None
    is_home: int = 1
    player_ids: list[int] = Field(default_factory=list)
    created_at: datetime | None = None


class ConvocationMatchCreate(ApiModel):
    """Formazione iniziale dalla convocazione: gli 11 titolari scelti, il resto in panchina."""
    starter_ids: list[int]
    formation: str | None = None
