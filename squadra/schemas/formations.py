"""Pydantic schemas per formazioni (titolari/panchina per partita)."""

from datetime import datetime
from typing import Any

from pydantic import Field

from squadra.constants import FormationStatus
from squadra.schemas.base import ApiModel


class FormationEntry(ApiModel):
    player_id: int
    status: FormationStatus
    minutes_played: int | None = Field(default=None, ge=0)
    minute_entered: int | None = Field(default=None, ge=0)


class FormationSaveRequest(ApiModel):
    """
    Corpo di POST /api/formations. I campi restano laschi (Any): le regole
    (matchId obbligatorio, array non vuoto, playerId e status per voce)
    producono messaggi dedicati nel service.
    """
    match_id: Any = None
    formations: Any = None


class FormationMinutesUpdate(ApiModel):
    """PATCH minuti: solo i campi presenti vengono scritti (null azzera)."""
    minutes_played: int | None = Field(default=None, ge=0)
    minute_entered: int | None = Field(default=None, ge=0)
    status: FormationStatus | None = None


class FormationRead(ApiModel):
    id: int
    match_id: int
    player_id: int
    status: str
    minutes_played: int | None = None
    minute_entered: int | None = None
    created_at: datetime | None = None


class MatchLineupResponse(ApiModel):
    match_id: int
    formations: list[FormationRead]
