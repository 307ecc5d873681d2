"""Convocazione: foglio di chiamata con logistica e lista giocatori."""

from sqlalchemy import JSON, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from squadra.core.database import Base


class Convocation(Base):
    __tablename__ = "convocations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    match_date = Column(String(10), nullable=False, index=True)
    field_arrival_time = Column(String(5), nullable=True)
    match_start_time = Column(String(5), nullable=True)
    match_address = Column(String(512), nullable=True)
    opponent = Column(String(255), nullable=True)
    is_home = Column(Integer, nullable=False, default=1)
    player_ids = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
