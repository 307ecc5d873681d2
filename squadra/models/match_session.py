"""MatchSession ORM model: una partita reale con punteggio, tempi e fase live."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from squadra.constants import MatchPhase
from squadra.core.database import Base


class MatchSession(Base):
    __tablename__ = "match_sessions"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(String(10), nullable=False, index=True)
    opponent = Column(String(255), nullable=True)
    formation = Column(String(16), nullable=True)
    convocation_id = Column(
        Integer, ForeignKey("convocations.id", ondelete="SET NULL"),
        nullable=True,
    )
    phase = Column(String(16), nullable=False, default=MatchPhase.NOT_STARTED.value)

    # --- Orari (flusso live) ---
    start_time = Column(DateTime(timezone=True), nullable=True)
    first_half_end_time = Column(DateTime(timezone=True), nullable=True)
    second_half_start_time = Column(DateTime(timezone=True), nullable=True)
    end_time = Column(DateTime(timezone=True), nullable=True)

    # --- Recupero e punteggio ---
    first_half_extra_time = Column(Integer, nullable=False, default=0)
    second_half_extra_time = Column(Integer, nullable=False, default=0)
    home_score = Column(Integer, nullable=True)
    away_score = Column(Integer, nullable=True)
    final_score = Column(String(16), nullable=True)

    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    convocation = relationship("Convocation")
