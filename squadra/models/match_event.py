"""
Eventi di una partita: gol, cartellini, sostituzioni, note.
Append-only: si creano e si cancellano, non si modificano.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import backref, relationship
from sqlalchemy.sql import func

from squadra.core.database import Base


class MatchEvent(Base):
    __tablename__ = "match_events"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(
        Integer, ForeignKey("match_sessions.id", ondelete="CASCADE"),
        nullable=False,
    )
    player_id = Column(Integer, ForeignKey("players.id", ondelete="SET NULL"), nullable=True)
    # Sostituzione: giocatore che entra (player_id = giocatore che esce)
    second_player_id = Column(Integer, ForeignKey("players.id", ondelete="SET NULL"), nullable=True)
    event_type = Column(String(32), nullable=False)
    minute = Column(Integer, nullable=False)
    half = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    rating = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # --- Relazioni ---
    match = relationship("MatchSession", backref=backref("events", cascade="all, delete-orphan"))

    # --- Indici ---
    __table_args__ = (
        Index("ix_match_events_match_id", "match_id"),
        Index("ix_match_events_player", "player_id"),
        Index("ix_match_events_type", "event_type"),
    )
