"""
Formazione per singola partita: un record per ogni giocatore convocato.
minutes_played resta NULL finche' il giocatore e' in campo (o non ancora entrato).
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import backref, relationship
from sqlalchemy.sql import func

from squadra.core.database import Base


class FormationAssignment(Base):
    __tablename__ = "formation_assignments"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(
        Integer, ForeignKey("match_sessions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    player_id = Column(
        Integer, ForeignKey("players.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    status = Column(String(16), nullable=False)
    minutes_played = Column(Integer, nullable=True)
    minute_entered = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # --- Relazioni ---
    match = relationship("MatchSession", backref=backref("formations", cascade="all, delete-orphan"))
    player = relationship("Player")

    # --- Vincoli ---
    __table_args__ = (
        Index(
            "uq_formation_assignments_match_player",
            "match_id", "player_id",
            unique=True,
        ),
    )
