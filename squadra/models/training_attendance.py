"""Presenze allenamento: una riga per (data, giocatore)."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from squadra.core.database import Base


class TrainingAttendance(Base):
    __tablename__ = "training_attendances"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(String(10), nullable=False, index=True)
    player_id = Column(
        Integer, ForeignKey("players.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    status = Column(String(16), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    player = relationship("Player")

    __table_args__ = (
        Index(
            "uq_training_attendances_date_player",
            "date", "player_id",
            unique=True,
        ),
    )
