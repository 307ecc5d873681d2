"""Player ORM model. Anagrafica, stato convocazione e disciplina."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from squadra.constants import ConvocationStatus
from squadra.core.database import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)
    number = Column(Integer, nullable=True)
    role = Column(String(64), nullable=True)
    position = Column(String(64), nullable=True)
    convocation_status = Column(String(64), nullable=False, default=ConvocationStatus.AVAILABLE.value)
    is_convocato = Column(Integer, nullable=False, default=0)

    # --- Disciplina e squalifiche ---
    yellow_cards = Column(Integer, nullable=False, default=0)
    red_cards = Column(Integer, nullable=False, default=0)
    suspension_days = Column(Integer, nullable=False, default=0)

    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @property
    def display_name(self) -> str:
        """Formato usato nei report: "Cognome Nome"."""
        return f"{self.last_name} {self.first_name}"
