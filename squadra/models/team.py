"""Team ORM model. Anagrafica squadre del girone (avversari)."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from squadra.core.database import Base


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    logo_url = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
