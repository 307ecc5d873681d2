"""SQLAlchemy engine, session, dependency e migrazione automatica."""

import logging

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from squadra.core.config import get_database_url

logger = logging.getLogger(__name__)


def _build_engine(url: str):
    # SQLite in-memory (sviluppo locale e test): una sola connessione condivisa.
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    return create_engine(url, pool_pre_ping=True, echo=False)


engine = _build_engine(get_database_url())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency that yields a DB session. Caller must close."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _migrate_match_sessions() -> None:
    """
    Migrazione automatica per match_sessions.
    Aggiunge le colonne introdotte dopo la prima versione dello schema
    (fase live, orari dei tempi, minuti di recupero).

    Idempotente: controlla quali colonne esistono prima di agire.
    Se la tabella non esiste ancora, create_all() la crea con lo schema
    corretto e questa funzione non fa nulla.
    """
    insp = inspect(engine)
    if "match_sessions" not in insp.get_table_names():
        return

    existing_cols = {col["name"] for col in insp.get_columns("match_sessions")}
    logger.info("match_sessions: colonne esistenti = %s", sorted(existing_cols))

    new_columns: dict[str, str] = {
        "phase": "VARCHAR(16) DEFAULT 'NOT_STARTED'",
        "first_half_end_time": "TIMESTAMP",
        "second_half_start_time": "TIMESTAMP",
        "end_time": "TIMESTAMP",
        "first_half_extra_time": "INTEGER DEFAULT 0",
        "second_half_extra_time": "INTEGER DEFAULT 0",
    }

    with engine.begin() as conn:
        added = []
        for col_name, col_type in new_columns.items():
            if col_name not in existing_cols:
                conn.execute(text(f"ALTER TABLE match_sessions ADD COLUMN {col_name} {col_type}"))
                added.append(col_name)

    if added:
        logger.info("match_sessions: aggiunte %s colonne: %s", len(added), added)
    else:
        logger.info("match_sessions: schema già aggiornato, nessuna modifica")


def init_db() -> None:
    """
    Crea tutte le tabelle e applica migrazioni automatiche.
    I modelli devono essere importati prima per registrare i metadata.
    """
    from squadra.models import (  # noqa: F401
        convocation,
        formation_assignment,
        match_event,
        match_session,
        player,
        team,
        training_attendance,
    )

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completato")

    try:
        _migrate_match_sessions()
    except SQLAlchemyError as e:
        logger.exception("Errore durante migrazione match_sessions: %s", e)
