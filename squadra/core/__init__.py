from squadra.core.config import (
    enforce_starting_eleven,
    get_database_url,
    get_log_level,
    get_max_substitutions,
)
from squadra.core.database import Base, SessionLocal, engine, get_db, init_db

__all__ = [
    "get_database_url",
    "get_log_level",
    "enforce_starting_eleven",
    "get_max_substitutions",
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "init_db",
]
