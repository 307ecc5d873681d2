"""Application configuration. Load from environment."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MAX_SUBSTITUTIONS = 5


def get_database_url() -> str:
    """Return DATABASE_URL from environment. Raises if missing."""
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is required")
    return url


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def enforce_starting_eleven() -> bool:
    """
    Se attivo, POST /api/formations rifiuta payload senza esattamente 11 titolari.
    Letto ad ogni richiesta: i test possono cambiarlo con monkeypatch.setenv.
    """
    value = os.environ.get("ENFORCE_STARTING_ELEVEN", "true")
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_max_substitutions() -> int:
    """Numero massimo di sostituzioni per partita (flusso live)."""
    raw = os.environ.get("MAX_SUBSTITUTIONS")
    if not raw:
        return DEFAULT_MAX_SUBSTITUTIONS
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"MAX_SUBSTITUTIONS deve essere un intero, ricevuto {raw!r}")
