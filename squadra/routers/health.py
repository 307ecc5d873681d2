"""Health check router."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from squadra.core.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Health check con verifica della connessione al database."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.exception("Health check: database non raggiungibile: %s", e)
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "error", "detail": str(e)[:200]},
        )
    return {"status": "healthy", "database": "ok"}
