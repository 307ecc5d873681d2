"""
Traduzione delle eccezioni del service layer in HTTPException.
Errori DB: rollback della sessione e 500.
"""

import logging
from contextlib import contextmanager

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from squadra.services.errors import ConflictError, InvalidDataError, NotFoundError

logger = logging.getLogger(__name__)


@contextmanager
def service_errors(db: Session, action: str):
    try:
        yield
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        logger.warning("%s rifiutato: %s", action, e)
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidDataError as e:
        logger.warning("%s: dati non validi: %s", action, e)
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Errore DB durante %s: %s", action, e)
        raise HTTPException(status_code=500, detail=f"Errore database durante {action}")
