"""Squadra: gestione rosa, partite e statistiche di una squadra di calcio amatoriale."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from squadra.core.config import get_log_level
from squadra.core.database import init_db
from squadra.routers import (
    admin_router,
    attendances_router,
    convocations_router,
    formations_router,
    health_router,
    match_events_router,
    matches_router,
    players_router,
    stats_router,
    teams_router,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Squadra",
    description="Gestione squadra: rosa, convocazioni, formazioni, partite live e offline, statistiche.",
    version="0.1.0",
)

app.include_router(health_router)
app.include_router(players_router)
app.include_router(teams_router)
app.include_router(matches_router)
app.include_router(match_events_router)
app.include_router(formations_router)
app.include_router(attendances_router)
app.include_router(convocations_router)
app.include_router(admin_router)
app.include_router(stats_router)

_ERROR_LABELS = {
    400: "Dati non validi",
    404: "Risorsa non trovata",
    409: "Operazione non ammessa",
    500: "Errore interno",
}


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": _ERROR_LABELS.get(exc.status_code, "Errore"), "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    """Payload malformato o campi mancanti: 400 con l'elenco dei campi."""
    errors = [
        {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "message": err.get("msg")}
        for err in exc.errors()
    ]
    logger.warning("Richiesta non valida %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content={"error": _ERROR_LABELS[400], "detail": errors})


@app.on_event("startup")
def on_startup():
    """Configura il logging e crea le tabelle all'avvio."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
    init_db()
