"""
Servizio formazioni: upsert titolari/panchina per partita e aggiornamento minuti.
Unicità (match_id, player_id): un salvataggio ripetuto sovrascrive lo status
senza creare duplicati; minuti scritti solo se presenti nel payload.
"""

import logging
from typing import Any

from pydantic import ValidationError
from sqlalchemy.orm import Session

from squadra.analytics.roster import FormationError, validate_formation_payload
from squadra.constants import FormationStatus
from squadra.core.config import enforce_starting_eleven
from squadra.models import FormationAssignment, MatchSession, Player
from squadra.schemas.formations import FormationEntry, FormationMinutesUpdate
from squadra.services.errors import InvalidDataError, NotFoundError

logger = logging.getLogger(__name__)


def list_all_formations(db: Session) -> list[FormationAssignment]:
    return db.query(FormationAssignment).order_by(FormationAssignment.match_id, FormationAssignment.id).all()


def list_match_formations(db: Session, match_id: int) -> list[FormationAssignment]:
    return (
        db.query(FormationAssignment)
        .filter(FormationAssignment.match_id == match_id)
        .order_by(FormationAssignment.id)
        .all()
    )


def count_starters(db: Session, match_id: int) -> int:
    return (
        db.query(FormationAssignment)
        .filter(
            FormationAssignment.match_id == match_id,
            FormationAssignment.status == FormationStatus.STARTER.value,
        )
        .count()
    )


def get_assignment(db: Session, match_id: int, player_id: int) -> FormationAssignment:
    row = (
        db.query(FormationAssignment)
        .filter(
            FormationAssignment.match_id == match_id,
            FormationAssignment.player_id == player_id,
        )
        .first()
    )
    if not row:
        raise NotFoundError(f"Formazione non trovata per partita {match_id}, giocatore {player_id}")
    return row


def _parse_entries(formations: list[Any]) -> list[FormationEntry]:
    entries = []
    for raw in formations:
        try:
            entries.append(FormationEntry.model_validate(raw))
        except ValidationError as e:
            raise InvalidDataError(f"Formazione non valida {raw!r}: {e.errors()[0]['msg']}")
    return entries


def upsert_formations(db: Session, match_id: Any, formations: Any) -> list[FormationAssignment]:
    """
    Salva la formazione di una partita in una sola transazione.
    Per le righe esistenti: status sempre sovrascritto, minutes_played e
    minute_entered solo se inviati.
    """
    try:
        match_id = validate_formation_payload(match_id, formations, enforce_eleven=enforce_starting_eleven())
    except FormationError as e:
        raise InvalidDataError(str(e))
    entries = _parse_entries(formations)

    if not db.query(MatchSession.id).filter(MatchSession.id == match_id).first():
        raise NotFoundError(f"Partita {match_id} non trovata")

    player_ids = [e.player_id for e in entries]
    known = {pid for (pid,) in db.query(Player.id).filter(Player.id.in_(player_ids)).all()}
    unknown = sorted(set(player_ids) - known)
    if unknown:
        raise InvalidDataError(f"Giocatori inesistenti: {unknown}")

    logger.info("Salvataggio formazione match_id=%s: %s giocatori", match_id, len(entries))

    existing = {
        row.player_id: row
        for row in db.query(FormationAssignment).filter(FormationAssignment.match_id == match_id).all()
    }

    saved = []
    for entry in entries:
        provided = entry.model_dump(exclude_unset=True)
        row = existing.get(entry.player_id)
        if row is None:
            row = FormationAssignment(match_id=match_id, player_id=entry.player_id)
            db.add(row)
        row.status = entry.status.value
        if "minutes_played" in provided:
            row.minutes_played = entry.minutes_played
        if "minute_entered" in provided:
            row.minute_entered = entry.minute_entered
        saved.append(row)

    db.commit()
    for row in saved:
        db.refresh(row)
    logger.info("Formazione salvata match_id=%s: %s righe", match_id, len(saved))
    return saved


def update_formation_minutes(
    db: Session,
    match_id: int,
    player_id: int,
    payload: FormationMinutesUpdate,
) -> FormationAssignment:
    """Aggiornamento parziale di una riga: solo i campi presenti nel payload."""
    row = get_assignment(db, match_id, player_id)
    updates = payload.model_dump(exclude_unset=True)
    if updates.get("status") is not None:
        updates["status"] = updates["status"].value
    elif "status" in updates:
        raise InvalidDataError("status non può essere null")

    for field_name, value in updates.items():
        setattr(row, field_name, value)
    db.commit()
    db.refresh(row)
    return row
