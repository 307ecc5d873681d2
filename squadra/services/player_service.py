"""
Servizio rosa giocatori: CRUD e regole sullo stato di convocazione.
"""

import logging
from typing import Any

from sqlalchemy.orm import Session

from squadra.constants import EXCLUDING_CONVOCATION_STATUSES
from squadra.models import FormationAssignment, Player, TrainingAttendance
from squadra.schemas.players import PlayerCreate, PlayerUpdate
from squadra.services.errors import NotFoundError

logger = logging.getLogger(__name__)

# Colonne NOT NULL: un null esplicito nel PATCH viene ignorato.
_REQUIRED_FIELDS = {
    "first_name", "last_name", "convocation_status", "is_convocato",
    "yellow_cards", "red_cards", "suspension_days",
}


def list_players(db: Session) -> list[Player]:
    return db.query(Player).order_by(Player.last_name, Player.first_name, Player.id).all()


def get_player(db: Session, player_id: int) -> Player:
    player = db.query(Player).filter(Player.id == player_id).first()
    if not player:
        raise NotFoundError(f"Giocatore {player_id} non trovato")
    return player


def create_player(db: Session, payload: PlayerCreate) -> Player:
    data = apply_convocation_rule(payload.model_dump())
    data["convocation_status"] = payload.convocation_status.value
    player = Player(**data)
    db.add(player)
    db.commit()
    db.refresh(player)
    logger.info("Creato giocatore id=%s (%s)", player.id, player.display_name)
    return player


def apply_convocation_rule(updates: dict[str, Any]) -> dict[str, Any]:
    """
    Infortunato o Espulso escludono automaticamente dalla convocazione:
    is_convocato forzato a 0 qualunque sia il valore inviato.
    """
    status = updates.get("convocation_status")
    if status is not None and status in EXCLUDING_CONVOCATION_STATUSES:
        updates["is_convocato"] = 0
    return updates


def update_player(db: Session, player_id: int, payload: PlayerUpdate) -> Player:
    """Aggiornamento parziale: solo i campi presenti nel payload."""
    player = get_player(db, player_id)
    updates = apply_convocation_rule(payload.model_dump(exclude_unset=True))
    if updates.get("convocation_status") is not None:
        updates["convocation_status"] = updates["convocation_status"].value

    for field_name, value in updates.items():
        if value is None and field_name in _REQUIRED_FIELDS:
            continue
        setattr(player, field_name, value)
    db.commit()
    db.refresh(player)
    logger.info("Aggiornato giocatore id=%s campi=%s", player_id, sorted(updates))
    return player


def delete_player(db: Session, player_id: int) -> None:
    """
    Cancellazione definitiva. Gli eventi storici restano con player_id orfano
    (le statistiche li mostrano come "Sconosciuto").
    """
    player = get_player(db, player_id)
    db.query(FormationAssignment).filter(FormationAssignment.player_id == player_id).delete(
        synchronize_session=False
    )
    db.query(TrainingAttendance).filter(TrainingAttendance.player_id == player_id).delete(
        synchronize_session=False
    )
    db.delete(player)
    db.commit()
    logger.info("Eliminato giocatore id=%s", player_id)
