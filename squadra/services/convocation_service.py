"""
Servizio convocazioni. Cancellare una convocazione non cancella le partite
collegate: il loro convocation_id torna NULL.
"""

import logging

from sqlalchemy.orm import Session

from squadra.analytics.roster import FormationError, build_assignments
from squadra.models import Convocation, FormationAssignment, MatchSession, Player
from squadra.schemas.convocations import ConvocationCreate, ConvocationMatchCreate, ConvocationUpdate
from squadra.services.errors import InvalidDataError, NotFoundError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"name", "match_date", "is_home"}


def list_convocations(db: Session) -> list[Convocation]:
    return db.query(Convocation).order_by(Convocation.match_date.desc(), Convocation.id.desc()).all()


def get_convocation(db: Session, convocation_id: int) -> Convocation:
    convocation = db.query(Convocation).filter(Convocation.id == convocation_id).first()
    if not convocation:
        raise NotFoundError(f"Convocazione {convocation_id} non trovata")
    return convocation


def create_convocation(db: Session, payload: ConvocationCreate) -> Convocation:
    data = payload.model_dump()
    data["player_ids"] = list(dict.fromkeys(data["player_ids"]))
    convocation = Convocation(**data)
    db.add(convocation)
    db.commit()
    db.refresh(convocation)
    logger.info("Creata convocazione id=%s (%s giocatori)", convocation.id, len(convocation.player_ids))
    return convocation


def update_convocation(db: Session, convocation_id: int, payload: ConvocationUpdate) -> Convocation:
    convocation = get_convocation(db, convocation_id)
    updates = payload.model_dump(exclude_unset=True)
    if updates.get("player_ids") is not None:
        updates["player_ids"] = list(dict.fromkeys(updates["player_ids"]))
    elif "player_ids" in updates:
        updates["player_ids"] = []
    for field_name, value in updates.items():
        if value is None and field_name in _REQUIRED_FIELDS:
            continue
        setattr(convocation, field_name, value)
    db.commit()
    db.refresh(convocation)
    return convocation


def delete_convocation(db: Session, convocation_id: int) -> None:
    convocation = get_convocation(db, convocation_id)
    db.query(MatchSession).filter(MatchSession.convocation_id == convocation_id).update(
        {MatchSession.convocation_id: None}, synchronize_session=False
    )
    db.delete(convocation)
    db.commit()
    logger.info("Eliminata convocazione id=%s", convocation_id)


def create_match_from_convocation(
    db: Session,
    convocation_id: int,
    payload: ConvocationMatchCreate,
) -> tuple[MatchSession, list[FormationAssignment]]:
    """
    Primo salvataggio della formazione per una convocazione: crea la partita
    (data e avversario della convocazione) e una riga per ogni convocato,
    TITOLARE o PANCHINA. Una sola transazione.
    """
    convocation = get_convocation(db, convocation_id)
    try:
        drafts = build_assignments(convocation.player_ids or [], payload.starter_ids)
    except FormationError as e:
        raise InvalidDataError(str(e))

    player_ids = [d.player_id for d in drafts]
    known = {pid for (pid,) in db.query(Player.id).filter(Player.id.in_(player_ids)).all()}
    unknown = sorted(set(player_ids) - known)
    if unknown:
        raise InvalidDataError(f"Giocatori inesistenti nella convocazione: {unknown}")

    match = MatchSession(
        date=convocation.match_date,
        opponent=convocation.opponent,
        formation=payload.formation,
        convocation_id=convocation.id,
    )
    db.add(match)
    db.flush()
    rows = [
        FormationAssignment(match_id=match.id, player_id=d.player_id, status=d.status.value)
        for d in drafts
    ]
    db.add_all(rows)
    db.commit()
    db.refresh(match)
    for row in rows:
        db.refresh(row)
    logger.info(
        "Partita id=%s creata da convocazione id=%s: %s convocati",
        match.id, convocation_id, len(rows),
    )
    return match, rows
