"""
Statistiche giocatori: aggregate ricalcolate ad ogni richiesta da eventi,
formazioni, partite e presenze.
"""

import logging

from sqlalchemy.orm import Session

from squadra.analytics.statistics import PlayerStats, player_stats
from squadra.models import FormationAssignment, MatchEvent, MatchSession, Player, TrainingAttendance
from squadra.schemas.players import PlayerStatsRow
from squadra.services.player_service import get_player, list_players

logger = logging.getLogger(__name__)


def _to_row(stats: PlayerStats) -> PlayerStatsRow:
    return PlayerStatsRow.model_validate(stats)


def _compute(db: Session, players: list[Player]) -> list[PlayerStatsRow]:
    ids = [p.id for p in players]
    if not ids:
        return []
    events = db.query(MatchEvent).filter(MatchEvent.player_id.in_(ids)).all()
    formations = db.query(FormationAssignment).filter(FormationAssignment.player_id.in_(ids)).all()
    attendances = db.query(TrainingAttendance).filter(TrainingAttendance.player_id.in_(ids)).all()
    matches = db.query(MatchSession).all()
    return [_to_row(s) for s in player_stats(players, events, formations, matches, attendances)]


def get_all_player_stats(db: Session) -> list[PlayerStatsRow]:
    rows = _compute(db, list_players(db))
    logger.info("Statistiche calcolate per %s giocatori", len(rows))
    return rows


def get_player_stats(db: Session, player_id: int) -> PlayerStatsRow:
    player = get_player(db, player_id)
    return _compute(db, [player])[0]
