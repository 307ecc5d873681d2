"""Regole di composizione della formazione (titolari/panchina) per una partita."""

from dataclasses import dataclass
from typing import Any, Iterable

from squadra.constants import STARTING_ELEVEN, FormationStatus


class FormationError(ValueError):
    """Payload formazione non valido."""


@dataclass(frozen=True)
class AssignmentDraft:
    player_id: int
    status: FormationStatus


def build_assignments(convocated_ids: Iterable[int], starter_ids: Iterable[int]) -> list[AssignmentDraft]:
    """
    Una riga per convocato: TITOLARE per gli 11 scelti, PANCHINA per gli altri.
    Ordine: quello della convocazione.
    """
    convocated = list(dict.fromkeys(convocated_ids))
    starters = list(starter_ids)
    if len(set(starters)) != len(starters):
        raise FormationError("Titolare indicato piu' volte")
    if len(starters) != STARTING_ELEVEN:
        raise FormationError(f"Servono esattamente {STARTING_ELEVEN} titolari, ricevuti {len(starters)}")
    missing = set(starters) - set(convocated)
    if missing:
        raise FormationError(f"Titolari non convocati: {sorted(missing)}")

    starter_set = set(starters)
    return [
        AssignmentDraft(
            player_id=pid,
            status=FormationStatus.STARTER if pid in starter_set else FormationStatus.BENCH,
        )
        for pid in convocated
    ]


def _coerce_match_id(match_id: Any) -> int:
    if not match_id:
        raise FormationError("matchId è obbligatorio")
    if isinstance(match_id, bool) or (isinstance(match_id, float) and not match_id.is_integer()):
        raise FormationError(f"matchId deve essere un intero, ricevuto {match_id!r}")
    try:
        return int(match_id)
    except (TypeError, ValueError):
        raise FormationError(f"matchId deve essere un intero, ricevuto {match_id!r}")


def validate_formation_payload(match_id: Any, formations: Any, enforce_eleven: bool) -> int:
    """
    Regole di POST /api/formations:
    matchId obbligatorio, formations array non vuoto, ogni voce con playerId e status,
    nessun giocatore ripetuto; con enforce_eleven esattamente 11 TITOLARI.
    Ritorna matchId come intero.
    """
    match_id = _coerce_match_id(match_id)
    if not isinstance(formations, list):
        raise FormationError("formations deve essere un array")
    if not formations:
        raise FormationError("formations non può essere vuoto")

    seen: set[int] = set()
    starters = 0
    for entry in formations:
        player_id = _field(entry, "player_id", "playerId")
        status = _field(entry, "status", "status")
        if not player_id or not status:
            raise FormationError("Ogni formazione deve avere playerId e status")
        if player_id in seen:
            raise FormationError(f"Giocatore {player_id} ripetuto nella formazione")
        seen.add(player_id)
        if status == FormationStatus.STARTER:
            starters += 1

    if enforce_eleven and starters != STARTING_ELEVEN:
        raise FormationError(f"Servono esattamente {STARTING_ELEVEN} titolari, ricevuti {starters}")
    return match_id


def _field(entry: Any, attr: str, key: str) -> Any:
    if isinstance(entry, dict):
        return entry.get(key, entry.get(attr))
    return getattr(entry, attr, None)
