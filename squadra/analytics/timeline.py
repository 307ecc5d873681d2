"""
Timeline eventi di partita: ordinamento, conteggio sostituzioni,
buffer offline (eventi inseriti a posteriori e non ancora salvati).
"""

from dataclasses import dataclass, field
from typing import Any, Iterable

from squadra.constants import EventType, FormationStatus


@dataclass(frozen=True)
class DraftEvent:
    """Evento non ancora persistito (buffer offline)."""
    event_type: EventType
    minute: int
    half: int | None = None
    player_id: int | None = None
    second_player_id: int | None = None
    description: str | None = None
    rating: int | None = None


def sort_events(events: Iterable[Any]) -> list[Any]:
    """
    Ordine di visualizzazione: minuto crescente, a parita' di minuto
    ordine di inserimento (id crescente, poi posizione nella sequenza).
    """
    indexed = list(enumerate(events))
    indexed.sort(key=lambda pair: (
        pair[1].minute,
        getattr(pair[1], "id", None) is None,
        getattr(pair[1], "id", None) or 0,
        pair[0],
    ))
    return [event for _, event in indexed]


def substitutions_used(events: Iterable[Any]) -> int:
    """Ogni evento Sostituzione persistito vale una sostituzione (porta entrambi gli id)."""
    return sum(1 for e in events if e.event_type == EventType.SUBSTITUTION)


def can_substitute(events: Iterable[Any], max_substitutions: int) -> bool:
    return substitutions_used(events) < max_substitutions


def players_on_pitch(assignments: Iterable[Any]) -> set[int]:
    """TITOLARI non ancora usciti: solo loro possono generare eventi in campo."""
    return {
        a.player_id for a in assignments
        if a.status == FormationStatus.STARTER and a.minutes_played is None
    }


# Eventi che non richiedono il giocatore in campo.
OFF_PITCH_EVENT_TYPES = frozenset({EventType.NOTE, EventType.RATING})


def players_off_pitch(assignments: Iterable[Any]) -> set[int]:
    """Giocatori gia' usciti: minuti registrati sulla riga di formazione."""
    return {a.player_id for a in assignments if a.minutes_played is not None}


def players_on_bench(assignments: Iterable[Any]) -> set[int]:
    """PANCHINARI non ancora entrati."""
    return {
        a.player_id for a in assignments
        if a.status == FormationStatus.BENCH and a.minute_entered is None and a.minutes_played is None
    }


@dataclass
class OfflineBuffer:
    """
    Eventi inseriti dopo la partita, tenuti in memoria fino al salvataggio.
    discard() li perde tutti: nulla era stato persistito.
    """
    match_id: int
    events: list[DraftEvent] = field(default_factory=list)

    def add(self, event: DraftEvent) -> None:
        self.events.append(event)

    def remove(self, index: int) -> DraftEvent:
        return self.events.pop(index)

    def discard(self) -> None:
        self.events.clear()

    def drain(self) -> list[DraftEvent]:
        drained, self.events = self.events, []
        return drained

    @property
    def goals_for(self) -> int:
        return sum(1 for e in self.events if e.event_type == EventType.GOAL)

    @property
    def goals_against(self) -> int:
        return sum(1 for e in self.events if e.event_type == EventType.GOAL_CONCEDED)

    def __len__(self) -> int:
        return len(self.events)
