"""
Conteggio minuti giocati per partita.

Unico modulo usato sia dal flusso live (cronometro) sia dal salvataggio
offline: i due flussi differiscono solo nel momento in cui si persiste.

Regole:
  - durata tempo = 45 + recupero inserito dall'utente (0-15)
  - titolare mai sostituito: primo tempo + secondo tempo
  - titolare sostituito a (tempo h, minuto m): m se h=1, primo tempo + m se h=2
  - subentrato a (h, m): minute_entered = m o primo tempo + m,
    minuti = (primo tempo - m) + secondo tempo se h=1, secondo tempo - m se h=2
  - risultati sempre in [0, durata totale]

Gli argomenti sono oggetti con attributi (righe ORM o dataclass):
formazioni con player_id/status/minutes_played/minute_entered,
sostituzioni con player_id (esce)/second_player_id (entra)/half/minute.
NON accede al DB.
"""

from dataclasses import dataclass
from typing import Any, Iterable

from squadra.constants import MAX_EXTRA_TIME, NOMINAL_HALF_MINUTES, EventType, FormationStatus


@dataclass(frozen=True)
class HalfLengths:
    first_extra: int = 0
    second_extra: int = 0

    def __post_init__(self):
        for name in ("first_extra", "second_extra"):
            value = getattr(self, name)
            if value is None or not 0 <= value <= MAX_EXTRA_TIME:
                raise ValueError(f"{name} deve essere tra 0 e {MAX_EXTRA_TIME}, ricevuto {value!r}")

    @property
    def first(self) -> int:
        return NOMINAL_HALF_MINUTES + self.first_extra

    @property
    def second(self) -> int:
        return NOMINAL_HALF_MINUTES + self.second_extra

    @property
    def total(self) -> int:
        return self.first + self.second


@dataclass(frozen=True)
class MinutesResult:
    player_id: int
    minutes_played: int
    minute_entered: int | None = None


def _clamp(value: int, upper: int | None = None) -> int:
    value = max(0, value)
    if upper is not None:
        value = min(value, upper)
    return value


def absolute_minute(half: int | None, minute: int, halves: HalfLengths) -> int:
    """
    Minuto assoluto di partita.
    half=None: minuto gia' assoluto (cronometro live che non si azzera tra i tempi).
    """
    if half is None or half == 1:
        return minute
    if half == 2:
        return halves.first + minute
    raise ValueError(f"half deve essere 1 o 2, ricevuto {half!r}")


def minutes_for_exit(minute_entered: int | None, exit_minute: int, total: int | None = None) -> int:
    """
    Minuti giocati da chi esce al minuto assoluto exit_minute.
    Con total il minuto di uscita non supera la durata della partita.
    """
    if total is not None:
        exit_minute = min(exit_minute, total)
    return max(0, exit_minute - (minute_entered or 0))


def _status_value(status: Any) -> str:
    return status.value if isinstance(status, FormationStatus) else str(status)


def _substitution_index(substitutions: Iterable[Any]) -> tuple[dict[int, Any], dict[int, Any]]:
    """Prima sostituzione in uscita e in entrata per giocatore."""
    subs_out: dict[int, Any] = {}
    subs_in: dict[int, Any] = {}
    for sub in substitutions:
        event_type = getattr(sub, "event_type", EventType.SUBSTITUTION.value)
        if event_type not in (EventType.SUBSTITUTION, EventType.SUBSTITUTION.value):
            continue
        if sub.player_id is not None:
            subs_out.setdefault(sub.player_id, sub)
        if sub.second_player_id is not None:
            subs_in.setdefault(sub.second_player_id, sub)
    return subs_out, subs_in


def compute_minutes(
    assignments: Iterable[Any],
    substitutions: Iterable[Any],
    halves: HalfLengths,
) -> dict[int, MinutesResult]:
    """
    Minuti giocati per ogni riga di formazione a partita conclusa.
    I panchinari mai entrati non compaiono nel risultato (riga non toccata).
    """
    subs_out, subs_in = _substitution_index(substitutions)
    results: dict[int, MinutesResult] = {}

    for row in assignments:
        player_id = row.player_id
        status = _status_value(row.status)
        sub_out = subs_out.get(player_id)
        sub_in = subs_in.get(player_id)

        if status == FormationStatus.STARTER.value and sub_in is None:
            if sub_out is None:
                played = halves.total
            else:
                played = absolute_minute(sub_out.half, sub_out.minute, halves)
            results[player_id] = MinutesResult(player_id, _clamp(played, halves.total))
        elif sub_in is not None:
            # Subentrato (riga PANCHINA, o gia' promossa a TITOLARE dal flusso live).
            entered = _clamp(absolute_minute(sub_in.half, sub_in.minute, halves), halves.total)
            results[player_id] = MinutesResult(
                player_id,
                _clamp(halves.total - entered, halves.total),
                minute_entered=entered,
            )

    return results


def finalize_on_pitch(
    assignments: Iterable[Any],
    current_minute: int,
    halves: HalfLengths,
) -> dict[int, MinutesResult]:
    """
    Fine partita live: ogni TITOLARE ancora in campo (minuti NULL) esce
    al minuto corrente del cronometro, limitato alla durata totale.
    Chi ha gia' minuti registrati (anche 0) e' uscito e non viene toccato.
    """
    results: dict[int, MinutesResult] = {}
    for row in assignments:
        if _status_value(row.status) != FormationStatus.STARTER.value:
            continue
        if row.minutes_played is not None:
            continue
        results[row.player_id] = MinutesResult(
            row.player_id,
            minutes_for_exit(row.minute_entered, current_minute, halves.total),
            minute_entered=row.minute_entered,
        )
    return results
