"""
Aggregazioni statistiche ricalcolate ad ogni lettura (nessuna cache).

Input: collezioni gia' caricate (giocatori, eventi, formazioni, partite,
presenze). Output: dataclass pronte per gli schemi di risposta.
NON accede al DB.

Gol subiti del portiere: approssimazione voluta. Tutti i gol avversari di
una partita sono attribuiti al portiere se ha giocato almeno un minuto,
indipendentemente dal minuto del gol.
"""

import calendar
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Any, Iterable

from squadra.analytics.timeline import sort_events
from squadra.constants import (
    TRAINING_WEEKDAYS,
    UNKNOWN_PLAYER_NAME,
    AttendanceStatus,
    EventType,
    FormationStatus,
)

GOALKEEPER_ROLE_MARKERS = ("portiere", "por")

DAY_NAMES = ("Lunedì", "Martedì", "Mercoledì", "Giovedì", "Venerdì", "Sabato", "Domenica")
MONTH_ABBREVIATIONS = ("gen", "feb", "mar", "apr", "mag", "giu", "lug", "ago", "set", "ott", "nov", "dic")
WEEKLY_SLOTS = ("monday", "wednesday", "thursday")


@dataclass
class MatchRecord:
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def goal_diff(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def points(self) -> int:
        return self.wins * 3 + self.draws


@dataclass
class PlayerStats:
    player_id: int
    name: str
    role: str | None = None
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    minutes: int = 0
    convocations: int = 0
    starts: int = 0
    bench: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_conceded: int = 0
    attendance_present: int = 0
    attendance_absent: int = 0
    attendance_injured: int = 0


@dataclass
class AnnotatedEvent:
    id: int | None
    event_type: str
    minute: int
    half: int | None
    player_id: int | None
    player_name: str
    second_player_id: int | None = None
    second_player_name: str | None = None
    description: str | None = None


@dataclass
class MatchReport:
    match: Any
    goals: list[AnnotatedEvent] = field(default_factory=list)
    red_cards: list[AnnotatedEvent] = field(default_factory=list)
    substitutions: list[AnnotatedEvent] = field(default_factory=list)

    @property
    def totals(self) -> dict[str, int]:
        return {
            "goals": len(self.goals),
            "red_cards": len(self.red_cards),
            "substitutions": len(self.substitutions),
        }


@dataclass
class TrainingSessionSummary:
    date: str
    presenti: int = 0
    assenti: int = 0
    infortunati: int = 0
    totale: int = 0


def _key(value: Any) -> Any:
    # Enum con mixin str ha hash diverso dal suo valore: normalizza le chiavi dei Counter.
    return value.value if isinstance(value, Enum) else value


def is_goalkeeper(role: str | None) -> bool:
    if not role:
        return False
    lowered = role.lower()
    return any(marker in lowered for marker in GOALKEEPER_ROLE_MARKERS)


def match_outcome(home_score: int | None, away_score: int | None) -> str | None:
    """'W' | 'D' | 'L' dal nostro punto di vista; None se il punteggio manca."""
    if home_score is None or away_score is None:
        return None
    if home_score > away_score:
        return "W"
    if home_score < away_score:
        return "L"
    return "D"


def team_record(matches: Iterable[Any]) -> MatchRecord:
    """Bilancio squadra sulle partite con punteggio registrato."""
    record = MatchRecord()
    for m in matches:
        outcome = match_outcome(m.home_score, m.away_score)
        if outcome is None:
            continue
        record.played += 1
        record.goals_for += m.home_score
        record.goals_against += m.away_score
        if outcome == "W":
            record.wins += 1
        elif outcome == "D":
            record.draws += 1
        else:
            record.losses += 1
    return record


def _player_name(players_by_id: dict[int, Any], player_id: int | None) -> str:
    player = players_by_id.get(player_id) if player_id is not None else None
    if player is None:
        return UNKNOWN_PLAYER_NAME
    return f"{player.last_name} {player.first_name}"


def player_stats(
    players: Iterable[Any],
    events: Iterable[Any],
    formations: Iterable[Any],
    matches: Iterable[Any],
    attendances: Iterable[Any] = (),
) -> list[PlayerStats]:
    """Una riga per giocatore, nell'ordine in cui sono passati."""
    matches_by_id = {m.id: m for m in matches}

    event_counts: dict[int, Counter] = defaultdict(Counter)
    for e in events:
        if e.player_id is not None:
            event_counts[e.player_id][_key(e.event_type)] += 1

    formations_by_player: dict[int, list[Any]] = defaultdict(list)
    for f in formations:
        formations_by_player[f.player_id].append(f)

    attendance_counts: dict[int, Counter] = defaultdict(Counter)
    for a in attendances:
        attendance_counts[a.player_id][_key(a.status)] += 1

    rows = []
    for p in players:
        counts = event_counts[p.id]
        att = attendance_counts[p.id]
        stats = PlayerStats(
            player_id=p.id,
            name=f"{p.last_name} {p.first_name}",
            role=p.role,
            goals=counts[EventType.GOAL.value],
            assists=counts[EventType.ASSIST.value],
            yellow_cards=counts[EventType.YELLOW_CARD.value],
            red_cards=counts[EventType.RED_CARD.value],
            attendance_present=att[AttendanceStatus.PRESENT.value],
            attendance_absent=att[AttendanceStatus.ABSENT.value],
            attendance_injured=att[AttendanceStatus.INJURED.value],
        )
        goalkeeper = is_goalkeeper(p.role)

        for f in formations_by_player[p.id]:
            stats.convocations += 1
            stats.minutes += f.minutes_played or 0
            if f.status == FormationStatus.STARTER:
                stats.starts += 1
            elif f.status == FormationStatus.BENCH:
                stats.bench += 1

            match = matches_by_id.get(f.match_id)
            if match is None:
                continue
            outcome = match_outcome(match.home_score, match.away_score)
            if outcome == "W":
                stats.wins += 1
            elif outcome == "D":
                stats.draws += 1
            elif outcome == "L":
                stats.losses += 1

            if goalkeeper and match.away_score and (f.minutes_played or 0) > 0:
                stats.goals_conceded += match.away_score

        rows.append(stats)
    return rows


def match_report(match: Any, events: Iterable[Any], players: Iterable[Any]) -> MatchReport:
    """Gol, espulsioni e sostituzioni di una partita con i nomi risolti."""
    players_by_id = {p.id: p for p in players}
    report = MatchReport(match=match)

    for e in sort_events(events):
        annotated = AnnotatedEvent(
            id=getattr(e, "id", None),
            event_type=_key(e.event_type),
            minute=e.minute,
            half=e.half,
            player_id=e.player_id,
            player_name=_player_name(players_by_id, e.player_id),
            description=e.description,
        )
        if e.event_type == EventType.GOAL:
            report.goals.append(annotated)
        elif e.event_type == EventType.RED_CARD:
            report.red_cards.append(annotated)
        elif e.event_type == EventType.SUBSTITUTION:
            annotated.second_player_id = e.second_player_id
            annotated.second_player_name = _player_name(players_by_id, e.second_player_id)
            report.substitutions.append(annotated)

    return report


def training_sessions(attendances: Iterable[Any]) -> list[TrainingSessionSummary]:
    """Riepilogo per data di allenamento, dalla piu' recente."""
    grouped: dict[str, TrainingSessionSummary] = {}
    for a in attendances:
        summary = grouped.setdefault(a.date, TrainingSessionSummary(date=a.date))
        summary.totale += 1
        if a.status == AttendanceStatus.PRESENT:
            summary.presenti += 1
        elif a.status == AttendanceStatus.ABSENT:
            summary.assenti += 1
        elif a.status == AttendanceStatus.INJURED:
            summary.infortunati += 1
    return sorted(grouped.values(), key=lambda s: s.date, reverse=True)


# --- Planner presenze ---------------------------------------------------------


@dataclass
class TrainingDay:
    date: str
    day_name: str
    day_num: int
    month_abbr: str


@dataclass
class PlannerRow:
    """Riga del planner: anagrafica essenziale e stato per giorno di allenamento."""
    id: int
    first_name: str
    last_name: str
    number: int | None
    role: str | None
    attendances: dict[str, str | None]
    total_presenze: int = 0
    total_assenze: int = 0


@dataclass
class WeeklyPlanner:
    week_start: str
    days: dict[str, str]
    players: list[PlannerRow]


@dataclass
class MonthlyPlanner:
    year_month: str
    training_days: list[TrainingDay]
    players: list[PlannerRow]


@dataclass
class RecentAttendance:
    player_id: int
    presenti_count: int = 0
    infortunato_count: int = 0


def week_training_days(day: date) -> list[date]:
    """Lunedi', mercoledi' e giovedi' della settimana di day (domenica chiude la settimana)."""
    monday = day - timedelta(days=day.weekday())
    return [monday + timedelta(days=wd) for wd in TRAINING_WEEKDAYS]


def month_training_days(year: int, month: int) -> list[TrainingDay]:
    _, days_in_month = calendar.monthrange(year, month)
    result = []
    for day_num in range(1, days_in_month + 1):
        day = date(year, month, day_num)
        if day.weekday() in TRAINING_WEEKDAYS:
            result.append(TrainingDay(
                date=day.isoformat(),
                day_name=DAY_NAMES[day.weekday()],
                day_num=day_num,
                month_abbr=MONTH_ABBREVIATIONS[month - 1],
            ))
    return result


def _status_by_player_and_date(attendances: Iterable[Any], dates: Iterable[str]) -> dict[tuple[int, str], str]:
    wanted = set(dates)
    return {(a.player_id, a.date): _key(a.status) for a in attendances if a.date in wanted}


def _planner_row(player: Any, statuses: dict[str, str | None]) -> PlannerRow:
    values = list(statuses.values())
    return PlannerRow(
        id=player.id,
        first_name=player.first_name,
        last_name=player.last_name,
        number=player.number,
        role=player.role,
        attendances=statuses,
        total_presenze=values.count(AttendanceStatus.PRESENT.value),
        total_assenze=values.count(AttendanceStatus.ABSENT.value),
    )


def weekly_planner(players: Iterable[Any], attendances: Iterable[Any], day: date) -> WeeklyPlanner:
    """Griglia settimanale: per ogni giocatore lo stato di lunedi', mercoledi', giovedi'."""
    days = dict(zip(WEEKLY_SLOTS, (d.isoformat() for d in week_training_days(day))))
    by_key = _status_by_player_and_date(attendances, days.values())
    rows = [
        _planner_row(p, {slot: by_key.get((p.id, d)) for slot, d in days.items()})
        for p in players
    ]
    return WeeklyPlanner(week_start=days["monday"], days=days, players=rows)


def monthly_planner(players: Iterable[Any], attendances: Iterable[Any], year: int, month: int) -> MonthlyPlanner:
    """
    Griglia mensile: tutti i giorni di allenamento del mese, stato per data e
    totali di presenze e assenze (gli infortuni non contano in nessuno dei due).
    """
    training_days = month_training_days(year, month)
    dates = [d.date for d in training_days]
    by_key = _status_by_player_and_date(attendances, dates)
    rows = [_planner_row(p, {d: by_key.get((p.id, d)) for d in dates}) for p in players]
    return MonthlyPlanner(year_month=f"{year:04d}-{month:02d}", training_days=training_days, players=rows)


def recent_attendance(
    players: Iterable[Any],
    attendances: Iterable[Any],
    today: date,
    days: int = 7,
) -> list[RecentAttendance]:
    """Presenze e infortuni per giocatore negli ultimi `days` giorni, oggi compreso."""
    since = (today - timedelta(days=days - 1)).isoformat()
    until = today.isoformat()
    result = {p.id: RecentAttendance(player_id=p.id) for p in players}
    for a in attendances:
        row = result.get(a.player_id)
        if row is None or not since <= a.date <= until:
            continue
        if a.status == AttendanceStatus.PRESENT:
            row.presenti_count += 1
        elif a.status == AttendanceStatus.INJURED:
            row.infortunato_count += 1
    return list(result.values())
