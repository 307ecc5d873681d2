"""
Valori di dominio condivisi da modelli, schemi e logica di partita.
I valori stringa sono quelli salvati nel database.
"""

from enum import Enum

NOMINAL_HALF_MINUTES = 45
MAX_EXTRA_TIME = 15
STARTING_ELEVEN = 11
UNKNOWN_PLAYER_NAME = "Sconosciuto"

# Giorni di allenamento (date.weekday()): lunedi, mercoledi, giovedi.
TRAINING_WEEKDAYS = (0, 2, 3)


class FormationStatus(str, Enum):
    STARTER = "TITOLARE"
    BENCH = "PANCHINA"


class EventType(str, Enum):
    GOAL = "Gol"
    ASSIST = "Assist"
    SUBSTITUTION = "Sostituzione"
    YELLOW_CARD = "Cartellino Giallo"
    RED_CARD = "Cartellino Rosso"
    INJURY = "Infortunio"
    PENALTY = "Rigore"
    CORNER = "Corner"
    OFFSIDE = "Fuorigioco"
    NOTE = "Nota"
    GOAL_CONCEDED = "Goal Subito"
    RATING = "Punteggio"


class AttendanceStatus(str, Enum):
    PRESENT = "Presente"
    ABSENT = "Assente"
    INJURED = "Infortunato"


class ConvocationStatus(str, Enum):
    AVAILABLE = "Convocabile"
    AVAILABLE_ONE_TRAINING = "Convocabile solo 1 allenamento"
    INJURED = "Infortunato"
    SENT_OFF = "Espulso"
    REHABILITATED = "Riabilitato"
    REHABILITATED_INJURED = "Riabilitato Infortunato"
    NOT_CALLED_TECHNICAL = "NC scelta tecnica"
    NOT_CALLED_ABSENCES = "NC per assenze"
    NOT_CALLED_CLUB = "NC per motivi societari"


# Stati che escludono automaticamente il giocatore dalla convocazione.
EXCLUDING_CONVOCATION_STATUSES = frozenset({ConvocationStatus.INJURED, ConvocationStatus.SENT_OFF})


class MatchPhase(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    FIRST_HALF = "FIRST_HALF"
    HALF_TIME = "HALF_TIME"
    SECOND_HALF = "SECOND_HALF"
    FINISHED = "FINISHED"
