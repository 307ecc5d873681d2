from squadra.models.convocation import Convocation
from squadra.models.formation_assignment import FormationAssignment
from squadra.models.match_event import MatchEvent
from squadra.models.match_session import MatchSession
from squadra.models.player import Player
from squadra.models.team import Team
from squadra.models.training_attendance import TrainingAttendance

__all__ = [
    "Team",
    "Player",
    "Convocation",
    "MatchSession",
    "FormationAssignment",
    "MatchEvent",
    "TrainingAttendance",
]
