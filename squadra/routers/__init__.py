from squadra.routers.admin import router as admin_router
from squadra.routers.attendances import router as attendances_router
from squadra.routers.convocations import router as convocations_router
from squadra.routers.formations import router as formations_router
from squadra.routers.health import router as health_router
from squadra.routers.match_events import router as match_events_router
from squadra.routers.matches import router as matches_router
from squadra.routers.players import router as players_router
from squadra.routers.stats import router as stats_router
from squadra.routers.teams import router as teams_router

__all__ = [
    "health_router",
    "players_router",
    "teams_router",
    "matches_router",
    "match_events_router",
    "formations_router",
    "attendances_router",
    "convocations_router",
    "admin_router",
    "stats_router",
]
