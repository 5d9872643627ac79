from forestshare.api.games import router as games_router
from forestshare.api.health import router as health_router

__all__ = [
    "games_router",
    "health_router",
]
