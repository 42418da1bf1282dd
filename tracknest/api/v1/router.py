# ============================================================================
# FILE: tracknest/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from tracknest.api.v1.endpoints import user, profile, music, playlist, likes, charts, recommendations

api_router = APIRouter()

# Include all endpoint routers; paths are flat under the /api prefix
api_router.include_router(user.router, tags=["user"])
api_router.include_router(profile.router, tags=["profile"])
api_router.include_router(music.router, tags=["music"])
api_router.include_router(playlist.router, prefix="/playlists", tags=["playlist"])
api_router.include_router(likes.router, prefix="/likes", tags=["likes"])
api_router.include_router(charts.router, prefix="/top-charts", tags=["charts"])
api_router.include_router(recommendations.router, prefix="/recommendations", tags=["recommendations"])
