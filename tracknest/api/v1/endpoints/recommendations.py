# ============================================================================
# FILE: tracknest/api/v1/endpoints/recommendations.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from tracknest.db.session import get_db
from tracknest.api.dependencies import require_current_user
from tracknest.schemas.music import Recommendation
from tracknest.services.recommendation_service import recommendation_service
from tracknest.core.exceptions import ServerError
from tracknest.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[Recommendation])
async def get_recommendations(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Songs scored against the current user's likes
    Requires authentication
    """
    try:
        return recommendation_service.get_recommendations(db, current_user.username)
    except Exception as e:
        logger.error(f"Recommendations error: {e}")
        raise ServerError("Server error while fetching recommendations. Please try again later.")
