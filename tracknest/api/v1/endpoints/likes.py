# ============================================================================
# FILE: tracknest/api/v1/endpoints/likes.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from tracknest.db.session import get_db
from tracknest.api.dependencies import require_current_user
from tracknest.schemas.music import SongInfo, SongRef
from tracknest.schemas.user import MessageResponse
from tracknest.services.like_service import like_service
from tracknest.core.exceptions import TrackNestError, BadRequest, ServerError
from tracknest.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[SongInfo])
async def get_liked_songs(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Songs liked by the current user"""
    try:
        return like_service.get_liked_songs(db, current_user.username)
    except Exception as e:
        logger.error(f"Liked songs error: {e}")
        raise ServerError("Server error while fetching liked songs. Please try again later.")

@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def like_song(
    song_data: SongRef,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    key = song_data.key()
    if key is None:
        raise BadRequest("Please provide songTitle, artistName, and albumTitle.")

    try:
        like_service.like_song(db, current_user.username, key)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Like error: {e}")
        raise ServerError("Server error while liking song. Please try again later.")
    return {"message": "Song liked successfully."}

@router.delete("", response_model=MessageResponse)
async def unlike_song(
    song_data: SongRef,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    key = song_data.key()
    if key is None:
        raise BadRequest("Please provide songTitle, artistName, and albumTitle.")

    try:
        like_service.unlike_song(db, current_user.username, key)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Unlike error: {e}")
        raise ServerError("Server error while unliking song. Please try again later.")
    return {"message": "Song unliked successfully."}
