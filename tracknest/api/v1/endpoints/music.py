
# ============================================================================
# FILE: tracknest/api/v1/endpoints/music.py
# ============================================================================
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from tracknest.db.session import get_db
from tracknest.api.dependencies import get_current_user
from tracknest.schemas.music import SearchResult
from tracknest.services.music_service import music_service
from tracknest.core.exceptions import Unauthorized, ServerError
from tracknest.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/search", response_model=List[SearchResult])
async def search_songs(
    song_title: Optional[str] = Query(None, alias="songTitle", description="Substring of the song title"),
    artist_name: Optional[str] = Query(None, alias="artistName", description="Substring of the artist name"),
    album_title: Optional[str] = Query(None, alias="albumTitle", description="Substring of the album title"),
    genre_name: Optional[str] = Query(None, alias="genreName", description="Substring of the genre name"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="ASC or DESC by play count"),
    liked: Optional[str] = Query(None, description="\"true\" keeps only songs liked by the caller"),
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user)
):
    """
    Search the catalog with any combination of filters
    Available to all users; filtering liked songs requires authentication
    """
    liked_only = liked == "true"
    if liked_only and current_user is None:
        raise Unauthorized("Authentication required to filter liked songs.")

    try:
        return music_service.search_songs(
            db,
            song_title=song_title,
            artist_name=artist_name,
            album_title=album_title,
            genre_name=genre_name,
            sort_order=sort_order,
            liked_by=current_user.username if liked_only else None,
        )
    except Exception as e:
        logger.error(f"Search error: {e}")
        raise ServerError("Server error during search.")
