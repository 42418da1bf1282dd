# ============================================================================
# FILE: tracknest/api/v1/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from tracknest.db.session import get_db
from tracknest.api.dependencies import require_current_user
from tracknest.schemas.playlist import PlaylistCreate, PlaylistResponse, PublicPlaylistResponse
from tracknest.schemas.music import SongInfo, SongKey, SongRef
from tracknest.schemas.user import MessageResponse
from tracknest.services.playlist_service import playlist_service
from tracknest.core.exceptions import TrackNestError, BadRequest, ServerError
from tracknest.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _require_song_key(song_data: SongRef) -> SongKey:
    key = song_data.key()
    if key is None:
        raise BadRequest("Please provide songTitle, artistName, and albumTitle.")
    return key

@router.get("", response_model=List[PlaylistResponse])
async def get_my_playlists(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Get all playlists for the current user
    Requires authentication
    """
    try:
        return playlist_service.get_user_playlists(db, current_user.username)
    except Exception as e:
        logger.error(f"List playlists error: {e}")
        raise ServerError("Server error while fetching playlists. Please try again later.")

@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_playlist(
    playlist_data: PlaylistCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Create a new playlist
    Requires authentication
    """
    if not playlist_data.name:
        raise BadRequest("Please provide a playlist name.")

    try:
        playlist_service.create_playlist(db, current_user.username, playlist_data.name)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Create playlist error: {e}")
        raise ServerError("Server error while creating playlist. Please try again later.")
    return {"message": "Playlist created successfully."}

@router.get("/all", response_model=List[PublicPlaylistResponse])
async def get_all_playlists(db: Session = Depends(get_db)):
    """
    Get every playlist with its owner
    Public
    """
    try:
        return playlist_service.get_all_playlists(db)
    except Exception as e:
        logger.error(f"List all playlists error: {e}")
        raise ServerError("Server error while fetching playlists. Please try again later.")

@router.delete("/{name}", response_model=MessageResponse)
async def delete_playlist(
    name: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Delete a playlist and its songs
    Requires authentication and ownership
    """
    try:
        playlist_service.delete_playlist(db, name, current_user.username)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Delete playlist error: {e}")
        raise ServerError("Server error while deleting playlist. Please try again later.")
    return {"message": "Playlist deleted successfully."}

@router.post("/{name}/songs", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def add_song_to_playlist(
    name: str,
    song_data: SongRef,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Add a song to a playlist
    Requires authentication and ownership
    """
    key = _require_song_key(song_data)
    try:
        playlist_service.add_song_to_playlist(db, name, current_user.username, key)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Add song error: {e}")
        raise ServerError("Server error while adding song to playlist. Please try again later.")
    return {"message": "Song added to playlist successfully."}

@router.delete("/{name}/songs", response_model=MessageResponse)
async def remove_song_from_playlist(
    name: str,
    song_data: SongRef,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Remove a song from a playlist
    Requires authentication and ownership
    """
    key = _require_song_key(song_data)
    try:
        playlist_service.remove_song_from_playlist(db, name, current_user.username, key)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Remove song error: {e}")
        raise ServerError("Server error while removing song from playlist. Please try again later.")
    return {"message": "Song removed from playlist successfully."}

@router.get("/{name}/songs", response_model=List[SongInfo])
async def get_my_playlist_songs(
    name: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Get the songs of one of the current user's playlists
    Requires authentication
    """
    try:
        return playlist_service.get_playlist_songs(db, name, current_user.username)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Playlist songs error: {e}")
        raise ServerError("Server error while fetching songs. Please try again later.")

@router.get("/{username}/{name}/songs", response_model=List[SongInfo])
async def get_public_playlist_songs(
    username: str,
    name: str,
    db: Session = Depends(get_db)
):
    """
    Get the songs of any user's playlist
    Public
    """
    try:
        return playlist_service.get_playlist_songs(db, name, username)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Public playlist songs error: {e}")
        raise ServerError("Server error while fetching songs. Please try again later.")
