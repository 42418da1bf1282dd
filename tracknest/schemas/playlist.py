
# ============================================================================
# FILE: tracknest/schemas/playlist.py
# ============================================================================
from typing import Optional
from datetime import datetime
from tracknest.schemas.base import CamelModel

class PlaylistCreate(CamelModel):
    """Schema for creating a playlist"""
    name: Optional[str] = None

class PlaylistResponse(CamelModel):
    """Schema for one of the caller's playlists"""
    name: str
    creation_date: datetime

class PublicPlaylistResponse(PlaylistResponse):
    """Schema for the public playlist directory"""
    username: str
