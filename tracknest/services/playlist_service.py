# ============================================================================
# FILE: tracknest/services/playlist_service.py
# ============================================================================
from typing import List, Dict, Optional
from datetime import datetime
from sqlalchemy import and_
from sqlalchemy.orm import Session
from tracknest.db.models.playlist import Playlist, Inclusion
from tracknest.db.models.catalog import Song
from tracknest.core.exceptions import Conflict, NotFound
from tracknest.schemas.music import SongKey
from tracknest.services.music_service import music_service, rows_to_dicts, song_columns, song_matches
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """Service layer for playlist operations"""

    def create_playlist(self, db: Session, username: str, name: str) -> Playlist:
        """Create a new playlist for a user"""
        if self.get_playlist(db, name, username):
            raise Conflict("Playlist with this name already exists.")

        try:
            playlist = Playlist(name=name, username=username, creation_date=datetime.utcnow())
            db.add(playlist)
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist created: {name!r} for user {username}")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise

    def get_user_playlists(self, db: Session, username: str) -> List[Playlist]:
        """Get all playlists for a user"""
        return db.query(Playlist).filter(Playlist.username == username).all()

    def get_all_playlists(self, db: Session) -> List[Playlist]:
        """Get every playlist of every user"""
        return db.query(Playlist).all()

    def get_playlist(self, db: Session, name: str, username: str) -> Optional[Playlist]:
        """Get a specific playlist (verify ownership)"""
        return db.query(Playlist).filter(
            Playlist.name == name,
            Playlist.username == username
        ).first()

    def delete_playlist(self, db: Session, name: str, username: str) -> None:
        """Delete a playlist and its inclusions"""
        playlist = self.get_playlist(db, name, username)
        if not playlist:
            raise NotFound("Playlist not found.")

        try:
            db.delete(playlist)
            db.commit()
            logger.info(f"Playlist deleted: {name!r} of {username}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise

    def _get_inclusion(self, db: Session, name: str, username: str, key: SongKey) -> Optional[Inclusion]:
        return db.query(Inclusion).filter(
            Inclusion.playlist_name == name,
            Inclusion.username == username,
            Inclusion.song_title == key.song_title,
            Inclusion.artist_name == key.artist_name,
            Inclusion.album_title == key.album_title,
        ).first()

    def add_song_to_playlist(self, db: Session, name: str, username: str, key: SongKey) -> Inclusion:
        """Add a catalog song to one of the user's playlists"""
        if not self.get_playlist(db, name, username):
            raise NotFound("Playlist not found.")
        if not music_service.get_song(db, key):
            raise NotFound("Song not found.")
        if self._get_inclusion(db, name, username, key):
            raise Conflict("Song is already in the playlist.")

        try:
            inclusion = Inclusion(playlist_name=name, username=username, **key._asdict())
            db.add(inclusion)
            db.commit()
            logger.info(f"Song added to playlist {name!r}: {key.song_title}")
            return inclusion
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding song to playlist: {e}")
            raise

    def remove_song_from_playlist(self, db: Session, name: str, username: str, key: SongKey) -> None:
        """Remove a song from one of the user's playlists"""
        if not self.get_playlist(db, name, username):
            raise NotFound("Playlist not found.")

        inclusion = self._get_inclusion(db, name, username, key)
        if not inclusion:
            raise NotFound("Song not found in the playlist.")

        try:
            db.delete(inclusion)
            db.commit()
            logger.info(f"Song removed from playlist {name!r}: {key.song_title}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing song from playlist: {e}")
            raise

    def get_playlist_songs(self, db: Session, name: str, username: str) -> List[Dict]:
        """List the songs of a playlist identified by (name, owner)"""
        if not self.get_playlist(db, name, username):
            raise NotFound("Playlist not found.")

        query = (
            db.query(*song_columns())
            .select_from(Inclusion)
            .join(Song, and_(*song_matches(Inclusion)))
            .filter(Inclusion.playlist_name == name, Inclusion.username == username)
        )
        return rows_to_dicts(query)

# Create singleton instance
playlist_service = PlaylistService()
