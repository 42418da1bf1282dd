# ============================================================================
# FILE: tracknest/services/music_service.py
# ============================================================================
from typing import List, Dict, Optional
from sqlalchemy import and_, exists
from sqlalchemy.orm import Session, Query
from tracknest.db.models.catalog import Song, Artist, Album, Genre, Classification
from tracknest.db.models.like import UserLike
from tracknest.schemas.music import SongKey
import logging

logger = logging.getLogger(__name__)

SORT_ORDERS = ("ASC", "DESC")
DEFAULT_SORT_ORDER = "DESC"

def rows_to_dicts(query: Query) -> List[Dict]:
    """Materialize a column query as plain dicts keyed by column label"""
    return [dict(row._mapping) for row in query.all()]

def song_columns():
    """Columns every song listing returns"""
    return (Song.song_title, Song.artist_name, Song.album_title, Song.duration, Song.plays)

def song_matches(model) -> list:
    """Join condition between `model`'s song triple and Song"""
    return [
        model.song_title == Song.song_title,
        model.artist_name == Song.artist_name,
        model.album_title == Song.album_title,
    ]

def normalize_sort_order(sort_order: Optional[str]) -> str:
    """ASC or DESC (case-insensitive); anything else falls back to DESC"""
    if sort_order and sort_order.upper() in SORT_ORDERS:
        return sort_order.upper()
    return DEFAULT_SORT_ORDER

class MusicService:
    """Service layer for catalog lookups and search"""

    def get_song(self, db: Session, key: SongKey) -> Optional[Song]:
        """Look up a catalog song by its natural key"""
        return db.query(Song).filter(
            Song.song_title == key.song_title,
            Song.artist_name == key.artist_name,
            Song.album_title == key.album_title,
        ).first()

    def search_songs(
        self,
        db: Session,
        song_title: Optional[str] = None,
        artist_name: Optional[str] = None,
        album_title: Optional[str] = None,
        genre_name: Optional[str] = None,
        sort_order: Optional[str] = None,
        liked_by: Optional[str] = None,
    ) -> List[Dict]:
        """
        Search the catalog with optional substring filters

        Args:
            song_title, artist_name, album_title, genre_name: case-insensitive
                substring filters, ignored when empty
            sort_order: ASC or DESC by play count (default DESC)
            liked_by: restrict to songs liked by this username

        Returns:
            List of song dicts including genre_name, all matches, unpaginated
        """
        query = (
            db.query(
                Song.song_title,
                Artist.artist_name,
                Album.album_title,
                Genre.genre_name,
                Song.plays,
                Song.duration,
            )
            .select_from(Song)
            .join(Artist, Song.artist_name == Artist.artist_name)
            .join(Album, and_(Song.album_title == Album.album_title, Song.artist_name == Album.artist_name))
            .join(Classification, and_(*song_matches(Classification)))
            .join(Genre, Classification.genre_name == Genre.genre_name)
        )

        filters = (
            (Song.song_title, song_title),
            (Artist.artist_name, artist_name),
            (Album.album_title, album_title),
            (Genre.genre_name, genre_name),
        )
        for column, value in filters:
            if value:
                query = query.filter(column.ilike(f"%{value}%"))

        if liked_by is not None:
            query = query.filter(
                exists().where(UserLike.username == liked_by, *song_matches(UserLike))
            )

        if normalize_sort_order(sort_order) == "ASC":
            query = query.order_by(Song.plays.asc())
        else:
            query = query.order_by(Song.plays.desc())

        results = rows_to_dicts(query)
        logger.info(f"Search returned {len(results)} songs")
        return results

# Create singleton instance
music_service = MusicService()
