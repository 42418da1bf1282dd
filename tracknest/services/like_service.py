# ============================================================================
# FILE: tracknest/services/like_service.py
# ============================================================================
from typing import List, Dict, Optional
from datetime import datetime
from sqlalchemy import and_
from sqlalchemy.orm import Session
from tracknest.db.models.like import UserLike
from tracknest.db.models.catalog import Song
from tracknest.core.exceptions import Conflict, NotFound
from tracknest.schemas.music import SongKey
from tracknest.services.music_service import music_service, rows_to_dicts, song_columns, song_matches
import logging

logger = logging.getLogger(__name__)

class LikeService:
    """Service layer for liking and unliking songs"""

    def get_like(self, db: Session, username: str, key: SongKey) -> Optional[UserLike]:
        return db.query(UserLike).filter(
            UserLike.username == username,
            UserLike.song_title == key.song_title,
            UserLike.artist_name == key.artist_name,
            UserLike.album_title == key.album_title,
        ).first()

    def like_song(self, db: Session, username: str, key: SongKey) -> UserLike:
        """
        Record a like. The existence check and the insert are separate
        statements; two concurrent likes can both pass the check and the
        primary key rejects the second insert.
        """
        if not music_service.get_song(db, key):
            raise NotFound("Song not found.")
        if self.get_like(db, username, key):
            raise Conflict("Song is already liked.")

        try:
            like = UserLike(username=username, like_date=datetime.utcnow(), **key._asdict())
            db.add(like)
            db.commit()
            logger.info(f"{username} liked {key.song_title}")
            return like
        except Exception as e:
            db.rollback()
            logger.error(f"Error liking song: {e}")
            raise

    def unlike_song(self, db: Session, username: str, key: SongKey) -> None:
        like = self.get_like(db, username, key)
        if not like:
            raise NotFound("Song is not in your liked songs.")

        try:
            db.delete(like)
            db.commit()
            logger.info(f"{username} unliked {key.song_title}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error unliking song: {e}")
            raise

    def get_liked_songs(self, db: Session, username: str) -> List[Dict]:
        """All songs liked by the user"""
        query = (
            db.query(*song_columns())
            .select_from(UserLike)
            .join(Song, and_(*song_matches(UserLike)))
            .filter(UserLike.username == username)
        )
        return rows_to_dicts(query)

# Create singleton instance
like_service = LikeService()
