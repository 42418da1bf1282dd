# ============================================================================
# FILE: tracknest/services/recommendation_service.py
# ============================================================================
from typing import List, Dict
from sqlalchemy import and_, distinct, exists, func, select
from sqlalchemy.orm import Session
from tracknest.db.models.catalog import Song, Classification
from tracknest.db.models.like import UserLike
from tracknest.services.music_service import rows_to_dicts, song_matches
import logging

logger = logging.getLogger(__name__)

ARTIST_WEIGHT = 3
ALBUM_WEIGHT = 2
GENRE_WEIGHT = 1

class RecommendationService:
    """
    Weighted co-occurrence recommender over the user's likes.

    A song scores ARTIST_WEIGHT if its artist is among the liked artists,
    ALBUM_WEIGHT if its album title is among the liked album titles and
    GENRE_WEIGHT if its genre is among the liked genres. Each dimension is
    a COUNT(DISTINCT ...) over the matching liked values. Already liked songs
    and songs scoring 0 are excluded. Computed from scratch on every call.
    """

    def get_recommendations(self, db: Session, username: str) -> List[Dict]:
        liked_artists = (
            select(UserLike.artist_name)
            .where(UserLike.username == username)
            .distinct()
            .subquery("liked_artists")
        )
        liked_albums = (
            select(UserLike.album_title)
            .where(UserLike.username == username)
            .distinct()
            .subquery("liked_albums")
        )
        liked_genres = (
            select(Classification.genre_name)
            .join(UserLike, and_(
                UserLike.song_title == Classification.song_title,
                UserLike.artist_name == Classification.artist_name,
                UserLike.album_title == Classification.album_title,
            ))
            .where(UserLike.username == username)
            .distinct()
            .subquery("liked_genres")
        )

        score_expr = (
            ARTIST_WEIGHT * func.count(distinct(liked_artists.c.artist_name))
            + ALBUM_WEIGHT * func.count(distinct(liked_albums.c.album_title))
            + GENRE_WEIGHT * func.count(distinct(liked_genres.c.genre_name))
        )
        score = score_expr.label("score")

        already_liked = exists().where(UserLike.username == username, *song_matches(UserLike))

        query = (
            db.query(
                Song.song_title,
                Song.artist_name,
                Song.album_title,
                Song.duration,
                Song.plays,
                Classification.genre_name,
                score,
            )
            .select_from(Song)
            .join(Classification, and_(*song_matches(Classification)))
            .outerjoin(liked_artists, Song.artist_name == liked_artists.c.artist_name)
            .outerjoin(liked_albums, Song.album_title == liked_albums.c.album_title)
            .outerjoin(liked_genres, Classification.genre_name == liked_genres.c.genre_name)
            .filter(~already_liked)
            .group_by(
                Song.song_title,
                Song.artist_name,
                Song.album_title,
                Song.duration,
                Song.plays,
                Classification.genre_name,
            )
            .having(score_expr > 0)
            .order_by(score.desc(), Song.plays.desc())
        )

        results = rows_to_dicts(query)
        logger.info(f"Computed {len(results)} recommendations for {username}")
        return results

# Create singleton instance
recommendation_service = RecommendationService()
