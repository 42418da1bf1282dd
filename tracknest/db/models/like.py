
# ============================================================================
# FILE: tracknest/db/models/like.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, ForeignKey, ForeignKeyConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from tracknest.db.base import Base

class UserLike(Base):
    """A user's like of a song; at most one row per (user, song)"""
    __tablename__ = "user_likes"
    __table_args__ = (
        ForeignKeyConstraint(
            ["song_title", "artist_name", "album_title"],
            ["songs.song_title", "songs.artist_name", "songs.album_title"],
        ),
    )

    username = Column(
        String(255), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True
    )
    song_title = Column(String(255), primary_key=True)
    artist_name = Column(String(255), primary_key=True)
    album_title = Column(String(255), primary_key=True)
    like_date = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="likes")
