
# ============================================================================
# FILE: tracknest/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, String, DateTime, ForeignKey, ForeignKeyConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from tracknest.db.base import Base

class Playlist(Base):
    """Playlist owned by a user, keyed by (name, username)"""
    __tablename__ = "playlists"

    name = Column(String(255), primary_key=True)
    username = Column(
        String(255), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True
    )
    creation_date = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="playlists")
    inclusions = relationship(
        "Inclusion", back_populates="playlist", cascade="all, delete-orphan"
    )

class Inclusion(Base):
    """Membership of a song in a playlist; the primary key forbids duplicates"""
    __tablename__ = "inclusions"
    __table_args__ = (
        ForeignKeyConstraint(
            ["playlist_name", "username"],
            ["playlists.name", "playlists.username"],
            ondelete="CASCADE",
        ),
        ForeignKeyConstraint(
            ["song_title", "artist_name", "album_title"],
            ["songs.song_title", "songs.artist_name", "songs.album_title"],
        ),
    )

    playlist_name = Column(String(255), primary_key=True)
    username = Column(String(255), primary_key=True)
    song_title = Column(String(255), primary_key=True)
    artist_name = Column(String(255), primary_key=True)
    album_title = Column(String(255), primary_key=True)

    # Relationships
    playlist = relationship("Playlist", back_populates="inclusions")
