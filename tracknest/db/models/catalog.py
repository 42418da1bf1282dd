
# ============================================================================
# FILE: tracknest/db/models/catalog.py
# Read-only catalog dimensions: artists, albums, genres, songs
# ============================================================================
from sqlalchemy import Column, Integer, String, ForeignKey, ForeignKeyConstraint
from tracknest.db.base import Base

class Artist(Base):
    __tablename__ = "artists"

    artist_name = Column(String(255), primary_key=True)

class Album(Base):
    __tablename__ = "albums"

    album_title = Column(String(255), primary_key=True)
    artist_name = Column(String(255), ForeignKey("artists.artist_name"), primary_key=True)

class Genre(Base):
    __tablename__ = "genres"

    genre_name = Column(String(255), primary_key=True)

class Song(Base):
    """Catalog song keyed by (song_title, artist_name, album_title)"""
    __tablename__ = "songs"
    __table_args__ = (
        ForeignKeyConstraint(
            ["album_title", "artist_name"],
            ["albums.album_title", "albums.artist_name"],
        ),
    )

    song_title = Column(String(255), primary_key=True)
    artist_name = Column(String(255), ForeignKey("artists.artist_name"), primary_key=True)
    album_title = Column(String(255), primary_key=True)
    duration = Column(Integer, nullable=True)  # seconds
    plays = Column(Integer, nullable=False, default=0)

class Classification(Base):
    """Song-to-genre join; one genre per song in practice"""
    __tablename__ = "classifications"
    __table_args__ = (
        ForeignKeyConstraint(
            ["song_title", "artist_name", "album_title"],
            ["songs.song_title", "songs.artist_name", "songs.album_title"],
            ondelete="CASCADE",
        ),
    )

    song_title = Column(String(255), primary_key=True)
    artist_name = Column(String(255), primary_key=True)
    album_title = Column(String(255), primary_key=True)
    genre_name = Column(String(255), ForeignKey("genres.genre_name"), primary_key=True)
