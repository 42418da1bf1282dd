# ============================================================================
# FILE: tracknest/schemas/music.py
# ============================================================================
from typing import NamedTuple, Optional
from tracknest.schemas.base import CamelModel

class SongKey(NamedTuple):
    """Natural key of a catalog song; the only song identity that crosses the wire"""
    song_title: str
    artist_name: str
    album_title: str

class SongRef(CamelModel):
    """Request body naming one song by its key triple"""
    song_title: Optional[str] = None
    artist_name: Optional[str] = None
    album_title: Optional[str] = None

    def key(self) -> Optional[SongKey]:
        """Return the key, or None if any part is missing or empty"""
        if not (self.song_title and self.artist_name and self.album_title):
            return None
        return SongKey(self.song_title, self.artist_name, self.album_title)

class SongInfo(CamelModel):
    """Song row as returned by playlist, like and chart listings"""
    song_title: str
    artist_name: str
    album_title: str
    duration: Optional[int] = None  # Duration in seconds
    plays: int = 0

class SearchResult(SongInfo):
    """Search row; includes the song's genre"""
    genre_name: Optional[str] = None

class Recommendation(SongInfo):
    """Scored recommendation row"""
    genre_name: Optional[str] = None
    score: int
