# ============================================================================
# FILE: tracknest/db/seed.py
# Load catalog and chart data from a JSON document
# ============================================================================
"""
Catalog loader.

Songs, artists, albums, genres and charts are never written through the
API, so they are loaded from a JSON document shaped like:

    {
      "songs": [
        {"songTitle": "...", "artistName": "...", "albumTitle": "...",
         "genreName": "...", "duration": 215, "plays": 1200}
      ],
      "charts": [
        {"chartName": "...", "chartDate": "2024-05-01",
         "songs": [{"songTitle": "...", "artistName": "...", "albumTitle": "..."}]}
      ]
    }

`artists`, `albums` and `genres` lists are optional; any dimension row a
song references is created on the fly. Loading is idempotent.

Usage:
    python -m tracknest.db.seed catalog.json
"""
import argparse
import json
import logging
from datetime import date
from typing import Dict, Iterable
from sqlalchemy.orm import Session
from tracknest.core.cache import cache
from tracknest.db.base import Base, import_models
from tracknest.db.models.catalog import Artist, Album, Genre, Song, Classification
from tracknest.db.models.chart import TopChart, ChartEntry

logger = logging.getLogger(__name__)


def _names(items: Iterable, key: str):
    for item in items or []:
        yield item[key] if isinstance(item, dict) else item


def load_catalog(db: Session, data: Dict) -> Dict[str, int]:
    """Merge catalog rows from `data` into the database and commit. Returns row counts per kind."""
    counts = {"artists": 0, "albums": 0, "genres": 0, "songs": 0, "charts": 0, "chart_entries": 0}

    artists = set(_names(data.get("artists"), "artistName"))
    genres = set(_names(data.get("genres"), "genreName"))
    albums = {(a["albumTitle"], a["artistName"]) for a in data.get("albums") or []}

    # Last occurrence of a song key wins
    songs = {}
    for song in data.get("songs") or []:
        songs[(song["songTitle"], song["artistName"], song["albumTitle"])] = song
        artists.add(song["artistName"])
        albums.add((song["albumTitle"], song["artistName"]))
        if song.get("genreName"):
            genres.add(song["genreName"])
    for _, artist_name in albums:
        artists.add(artist_name)

    # Mappers carry no relationships, so the unit of work does not order
    # inserts across tables; each parent group is flushed before its children.
    try:
        for name in sorted(artists):
            db.merge(Artist(artist_name=name))
        for name in sorted(genres):
            db.merge(Genre(genre_name=name))
        db.flush()

        for title, artist_name in sorted(albums):
            db.merge(Album(album_title=title, artist_name=artist_name))
        db.flush()

        for (title, artist_name, album_title), song in songs.items():
            db.merge(Song(
                song_title=title,
                artist_name=artist_name,
                album_title=album_title,
                duration=song.get("duration"),
                plays=song.get("plays", 0),
            ))
        db.flush()

        for (title, artist_name, album_title), song in songs.items():
            if song.get("genreName"):
                db.merge(Classification(
                    song_title=title,
                    artist_name=artist_name,
                    album_title=album_title,
                    genre_name=song["genreName"],
                ))
        db.flush()

        for chart in data.get("charts") or []:
            chart_date = date.fromisoformat(chart["chartDate"])
            db.merge(TopChart(chart_name=chart["chartName"], chart_date=chart_date))
            db.flush()
            for entry in chart.get("songs") or []:
                db.merge(ChartEntry(
                    chart_name=chart["chartName"],
                    chart_date=chart_date,
                    song_title=entry["songTitle"],
                    artist_name=entry["artistName"],
                    album_title=entry["albumTitle"],
                ))
                counts["chart_entries"] += 1
            counts["charts"] += 1

        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Catalog load failed: {e}")
        raise

    # Chart names and dates may have changed
    cache.invalidate("charts:*")

    counts.update(artists=len(artists), albums=len(albums), genres=len(genres), songs=len(songs))
    logger.info(f"Catalog loaded: {counts}")
    return counts


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load TrackNest catalog data from JSON")
    parser.add_argument("path", help="JSON catalog document")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    args = parser.parse_args(argv)

    from tracknest.core.logging import setup_logging
    from tracknest.db.session import SessionLocal, engine
    setup_logging()

    import_models()
    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    with open(args.path, encoding="utf-8") as f:
        data = json.load(f)

    db = SessionLocal()
    try:
        counts = load_catalog(db, data)
    finally:
        db.close()
    print(json.dumps(counts, indent=2))


if __name__ == "__main__":
    main()
