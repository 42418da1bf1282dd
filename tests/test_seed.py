# tests/test_seed.py
import json

from sqlalchemy.orm import sessionmaker

from tracknest.db.models.catalog import Album, Artist, Classification, Genre, Song
from tracknest.db.models.chart import ChartEntry, TopChart
from tracknest.db.seed import load_catalog, main

from conftest import CATALOG


def test_catalog_fixture_counts(db):
    assert db.query(Song).count() == 9
    assert db.query(Artist).count() == 3
    # "Reflections" exists once per artist
    assert db.query(Album).count() == 5
    assert db.query(Genre).count() == 4
    assert db.query(Classification).count() == 9
    assert db.query(TopChart).count() == 3
    assert db.query(ChartEntry).count() == 5


def test_reloading_is_idempotent(db):
    load_catalog(db, CATALOG)
    assert db.query(Song).count() == 9
    assert db.query(ChartEntry).count() == 5


def test_reload_updates_play_counts(db):
    load_catalog(db, {"songs": [{
        "songTitle": "Moss", "artistName": "Ivy", "albumTitle": "Greenhouse", "plays": 5000,
    }]})
    moss = db.query(Song).filter(Song.song_title == "Moss").one()
    assert moss.plays == 5000


def test_dimension_rows_created_from_explicit_lists(session_factory):
    db = session_factory()
    counts = load_catalog(db, {
        "artists": ["Solo"],
        "albums": [{"albumTitle": "Debut", "artistName": "Solo"}],
        "genres": [{"genreName": "Ambient"}],
    })
    assert counts["artists"] == 1 and counts["albums"] == 1 and counts["genres"] == 1
    assert db.query(Album).one().artist_name == "Solo"
    db.close()


def test_cli_loads_file(tmp_path, session_factory, monkeypatch):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"songs": [{
        "songTitle": "Hum", "artistName": "Drone", "albumTitle": "Low", "genreName": "Ambient",
    }]}))
    monkeypatch.setattr("tracknest.db.session.SessionLocal", session_factory)

    main([str(path)])

    db = session_factory()
    assert db.query(Song).filter(Song.song_title == "Hum").count() == 1
    db.close()


def test_load_into_fresh_database_without_autoflush(engine):
    # Same session settings as tracknest.db.session.SessionLocal
    db = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    counts = load_catalog(db, {
        "songs": [
            {"songTitle": "Hum", "artistName": "Drone", "albumTitle": "Low", "genreName": "Ambient", "plays": 1},
            {"songTitle": "Hum", "artistName": "Drone", "albumTitle": "Low", "genreName": "Ambient", "plays": 7},
        ],
        "charts": [{"chartName": "Quiet", "chartDate": "2024-01-01", "songs": [
            {"songTitle": "Hum", "artistName": "Drone", "albumTitle": "Low"},
        ]}],
    })
    assert counts["songs"] == 1
    assert db.query(Song).one().plays == 7
    assert db.query(Classification).one().genre_name == "Ambient"
    assert db.query(ChartEntry).one().chart_name == "Quiet"
    db.close()
