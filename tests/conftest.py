# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tracknest.main import app
from tracknest.core import cache as cache_module
from tracknest.db.base import Base, import_models
from tracknest.db.session import get_db
from tracknest.db.seed import load_catalog
from tracknest.schemas.music import SongKey


def _song(title, artist, album, genre, plays, duration=200):
    return {
        "songTitle": title,
        "artistName": artist,
        "albumTitle": album,
        "genreName": genre,
        "plays": plays,
        "duration": duration,
    }


# Two artists share the album title "Reflections" on purpose: album matches
# in recommendations are by title only.
CATALOG = {
    "songs": [
        _song("Dawn", "Nova", "First Light", "Pop", 900),
        _song("Dusk", "Nova", "First Light", "Pop", 700),
        _song("Noon", "Nova", "First Light", "Rock", 100),
        _song("Gale", "Nova", "Second Wind", "Rock", 300),
        _song("Mirror", "Echo", "Reflections", "Jazz", 400),
        _song("Glass", "Echo", "Reflections", "Jazz", 200),
        _song("Ripple", "Ivy", "Reflections", "Folk", 600),
        _song("Fern", "Ivy", "Greenhouse", "Pop", 1000),
        _song("Moss", "Ivy", "Greenhouse", "Folk", 50),
    ],
    "charts": [
        {
            "chartName": "Global Top 50",
            "chartDate": "2024-05-01",
            "songs": [
                {"songTitle": "Glass", "artistName": "Echo", "albumTitle": "Reflections"},
                {"songTitle": "Fern", "artistName": "Ivy", "albumTitle": "Greenhouse"},
                {"songTitle": "Dawn", "artistName": "Nova", "albumTitle": "First Light"},
            ],
        },
        {
            "chartName": "Global Top 50",
            "chartDate": "2024-04-24",
            "songs": [
                {"songTitle": "Dawn", "artistName": "Nova", "albumTitle": "First Light"},
            ],
        },
        {
            "chartName": "Indie Picks",
            "chartDate": "2024-05-01",
            "songs": [
                {"songTitle": "Moss", "artistName": "Ivy", "albumTitle": "Greenhouse"},
            ],
        },
    ],
}

DAWN = SongKey("Dawn", "Nova", "First Light")
DUSK = SongKey("Dusk", "Nova", "First Light")
NOON = SongKey("Noon", "Nova", "First Light")
GALE = SongKey("Gale", "Nova", "Second Wind")
MIRROR = SongKey("Mirror", "Echo", "Reflections")
GLASS = SongKey("Glass", "Echo", "Reflections")
RIPPLE = SongKey("Ripple", "Ivy", "Reflections")
FERN = SongKey("Fern", "Ivy", "Greenhouse")
MOSS = SongKey("Moss", "Ivy", "Greenhouse")


def song_body(key: SongKey) -> dict:
    return {"songTitle": key.song_title, "artistName": key.artist_name, "albumTitle": key.album_title}


def keys_of(rows) -> list:
    return [SongKey(r["songTitle"], r["artistName"], r["albumTitle"]) for r in rows]


@pytest.fixture(autouse=True)
def no_redis(monkeypatch):
    """Tests never talk to a real Redis"""
    monkeypatch.setattr(cache_module.cache, "redis_client", None)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    import_models()
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    load_catalog(session, CATALOG)
    yield session
    session.close()


@pytest.fixture
def client(db, session_factory):
    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    """
    Usage:
      headers = register_user("alice")
    Registers, logs in and returns the auth header dict.
    """
    def _register(username, email=None, password="secret123", bio=None):
        email = email or f"{username}@tracknest.io"
        res = client.post("/api/register", json={
            "username": username, "email": email, "password": password, "bio": bio,
        })
        assert res.status_code == 201, res.text
        res = client.post("/api/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        return {"x-auth-token": res.json()["token"]}
    return _register


@pytest.fixture
def alice(register_user):
    return register_user("alice")


@pytest.fixture
def bob(register_user):
    return register_user("bob")
