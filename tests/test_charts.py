# tests/test_charts.py
import fnmatch

from tracknest.db import seed as seed_module
from tracknest.db.models.chart import ChartEntry, TopChart
from tracknest.db.seed import load_catalog
from tracknest.services import chart_service as chart_module


class FakeCache:
    def __init__(self):
        self.store = {}

    def get_cache(self, key):
        return self.store.get(key)

    def set_cache(self, key, value, expire=None):
        self.store[key] = value
        return True

    def invalidate(self, pattern):
        stale = fnmatch.filter(self.store, pattern)
        for key in stale:
            del self.store[key]
        return len(stale)


def test_chart_names(client):
    res = client.get("/api/top-charts")
    assert res.status_code == 200
    assert res.json() == [{"chartName": "Global Top 50"}, {"chartName": "Indie Picks"}]


def test_chart_names_empty_is_not_an_error(client, db):
    db.query(ChartEntry).delete()
    db.query(TopChart).delete()
    db.commit()
    res = client.get("/api/top-charts")
    assert res.status_code == 200
    assert res.json() == []


def test_chart_dates_newest_first(client):
    res = client.get("/api/top-charts/Global Top 50/dates")
    assert res.status_code == 200
    assert res.json() == [{"chartDate": "2024-05-01"}, {"chartDate": "2024-04-24"}]


def test_chart_dates_unknown_chart(client):
    res = client.get("/api/top-charts/Nope/dates")
    assert res.status_code == 404
    assert res.json()["message"] == "Top chart not found or no dates available."


def test_chart_songs_by_plays_desc(client):
    res = client.get("/api/top-charts/Global Top 50/2024-05-01/songs")
    assert res.status_code == 200
    assert [r["songTitle"] for r in res.json()] == ["Fern", "Dawn", "Glass"]


def test_chart_songs_unknown_date(client):
    res = client.get("/api/top-charts/Global Top 50/2023-01-01/songs")
    assert res.status_code == 404
    assert res.json()["message"] == "Top chart not found for the specified name and date."


def test_chart_songs_malformed_date_is_not_found(client):
    res = client.get("/api/top-charts/Global Top 50/yesterday/songs")
    assert res.status_code == 404
    assert res.json()["message"] == "Top chart not found for the specified name and date."


def test_chart_lookups_are_cached(client, db, monkeypatch):
    fake = FakeCache()
    monkeypatch.setattr(chart_module, "cache", fake)

    first = client.get("/api/top-charts/Indie Picks/2024-05-01/songs").json()
    assert "charts:Indie Picks:2024-05-01:songs" in fake.store

    db.query(ChartEntry).delete()
    db.commit()
    assert client.get("/api/top-charts/Indie Picks/2024-05-01/songs").json() == first

    client.get("/api/top-charts/Indie Picks/dates")
    assert fake.store["charts:Indie Picks:dates"] == [{"chart_date": "2024-05-01"}]


def test_loading_catalog_drops_cached_chart_lookups(client, db, monkeypatch):
    fake = FakeCache()
    monkeypatch.setattr(chart_module, "cache", fake)
    monkeypatch.setattr(seed_module, "cache", fake)
    fake.store["playlists:unrelated"] = ["kept"]

    assert len(client.get("/api/top-charts").json()) == 2
    assert len(client.get("/api/top-charts/Indie Picks/dates").json()) == 1

    load_catalog(db, {"charts": [
        {"chartName": "Indie Picks", "chartDate": "2024-05-08", "songs": [
            {"songTitle": "Fern", "artistName": "Ivy", "albumTitle": "Greenhouse"},
        ]},
        {"chartName": "Fresh Finds", "chartDate": "2024-05-08", "songs": []},
    ]})
    assert fake.store == {"playlists:unrelated": ["kept"]}

    res = client.get("/api/top-charts")
    assert [r["chartName"] for r in res.json()] == ["Fresh Finds", "Global Top 50", "Indie Picks"]
    res = client.get("/api/top-charts/Indie Picks/dates")
    assert res.json() == [{"chartDate": "2024-05-08"}, {"chartDate": "2024-05-01"}]
