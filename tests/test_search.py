# tests/test_search.py
from conftest import DAWN, DUSK, FERN, MOSS, song_body, keys_of


def titles(res):
    return [row["songTitle"] for row in res.json()]


def test_search_without_filters_returns_all_by_plays_desc(client):
    res = client.get("/api/search")
    assert res.status_code == 200
    assert titles(res) == ["Fern", "Dawn", "Dusk", "Ripple", "Mirror", "Gale", "Glass", "Noon", "Moss"]


def test_search_rows_carry_genre_and_stats(client):
    res = client.get("/api/search", params={"songTitle": "fern"})
    assert res.json() == [{
        "songTitle": "Fern",
        "artistName": "Ivy",
        "albumTitle": "Greenhouse",
        "genreName": "Pop",
        "plays": 1000,
        "duration": 200,
    }]


def test_search_ascending(client):
    res = client.get("/api/search", params={"sortOrder": "asc"})
    plays = [row["plays"] for row in res.json()]
    assert plays == sorted(plays)


def test_search_unknown_sort_order_falls_back_to_desc(client):
    res = client.get("/api/search", params={"sortOrder": "sideways"})
    plays = [row["plays"] for row in res.json()]
    assert plays == sorted(plays, reverse=True)


def test_search_filters_are_case_insensitive_substrings_and_combined(client):
    assert titles(client.get("/api/search", params={"artistName": "NOV"})) == ["Dawn", "Dusk", "Gale", "Noon"]
    assert titles(client.get("/api/search", params={"albumTitle": "reflect"})) == ["Ripple", "Mirror", "Glass"]
    assert titles(client.get("/api/search", params={"genreName": "pop"})) == ["Fern", "Dawn", "Dusk"]
    assert titles(client.get("/api/search", params={"artistName": "ivy", "genreName": "folk"})) == ["Ripple", "Moss"]


def test_empty_filters_are_ignored(client):
    res = client.get("/api/search", params={"songTitle": "", "artistName": ""})
    assert len(res.json()) == 9


def test_search_no_match(client):
    assert client.get("/api/search", params={"songTitle": "zzz"}).json() == []


def test_liked_filter_requires_authentication(client):
    res = client.get("/api/search", params={"liked": "true"})
    assert res.status_code == 401
    assert res.json()["message"] == "Authentication required to filter liked songs."


def test_liked_filter_with_invalid_token_is_unauthorized(client):
    res = client.get("/api/search", params={"liked": "true"}, headers={"x-auth-token": "garbage"})
    assert res.status_code == 401


def test_liked_filter_restricts_to_callers_likes(client, alice, bob):
    for key in (DAWN, MOSS):
        client.post("/api/likes", json=song_body(key), headers=alice)
    client.post("/api/likes", json=song_body(FERN), headers=bob)

    res = client.get("/api/search", params={"liked": "true"}, headers=alice)
    assert keys_of(res.json()) == [DAWN, MOSS]

    res = client.get("/api/search", params={"liked": "true", "artistName": "nova"}, headers=alice)
    assert keys_of(res.json()) == [DAWN]


def test_liked_false_ignores_likes(client, alice):
    client.post("/api/likes", json=song_body(DUSK), headers=alice)
    res = client.get("/api/search", params={"liked": "false"}, headers=alice)
    assert len(res.json()) == 9


def test_liked_values_other_than_true_are_ignored(client):
    for value in ("1", "yes", "on", "TRUE", "whatever"):
        res = client.get("/api/search", params={"liked": value})
        assert res.status_code == 200, value
        assert len(res.json()) == 9
