import pytest
from fastapi.testclient import TestClient

from api.main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def _add(client, players, name, handicap_index=0, tee="White"):
    resp = client.post("/api/rounds/players", json={
        "name": name,
        "handicap_index": handicap_index,
        "tee": tee,
        "course_id": "liphook",
        "player_id": name.lower(),
        "players": players,
    })
    assert resp.status_code == 200, resp.text
    return resp.json()


# ================================================================
# Courses
# ================================================================

def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "courses": 2}


def test_list_courses(client):
    resp = client.get("/api/courses")
    assert resp.status_code == 200
    by_id = {c["id"]: c for c in resp.json()}
    assert by_id["liphook"]["par"] == 71
    assert by_id["liphook"]["tees"] == ["Yellow", "White", "Blue"]
    assert by_id["elie-ghc"]["tee_count"] == 4


def test_get_course(client):
    resp = client.get("/api/courses/liphook")
    assert resp.status_code == 200
    assert len(resp.json()["holes"]) == 18

    assert client.get("/api/courses/nowhere").status_code == 404


def test_handicap_strokes(client):
    resp = client.get(
        "/api/courses/liphook/handicap",
        params={"tee": "Yellow", "handicap_index": 18.4},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["course_handicap"] == 21
    # Stroke index 1 (hole 4) gets two strokes, stroke index 18 one
    assert body["strokes_by_hole"]["4"] == 2
    assert body["strokes_by_hole"]["18"] == 1
    assert body["max_score_by_hole"]["4"] == 8


def test_handicap_unknown_tee(client):
    resp = client.get(
        "/api/courses/liphook/handicap",
        params={"tee": "Gold", "handicap_index": 10},
    )
    assert resp.status_code == 404


# ================================================================
# Rounds
# ================================================================

def test_add_players_and_format(client):
    body = _add(client, [], "Ann")
    assert body["scoring_format"] == "stableford"
    body = _add(client, body["players"], "Bob")
    assert body["scoring_format"] == "match_play"
    assert [p["id"] for p in body["players"]] == ["ann", "bob"]


def test_add_player_validation(client):
    players = _add(client, [], "Ann")["players"]
    resp = client.post("/api/rounds/players", json={
        "name": "ann", "handicap_index": 10, "tee": "White", "players": players,
    })
    assert resp.status_code == 422
    assert "already exists" in resp.json()["detail"]


def test_confirm_and_results(client):
    players = _add(client, [], "Ann")["players"]
    players = _add(client, players, "Bob")["players"]

    # Hole 1 at Liphook is a par 3
    resp = client.post("/api/rounds/confirm", json={
        "players": players, "hole_index": 0, "scores": {"ann": 2, "bob": 3},
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["holes_completed"] == 1
    assert [p["total_points"] for p in body["players"]] == [3, 2]

    resp = client.post("/api/rounds/results", json={
        "players": body["players"], "holes_played": 1,
    })
    assert resp.status_code == 200
    results = resp.json()
    assert results["winner_id"] == "ann"
    assert results["match"]["status"] == "1 Up"


def test_confirm_unknown_player(client):
    players = _add(client, [], "Ann")["players"]
    resp = client.post("/api/rounds/confirm", json={
        "players": players, "hole_index": 0, "scores": {"zed": 4},
    })
    assert resp.status_code == 404


def test_confirm_without_scores(client):
    players = _add(client, [], "Ann")["players"]
    resp = client.post("/api/rounds/confirm", json={
        "players": players, "hole_index": 0, "scores": {"ann": 0},
    })
    assert resp.status_code == 422


def test_scorecard_totals(client):
    players = _add(client, [], "Ann")["players"]
    players = client.post("/api/rounds/confirm", json={
        "players": players, "hole_index": 0, "scores": {"ann": 3},
    }).json()["players"]
    resp = client.post("/api/rounds/scorecard", json={"players": players})
    assert resp.status_code == 200
    [card] = resp.json()
    assert card["front_nine"]["gross"] == 3
    assert card["total"]["points"] == 2


# ================================================================
# Games
# ================================================================

def test_six_points_hole_requires_three(client):
    players = _add(client, [], "Ann")["players"]
    resp = client.post("/api/games/six-points/hole", json={
        "players": players, "hole_index": 0,
    })
    assert resp.status_code == 422


def test_six_points_status(client):
    players = []
    for name in ("Ann", "Bob", "Cat"):
        players = _add(client, players, name)["players"]
    players = client.post("/api/rounds/confirm", json={
        "players": players, "hole_index": 0, "scores": {"ann": 3, "bob": 4, "cat": 5},
    }).json()["players"]

    resp = client.post("/api/games/six-points/status", json={
        "players": players, "holes_played": 1,
    })
    assert resp.status_code == 200
    assert resp.json()["summary"] == "Ann leading with 4 six points after 1 hole"


def test_confirm_counts_from_start_hole(client):
    players = _add(client, [], "Ann")["players"]
    players = _add(client, players, "Bob")["players"]

    resp = client.post("/api/rounds/confirm", json={
        "players": players, "hole_index": 9, "scores": {"ann": 4, "bob": 5},
        "start_hole_index": 9,
    })
    assert resp.status_code == 200
    assert resp.json()["holes_completed"] == 1
