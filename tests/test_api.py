from __future__ import annotations

from web import create_app


def _client():
    return create_app().test_client()


def test_new_game_snapshot():
    client = _client()
    r = client.post("/api/new", json={})
    assert r.status_code == 200
    data = r.get_json()
    assert data["fen"] == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
    assert data["turn"] == "white"
    assert data["move_count"] == 0
    assert data["status"] == "running"


def test_step_applies_first_candidate():
    client = _client()
    client.post("/api/new", json={})
    data = client.post("/api/step").get_json()
    assert data["move"] == "a2a3"
    assert data["winner"] is None
    assert data["turn"] == "black"
    data = client.get("/api/state").get_json()
    assert data["last_move"] == "a2a3"
    assert data["candidates"][0] == "b8c6"


def test_play_with_move_limit():
    client = _client()
    r = client.post("/api/play", json={"time_limit": 300, "move_limit": 1})
    assert r.status_code == 200
    data = r.get_json()
    assert data["outcome"] == "stopped_by_move_limit"
    assert data["message"] == "Game over! Move limit of 1 moves reached."
    assert len(data["frames"]) == 1
    assert data["frames"][0].startswith("r n b q k b n r")
    assert data["turn"] == "black"


def test_play_rejects_bad_limits():
    client = _client()
    r = client.post("/api/play", json={"move_limit": -1})
    assert r.status_code == 400
    assert "error" in r.get_json()
    r = client.post("/api/play", json={"time_limit": "soon"})
    assert r.status_code == 400


def test_play_rejects_non_finite_and_non_object_payloads():
    client = _client()
    r = client.post("/api/play", json={"time_limit": "nan", "move_limit": 3})
    assert r.status_code == 400
    r = client.post("/api/play", json=[1])
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_step_after_play_reports_running_again():
    client = _client()
    data = client.post("/api/play", json={"move_limit": 1}).get_json()
    assert data["status"] == "stopped_by_move_limit"
    data = client.post("/api/step").get_json()
    assert data["move_count"] == 2
    assert data["status"] == "running"
    assert data["winner"] is None
