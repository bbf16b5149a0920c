"""
Tests for the JSON command API.
"""

import pytest
from fastapi.testclient import TestClient
from skullking_engine.main import app


@pytest.fixture
def client():
    return TestClient(app)


def new_session(client, *names, start=False):
    response = client.post("/sessions")
    assert response.status_code == 201
    sid = response.json()["state"]["id"]
    for name in names:
        assert client.post(f"/sessions/{sid}/players", json={"name": name}).status_code == 200
    if start:
        assert client.post(f"/sessions/{sid}/start").status_code == 200
    return sid


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_full_round_flow(client):
    sid = new_session(client, "P1", "P2", start=True)
    response = client.post(f"/sessions/{sid}/rounds", json={"entries": [
        {"bet": 3, "tricks_won": 3},
        {"bet": 2, "tricks_won": 0},
    ]})
    assert response.status_code == 200
    body = response.json()
    assert body["game_end"] is None
    assert body["state"]["current_round"] == 2
    assert [p["total_score"] for p in body["state"]["players"]] == [60, -20]


def test_duplicate_and_empty_names(client):
    sid = new_session(client, "Alice")
    response = client.post(f"/sessions/{sid}/players", json={"name": "Alice"})
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "DUPLICATE_NAME"

    response = client.post(f"/sessions/{sid}/players", json={"name": "  "})
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "EMPTY_NAME"


def test_start_needs_two_players(client):
    sid = new_session(client, "Alice")
    response = client.post(f"/sessions/{sid}/start")
    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "INSUFFICIENT_PLAYERS"


def test_invalid_round_rejected(client):
    sid = new_session(client, "Alice", "Bob", start=True)
    response = client.post(f"/sessions/{sid}/rounds", json={"entries": [
        {"bet": 11, "tricks_won": 3},
        {"bet": 2, "tricks_won": 2},
    ]})
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_INPUT"
    state = client.get(f"/sessions/{sid}").json()["state"]
    assert state["current_round"] == 1
    assert all(p["rounds"] == [] for p in state["players"])


def test_remove_after_start_rejected(client):
    sid = new_session(client, "Alice", "Bob", start=True)
    response = client.delete(f"/sessions/{sid}/players/0")
    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "ROSTER_FROZEN"


def test_remove_before_start(client):
    sid = new_session(client, "Alice", "Bob")
    response = client.delete(f"/sessions/{sid}/players/0")
    assert response.status_code == 200
    assert [p["name"] for p in response.json()["state"]["players"]] == ["Bob"]


def test_unknown_session(client):
    assert client.get("/sessions/nope").status_code == 404
    response = client.post("/sessions/nope/start")
    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "SESSION_NOT_FOUND"


def test_game_end_and_reset(client):
    sid = new_session(client, "Alice", "Bob", start=True)
    entries = {"entries": [{"bet": 1, "tricks_won": 1}, {"bet": 1, "tricks_won": 0}]}

    response = client.post(f"/sessions/{sid}/reset", json={})
    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "CONFIRMATION_REQUIRED"

    body = None
    for _ in range(10):
        body = client.post(f"/sessions/{sid}/rounds", json=entries).json()
    assert body["state"]["phase"] == "ended"
    assert body["game_end"]["winner"]["name"] == "Alice"

    response = client.post(f"/sessions/{sid}/rounds", json=entries)
    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "GAME_OVER"

    response = client.post(f"/sessions/{sid}/reset", json={})
    assert response.status_code == 200
    state = response.json()["state"]
    assert state["phase"] == "setup"
    assert state["players"] == []


def test_confirmed_reset_mid_game(client):
    sid = new_session(client, "Alice", "Bob", start=True)
    response = client.post(f"/sessions/{sid}/reset", json={"confirmed": True})
    assert response.status_code == 200
    assert response.json()["state"]["current_round"] == 1


@pytest.mark.parametrize("bad_entry", [
    {"bet": True, "tricks_won": True},
    {"bet": 1.5, "tricks_won": 1},
    {"bet": "x", "tricks_won": 1},
    {"bet": 2, "tricks_won": None},
])
def test_non_integral_values_rejected_as_invalid_input(client, bad_entry):
    sid = new_session(client, "Alice", "Bob", start=True)
    response = client.post(f"/sessions/{sid}/rounds", json={"entries": [
        {"bet": 1, "tricks_won": 1},
        bad_entry,
    ]})
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_INPUT"
    state = client.get(f"/sessions/{sid}").json()["state"]
    assert state["current_round"] == 1
    assert all(p["rounds"] == [] for p in state["players"])


def test_string_counts_are_accepted(client):
    sid = new_session(client, "Alice", "Bob", start=True)
    response = client.post(f"/sessions/{sid}/rounds", json={"entries": [
        {"bet": "3", "tricks_won": 3},
        {"bet": 2.0, "tricks_won": "0"},
    ]})
    assert response.status_code == 200
    assert [p["total_score"] for p in response.json()["state"]["players"]] == [60, -20]


@pytest.mark.parametrize("body", [{}, {"entries": "3,3"}, {"entries": [5]}])
def test_malformed_round_body_is_invalid_input(client, body):
    sid = new_session(client, "Alice", "Bob", start=True)
    response = client.post(f"/sessions/{sid}/rounds", json=body)
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_INPUT"


def test_malformed_player_body_keeps_default_validation(client):
    sid = new_session(client)
    response = client.post(f"/sessions/{sid}/players", json={})
    assert response.status_code == 422
