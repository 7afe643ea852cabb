"""API smoke tests for the move-legality endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from api import server
from api.server import app
from movecore.constants import INITIAL_PLACEMENT


client = TestClient(app)

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"


def test_health() -> None:
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json() == {"status": "ok"}


def test_legal_destinations_for_start_pieces() -> None:
    response = client.post("/legal-destinations", json={"placement": INITIAL_PLACEMENT, "square": "e2"})
    assert response.status_code == 200
    assert response.json() == {"square": "e2", "piece": "P", "destinations": ["e3", "e4"]}

    knight = client.post("/legal-destinations", json={"square": "b1"})
    assert knight.json()["destinations"] == ["a3", "c3"]


def test_legal_destinations_for_empty_square() -> None:
    response = client.post("/legal-destinations", json={"square": "e4"})
    assert response.status_code == 200
    assert response.json() == {"square": "e4", "piece": None, "destinations": []}


def test_attacked() -> None:
    payload = {"placement": "R7/8/8/8/8/8/8/8", "square": "h8", "by_color": "w"}
    assert client.post("/attacked", json=payload).json() == {"attacked": True}

    payload["square"] = "h1"
    assert client.post("/attacked", json=payload).json() == {"attacked": False}


def test_describe() -> None:
    response = client.post("/describe", json={"kind": "n", "destination": "f3", "was_capture": True})
    assert response.status_code == 200
    assert response.json() == {"notation": "Nf3x"}


def test_status_reports_checkmate() -> None:
    response = client.post("/status", json={"placement": FOOLS_MATE, "to_move": "w"})
    assert response.status_code == 200
    assert response.json() == {"status": "checkmate", "in_check": True}


def test_move_returns_next_position() -> None:
    response = client.post("/move", json={"from_square": "e2", "to_square": "e4"})
    assert response.status_code == 200
    body = response.json()
    assert body["placement"] == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"
    assert body["to_move"] == "b"
    assert body["last_move"] == "e2e4"
    assert body["notation"] == "e4"
    assert body["captured"] is None
    assert body["status"] == "ongoing"


def test_bad_input_is_rejected() -> None:
    illegal = client.post("/move", json={"from_square": "e2", "to_square": "e5"})
    assert illegal.status_code == 400

    wrong_turn = client.post("/move", json={"from_square": "e7", "to_square": "e5"})
    assert wrong_turn.status_code == 400

    bad_placement = client.post("/legal-destinations", json={"placement": "8/8", "square": "e2"})
    assert bad_placement.status_code == 400

    bad_square = client.post("/legal-destinations", json={"square": "z9"})
    assert bad_square.status_code == 400

    bad_color = client.post("/attacked", json={"square": "e4", "by_color": "red"})
    assert bad_color.status_code == 422


def test_strict_king_applies_to_every_endpoint(monkeypatch) -> None:
    monkeypatch.setattr(server.config, "strict_king", True)
    kingless = "4k3/8/8/8/8/8/8/R7"

    moves = client.post("/legal-destinations", json={"placement": kingless, "square": "a1"})
    assert moves.status_code == 400

    status = client.post("/status", json={"placement": kingless, "to_move": "w"})
    assert status.status_code == 400

    move = client.post("/move", json={"placement": kingless, "from_square": "a1", "to_square": "a2"})
    assert move.status_code == 400

    normal = client.post("/move", json={"from_square": "e2", "to_square": "e4"})
    assert normal.status_code == 200
