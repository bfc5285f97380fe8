"""
Tests for the HTTP API: /api/health and /api/solve.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from watersort.api import create_app
from watersort.api import routes
from watersort.api.validation import RequestValidationError, parse_solve_request


@pytest.fixture
def client():
    app = create_app({"max_states": 50_000})
    app.config["TESTING"] = True
    return app.test_client()


def solve_body(vials, **extra):
    body = {"gameState": {"vials": vials}}
    body.update(extra)
    return body


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "ok"
    assert "T" in data["timestamp"]


def test_solve_strict_by_default(client):
    response = client.post("/api/solve", json=solve_body([["red", "red"], ["red", "red"]]))

    assert response.status_code == 200
    assert response.get_json() == {
        "success": True,
        "moves": [{"from": 0, "to": 1, "color": "red", "units": 2}],
    }


def test_solve_loose_already_solved(client):
    response = client.post(
        "/api/solve",
        json=solve_body([["red", "red"], ["red", "red"]], strictMode=False),
    )

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "moves": []}


def test_solve_no_solution_is_200(client):
    response = client.post("/api/solve", json=solve_body([["red", "blue"], ["blue", "red"]]))

    assert response.status_code == 200
    data = response.get_json()
    assert data["success"] is False
    assert data["moves"] == []
    assert data["message"].startswith("No solution found")


def test_solve_request_budget(client):
    vials = [["red", "blue", "red"], ["blue", "red", "blue"], []]

    response = client.post("/api/solve", json=solve_body(vials, maxStates=1))
    data = response.get_json()
    assert response.status_code == 200
    assert data["success"] is False
    assert "too complex" in data["message"]

    response = client.post("/api/solve", json=solve_body(vials, maxStates=10_000_000))
    assert response.get_json()["success"] is True


def test_request_budget_capped_by_server(monkeypatch, client):
    seen = {}
    original = routes.solve_puzzle

    def recording_solve(vials, strict_mode, max_states):
        seen["max_states"] = max_states
        return original(vials, strict_mode=strict_mode, max_states=max_states)

    monkeypatch.setattr(routes, "solve_puzzle", recording_solve)
    client.post("/api/solve", json=solve_body([["blue"], ["blue"], []], maxStates=10_000_000))

    assert seen["max_states"] == 50_000


@pytest.mark.parametrize("body, fragment", [
    ([1, 2], "JSON object"),
    ({}, "gameState"),
    ({"gameState": {}}, "gameState.vials"),
    ({"gameState": {"vials": "red"}}, "gameState.vials"),
    ({"gameState": {"vials": ["red"]}}, "gameState.vials[0]"),
    ({"gameState": {"vials": [["red", 3]]}}, "strings"),
    ({"gameState": {"vials": [["red"] * 5]}}, "capacity"),
    ({"gameState": {"vials": []}, "strictMode": "yes"}, "strictMode"),
    ({"gameState": {"vials": []}, "maxStates": 0}, "maxStates"),
    ({"gameState": {"vials": []}, "maxStates": True}, "maxStates"),
])
def test_solve_rejects_malformed_body(client, body, fragment):
    response = client.post("/api/solve", json=body)

    assert response.status_code == 400
    data = response.get_json()
    assert data["success"] is False
    assert data["moves"] == []
    assert fragment in data["message"]


def test_solve_rejects_non_json(client):
    response = client.post("/api/solve", data="not json", content_type="text/plain")

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_solve_unexpected_error_is_500(monkeypatch, client):
    def broken_solve(*args, **kwargs):
        raise RuntimeError("solver exploded")

    monkeypatch.setattr(routes, "solve_puzzle", broken_solve)
    response = client.post("/api/solve", json=solve_body([["red"], []]))

    assert response.status_code == 500
    assert response.get_json() == {
        "success": False,
        "moves": [],
        "message": "solver exploded",
    }


def test_parse_solve_request_defaults():
    request = parse_solve_request({"gameState": {"vials": [["red"], []]}})

    assert request.vials == [["red"], []]
    assert request.strict_mode is True
    assert request.max_states is None


def test_parse_solve_request_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_solve_request(None)
    with pytest.raises(RequestValidationError):
        parse_solve_request({"gameState": {"vials": [[None]]}})
